from datetime import datetime, timezone

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import ExtensionOID, NameOID

from upkit_x509.basic_constraints import BasicConstraints
from upkit_x509.certificate_policies import OidPolicy, WellKnownCertificatePolicy
from upkit_x509.extended_key_usage import ExtendedKeyUsage
from upkit_x509.extensions import Extensions
from upkit_x509.key_identifier import AuthorityKeyIdentifier, SubjectKeyIdentifier
from upkit_x509.key_usage import KeyUsage


def _sign(extensions):
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Test")])
    builder = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(7)
        .not_valid_before(datetime(2025, 1, 1, tzinfo=timezone.utc))
        .not_valid_after(datetime(2026, 1, 1, tzinfo=timezone.utc))
    )
    for extension in extensions.to_cryptography():
        builder = builder.add_extension(extension.value, extension.critical)
    return builder.sign(key, hashes.SHA256())


def test_empty_extensions_is_none():
    assert Extensions().to_cryptography() is None


def test_empty_lists_add_nothing():
    extensions = Extensions()
    extensions.add_key_usage([])
    extensions.add_extended_key_usage([])
    extensions.add_certificate_policies([])
    assert extensions.to_cryptography() is None


@pytest.mark.parametrize(
    "constraints,critical",
    [(BasicConstraints.new_leaf(), False), (BasicConstraints.new_ca(1), True)],
)
def test_basic_constraints_critical_follows_ca(constraints, critical):
    extensions = Extensions()
    extensions.add_basic_constraints(constraints)
    (extension,) = list(extensions.to_cryptography())
    assert extension.oid == ExtensionOID.BASIC_CONSTRAINTS
    assert extension.critical is critical
    assert extension.value.ca is constraints.is_ca()


def test_key_usage_is_critical():
    extensions = Extensions()
    extensions.add_key_usage([KeyUsage.DIGITAL_SIGNATURE])
    (extension,) = list(extensions.to_cryptography())
    assert extension.oid == ExtensionOID.KEY_USAGE
    assert extension.critical is True
    assert extension.value.digital_signature is True
    assert extension.value.key_cert_sign is False


def test_order_is_preserved():
    extensions = Extensions()
    extensions.add_subject_key_identifier(SubjectKeyIdentifier.from_public_key(b"pk"))
    extensions.add_authority_key_identifier(
        AuthorityKeyIdentifier.from_issuers_subject_key_identifier(b"\x01\x02")
    )
    extensions.add_extended_key_usage([ExtendedKeyUsage.PKIX_SERVER_AUTH])
    extensions.add_crl_distribution_points("http://crl.example.com/ca.crl")
    extensions.add_certificate_policies(
        [OidPolicy(WellKnownCertificatePolicy.CABF_DOMAIN_VALIDATED.as_oid())]
    )
    oids = [extension.oid for extension in extensions.to_cryptography()]
    assert oids == [
        ExtensionOID.SUBJECT_KEY_IDENTIFIER,
        ExtensionOID.AUTHORITY_KEY_IDENTIFIER,
        ExtensionOID.EXTENDED_KEY_USAGE,
        ExtensionOID.CRL_DISTRIBUTION_POINTS,
        ExtensionOID.CERTIFICATE_POLICIES,
    ]
    assert all(not extension.critical for extension in extensions.to_cryptography())


def test_extensions_end_up_in_signed_certificate():
    extensions = Extensions()
    extensions.add_basic_constraints(BasicConstraints.new_ca(None))
    extensions.add_key_usage([KeyUsage.KEY_CERT_SIGN, KeyUsage.CRL_SIGN])
    certificate = _sign(extensions)
    constraints = certificate.extensions.get_extension_for_oid(
        ExtensionOID.BASIC_CONSTRAINTS
    )
    assert constraints.critical is True
    assert constraints.value.ca is True
    usage = certificate.extensions.get_extension_for_oid(ExtensionOID.KEY_USAGE).value
    assert usage.key_cert_sign is True
    assert usage.crl_sign is True


def test_invalid_key_usage_combination_raises():
    extensions = Extensions()
    with pytest.raises(ValueError):
        extensions.add_key_usage([KeyUsage.ENCIPHER_ONLY])