import pytest
from cryptography import x509
from cryptography.x509.oid import ExtendedKeyUsageOID

from upkit_x509.extended_key_usage import CustomExtendedKeyUsage, ExtendedKeyUsage


def test_extension_oid_matches_extension():
    ext = ExtendedKeyUsage.to_cryptography([ExtendedKeyUsage.PKIX_SERVER_AUTH])
    assert tuple(int(part) for part in ext.oid.dotted_string.split(".")) == ExtendedKeyUsage.OID
    assert ext.oid.dotted_string == "2.5.29.37"


def test_server_auth_oid():
    assert ExtendedKeyUsage.PKIX_SERVER_AUTH.oid() == (1, 3, 6, 1, 5, 5, 7, 3, 1)


def test_from_oid_known():
    assert ExtendedKeyUsage.from_oid((1, 3, 6, 1, 5, 5, 7, 3, 1)) is ExtendedKeyUsage.PKIX_SERVER_AUTH
    assert ExtendedKeyUsage.from_oid([2, 16, 840, 1, 113741, 1, 2, 3]) is ExtendedKeyUsage.INTEL_AMT


def test_from_oid_dotted_string_and_object_identifier():
    assert ExtendedKeyUsage.from_oid("0.4.0.2231.3.0") is ExtendedKeyUsage.ETSI_TLS_SIGNING
    assert ExtendedKeyUsage.from_oid(ExtendedKeyUsageOID.CLIENT_AUTH) is ExtendedKeyUsage.PKIX_CLIENT_AUTH


def test_from_oid_unknown_gives_custom():
    eku = ExtendedKeyUsage.from_oid((1, 2, 3, 4))
    assert eku == CustomExtendedKeyUsage((1, 2, 3, 4))
    assert eku.oid() == (1, 2, 3, 4)


def test_efs_and_recovery_are_distinct():
    assert ExtendedKeyUsage.from_oid((1, 3, 6, 1, 4, 1, 311, 10, 3, 4)) is ExtendedKeyUsage.MS_ENCRYPTED_FILE_SYSTEM
    assert (
        ExtendedKeyUsage.from_oid((1, 3, 6, 1, 4, 1, 311, 10, 3, 4, 1))
        is ExtendedKeyUsage.MS_ENCRYPTED_FILE_SYSTEM_RECOVERY
    )


@pytest.mark.parametrize("eku", list(ExtendedKeyUsage))
def test_from_oid_inverts_oid(eku):
    assert ExtendedKeyUsage.from_oid(eku.oid()) is eku


def test_all_oids_are_unique():
    ext = ExtendedKeyUsage.to_cryptography(list(ExtendedKeyUsage))
    dotted = [oid.dotted_string for oid in ext]
    assert len(dotted) == len(ExtendedKeyUsage)
    assert len(set(dotted)) == len(dotted)


def test_to_cryptography_matches_library_constants():
    ext = ExtendedKeyUsage.to_cryptography(
        [ExtendedKeyUsage.PKIX_SERVER_AUTH, ExtendedKeyUsage.PKIX_CODE_SIGNING]
    )
    assert list(ext) == [ExtendedKeyUsageOID.SERVER_AUTH, ExtendedKeyUsageOID.CODE_SIGNING]


def test_round_trip_all_with_custom():
    ekus = list(ExtendedKeyUsage) + [CustomExtendedKeyUsage((1, 2, 3, 4, 5))]
    ext = ExtendedKeyUsage.to_cryptography(ekus)
    assert ExtendedKeyUsage.from_cryptography(ext) == ekus


def test_from_cryptography():
    ext = x509.ExtendedKeyUsage([ExtendedKeyUsageOID.OCSP_SIGNING, x509.ObjectIdentifier("1.2.3")])
    assert ExtendedKeyUsage.from_cryptography(ext) == [
        ExtendedKeyUsage.PKIX_OCSP_SIGNING,
        CustomExtendedKeyUsage((1, 2, 3)),
    ]


def test_custom_from_string_components():
    assert CustomExtendedKeyUsage("1.2.3").oid() == (1, 2, 3)