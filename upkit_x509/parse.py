"""Parser for DER encoded X.509 certificates."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import timezone

from cryptography import x509

from .basic_constraints import BasicConstraints
from .certificate_policies import CertificatePolicy
from .crl_distribution_points import CrlDistributionPoint
from .errors import CertificateParsingErrorKind
from .extended_key_usage import AnyExtendedKeyUsage, ExtendedKeyUsage, _oid_tuple
from .key_identifier import AuthorityKeyIdentifier, SubjectKeyIdentifier
from .key_usage import KeyUsage

_TAG_EXPLICIT_VERSION = 0xA0


def _read_header(data: bytes, offset: int) -> tuple[int, int]:
    """Return (header length, content length) of the DER element at offset."""
    first_length = data[offset + 1]
    if first_length < 0x80:
        return 2, first_length
    count = first_length & 0x7F
    length = int.from_bytes(data[offset + 2 : offset + 2 + count], "big")
    return 2 + count, length


def _children(der: bytes) -> Iterator[bytes]:
    """Yield the encoded elements inside a DER constructed element."""
    header, length = _read_header(der, 0)
    offset, end = header, header + length
    while offset < end:
        child_header, child_length = _read_header(der, offset)
        stop = offset + child_header + child_length
        yield der[offset:stop]
        offset = stop


def _epoch_seconds(certificate: x509.Certificate, name: str) -> int:
    moment = getattr(certificate, f"{name}_utc", None)
    if moment is None:
        moment = getattr(certificate, name).replace(tzinfo=timezone.utc)
    return int(moment.timestamp())


class CertificateParser:
    """Read-only view of a parsed certificate."""

    def __init__(self, certificate: x509.Certificate) -> None:
        self._certificate = certificate
        fields = list(_children(certificate.tbs_certificate_bytes))
        if fields and fields[0][0] == _TAG_EXPLICIT_VERSION:
            fields = fields[1:]
        self._tbs_fields = fields

    @staticmethod
    def from_bytes(encoded_certificate: bytes) -> CertificateParser:
        """Parse a DER encoded certificate.

        Raises CertificateParsingError when the data cannot be decoded.
        """
        try:
            certificate = x509.load_der_x509_certificate(bytes(encoded_certificate))
            return CertificateParser(certificate)
        except (ValueError, IndexError) as exc:
            raise CertificateParsingErrorKind.CERTIFICATE_DECODING_ERROR.error_with_msg(
                f"Error while decoding certificate data: {exc}"
            ) from exc

    def get_validity(self) -> tuple[int, int]:
        """Return (not_before, not_after) in Unix epoch seconds."""
        return (
            _epoch_seconds(self._certificate, "not_valid_before"),
            _epoch_seconds(self._certificate, "not_valid_after"),
        )

    def get_encoded_tbs_certificate(self) -> bytes:
        """Return the DER encoded part of the certificate covered by the signature."""
        return self._certificate.tbs_certificate_bytes

    def get_serial_number(self) -> int:
        """Return the certificate serial number."""
        return self._certificate.serial_number

    def get_encoded_subject(self) -> bytes:
        """Return the subject distinguished name as DER encoded bytes."""
        return self._tbs_fields[4]

    def get_encoded_issuer(self) -> bytes:
        """Return the issuer distinguished name as DER encoded bytes."""
        return self._tbs_fields[2]

    def get_encoded_subject_public_key_info(self) -> bytes:
        """Return the Subject Public Key Info as DER encoded bytes."""
        return self._tbs_fields[5]

    def get_encoded_signature(self) -> tuple[str, bytes]:
        """Return the signature algorithm OID and the signature bytes.

        Signature algorithm parameters are ignored.
        """
        return (
            self._certificate.signature_algorithm_oid.dotted_string,
            self._certificate.signature,
        )

    def get_critical_extension_oids(self) -> list[tuple[int, ...]]:
        """Return the OIDs of all critical extensions."""
        return [
            _oid_tuple(extension.oid)
            for extension in self._certificate.extensions
            if extension.critical
        ]

    def _first_extension_value(self, oid: Sequence[int]) -> x509.ExtensionType | None:
        target = tuple(oid)
        for extension in self._certificate.extensions:
            if _oid_tuple(extension.oid) == target:
                return extension.value
        return None

    def get_basic_constraints(self) -> BasicConstraints | None:
        """Return Basic Constraints when present."""
        value = self._first_extension_value(BasicConstraints.OID)
        return None if value is None else BasicConstraints.from_cryptography(value)

    def get_key_usage(self) -> tuple[bool, ...] | None:
        """Return nine flags, DIGITAL_SIGNATURE first and DECIPHER_ONLY last, when present."""
        value = self._first_extension_value(KeyUsage.OID)
        if value is None:
            return None
        usages = set(KeyUsage.from_cryptography(value))
        return tuple(usage in usages for usage in KeyUsage)

    def get_extended_key_usage(self) -> list[AnyExtendedKeyUsage]:
        """Return all extended key usages, empty when absent."""
        value = self._first_extension_value(ExtendedKeyUsage.OID)
        return [] if value is None else ExtendedKeyUsage.from_cryptography(value)

    def get_authority_key_identifier_kid(self) -> bytes | None:
        """Return the Authority Key Identifier key identifier bytes when present."""
        value = self._first_extension_value(AuthorityKeyIdentifier.OID)
        if value is None or value.key_identifier is None:
            return None
        return bytes(value.key_identifier)

    def get_subject_key_identifier_kid(self) -> bytes | None:
        """Return the Subject Key Identifier bytes when present."""
        value = self._first_extension_value(SubjectKeyIdentifier.OID)
        return None if value is None else bytes(value.digest)

    def get_certificate_policies(self) -> list[CertificatePolicy]:
        """Return all certificate policies, empty when absent."""
        value = self._first_extension_value(CertificatePolicy.OID)
        return [] if value is None else CertificatePolicy.from_cryptography(value)

    def get_crl_distribution_point(self) -> str | None:
        """Return a CA issued CRL URI for all reasons when present."""
        value = self._first_extension_value(CrlDistributionPoint.OID)
        return None if value is None else CrlDistributionPoint.from_cryptography(value)