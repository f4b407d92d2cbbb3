"""X.509 certificate Extended Key Usage extension (RFC 5280 4.2.1.12)."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

from cryptography import x509


def _oid_tuple(oid: str | x509.ObjectIdentifier | Sequence[int]) -> tuple[int, ...]:
    if isinstance(oid, x509.ObjectIdentifier):
        oid = oid.dotted_string
    if isinstance(oid, str):
        return tuple(int(part) for part in oid.split("."))
    return tuple(int(part) for part in oid)


def _to_object_identifier(oid: Sequence[int]) -> x509.ObjectIdentifier:
    return x509.ObjectIdentifier(".".join(str(part) for part in oid))


class ExtendedKeyUsage(enum.Enum):
    """Common extended key usages, valued by their object identifiers."""

    # RFC 5280
    ANY_EXTENDED_KEY_USAGE = (2, 5, 29, 37, 0)
    # RFC 4556
    PKINIT_CLIENT_AUTH = (1, 3, 6, 1, 5, 2, 3, 4)
    PKINIT_KEY_DISTRIBUTION_CENTER = (1, 3, 6, 1, 5, 2, 3, 5)
    # RFC 5280
    PKIX_SERVER_AUTH = (1, 3, 6, 1, 5, 5, 7, 3, 1)
    PKIX_CLIENT_AUTH = (1, 3, 6, 1, 5, 5, 7, 3, 2)
    PKIX_CODE_SIGNING = (1, 3, 6, 1, 5, 5, 7, 3, 3)
    PKIX_EMAIL_PROTECTION = (1, 3, 6, 1, 5, 5, 7, 3, 4)
    PKIX_TIME_STAMPING = (1, 3, 6, 1, 5, 5, 7, 3, 8)
    PKIX_OCSP_SIGNING = (1, 3, 6, 1, 5, 5, 7, 3, 9)
    # RFC 4334
    PKIX_EAP_OVER_PPP = (1, 3, 6, 1, 5, 5, 7, 3, 13)
    PKIX_EAP_OVER_LAN = (1, 3, 6, 1, 5, 5, 7, 3, 14)
    # RFC 5055
    PKIX_SCVP_SERVER = (1, 3, 6, 1, 5, 5, 7, 3, 15)
    PKIX_SCVP_CLIENT = (1, 3, 6, 1, 5, 5, 7, 3, 16)
    # RFC 4945
    PKIX_IPSEC_IKE = (1, 3, 6, 1, 5, 5, 7, 3, 17)
    # RFC 5924
    PKIX_SIP_DOMAIN = (1, 3, 6, 1, 5, 5, 7, 3, 20)
    # RFC 6187
    PKIX_SECURE_SHELL_CLIENT = (1, 3, 6, 1, 5, 5, 7, 3, 21)
    PKIX_SECURE_SHELL_SERVER = (1, 3, 6, 1, 5, 5, 7, 3, 22)
    # RFC 9336
    PKIX_DOCUMENT_SIGNING = (1, 3, 6, 1, 5, 5, 7, 3, 36)
    # ETSI
    ETSI_TLS_SIGNING = (0, 4, 0, 2231, 3, 0)
    # ICAO
    ICAO_CSCA_MASTER_LIST_SIGNING_KEY = (2, 23, 136, 1, 1, 3)
    ICAO_DEVIATION_LIST_SIGNING_KEY = (2, 23, 136, 1, 1, 8)
    # NIST
    NIST_PIV_CARD_AUTH = (2, 16, 840, 1, 101, 3, 6, 8)
    # Microsoft
    MS_INDIVIDUAL_CODE_SIGNING = (1, 3, 6, 1, 4, 1, 311, 2, 1, 21)
    MS_COMMERCIAL_CODE_SIGNING = (1, 3, 6, 1, 4, 1, 311, 2, 1, 22)
    MS_ENCRYPTED_FILE_SYSTEM = (1, 3, 6, 1, 4, 1, 311, 10, 3, 4)
    MS_ENCRYPTED_FILE_SYSTEM_RECOVERY = (1, 3, 6, 1, 4, 1, 311, 10, 3, 4, 1)
    MS_DOCUMENT_SIGNING = (1, 3, 6, 1, 4, 1, 311, 10, 3, 12)
    MS_SMART_CARD_LOGON = (1, 3, 6, 1, 4, 1, 311, 20, 2, 2)
    MS_KEY_EXCHANGE_CERTIFICATE = (1, 3, 6, 1, 4, 1, 311, 21, 5)
    # Intel
    INTEL_AMT = (2, 16, 840, 1, 113741, 1, 2, 3)
    # Adobe
    ADOBE_AUTHENTIC_DOCUMENTS_TRUST = (1, 2, 840, 113583, 1, 1, 5)

    def oid(self) -> tuple[int, ...]:
        """Return the object identifier of this usage."""
        return self.value

    @staticmethod
    def from_oid(
        oid: str | x509.ObjectIdentifier | Sequence[int],
    ) -> ExtendedKeyUsage | CustomExtendedKeyUsage:
        """Return the well-known usage for an OID, or a custom one if unknown."""
        components = _oid_tuple(oid)
        try:
            return ExtendedKeyUsage(components)
        except ValueError:
            return CustomExtendedKeyUsage(components)

    @staticmethod
    def to_cryptography(ekus: Iterable[AnyExtendedKeyUsage]) -> x509.ExtendedKeyUsage:
        """Return the extension value listing the given usages in order."""
        return x509.ExtendedKeyUsage([_to_object_identifier(eku.oid()) for eku in ekus])

    @staticmethod
    def from_cryptography(
        extended_key_usage: x509.ExtendedKeyUsage,
    ) -> list[AnyExtendedKeyUsage]:
        """Return the usages listed in the extension value."""
        return [ExtendedKeyUsage.from_oid(oid) for oid in extended_key_usage]


ExtendedKeyUsage.OID = (2, 5, 29, 37)


@dataclass(frozen=True)
class CustomExtendedKeyUsage:
    """An extended key usage that is not among the well-known ones."""

    components: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", _oid_tuple(self.components))

    def oid(self) -> tuple[int, ...]:
        """Return the object identifier of this usage."""
        return self.components


AnyExtendedKeyUsage = Union[ExtendedKeyUsage, CustomExtendedKeyUsage]