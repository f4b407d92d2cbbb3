"""X.509 certificate Authority and Subject Key Identifier extensions."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import ClassVar

from cryptography import x509


@dataclass(frozen=True)
class SubjectKeyIdentifier:
    """Subject Key Identifier (RFC 5280 4.2.1.2)."""

    OID: ClassVar[tuple[int, ...]] = (2, 5, 29, 14)

    key_identifier: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_identifier", bytes(self.key_identifier))

    @staticmethod
    def from_public_key(public_key_bytes: bytes) -> SubjectKeyIdentifier:
        """Return an identifier derived from the raw public key."""
        return SubjectKeyIdentifier(
            SubjectKeyIdentifier.get_key_identifier_bytes(public_key_bytes)
        )

    def to_cryptography(self) -> x509.SubjectKeyIdentifier:
        """Return the extension value."""
        return x509.SubjectKeyIdentifier(self.key_identifier)

    @staticmethod
    def get_key_identifier_bytes(public_key_bytes: bytes) -> bytes:
        """Return the key identifier: SHA3-256 of the raw public key.

        Similar to the RFC 5280 type 1 identifier, with SHA3-256 in place of
        SHA-1 to lower the collision risk.
        """
        return hashlib.sha3_256(bytes(public_key_bytes)).digest()


@dataclass(frozen=True)
class AuthorityKeyIdentifier:
    """Authority Key Identifier (RFC 5280 4.2.1.1) holding only the key identifier."""

    OID: ClassVar[tuple[int, ...]] = (2, 5, 29, 35)

    key_identifier: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_identifier", bytes(self.key_identifier))

    @staticmethod
    def from_issuers_subject_key_identifier(
        issuer_subject_key_identifier: bytes,
    ) -> AuthorityKeyIdentifier:
        """Return an exact copy of the issuer's Subject Key Identifier."""
        return AuthorityKeyIdentifier(issuer_subject_key_identifier)

    @staticmethod
    def from_public_key(public_key_bytes: bytes) -> AuthorityKeyIdentifier:
        """Return an identifier derived from the issuer's raw public key."""
        return AuthorityKeyIdentifier(
            SubjectKeyIdentifier.get_key_identifier_bytes(public_key_bytes)
        )

    def to_cryptography(self) -> x509.AuthorityKeyIdentifier:
        """Return the extension value."""
        return x509.AuthorityKeyIdentifier(
            key_identifier=self.key_identifier,
            authority_cert_issuer=None,
            authority_cert_serial_number=None,
        )