"""X.509 certificate Basic Constraints extension (RFC 5280 4.2.1.9)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cryptography import x509


@dataclass(frozen=True)
class BasicConstraints:
    """Basic Constraints of a leaf or CA certificate."""

    OID: ClassVar[tuple[int, ...]] = (2, 5, 29, 19)

    ca: bool
    path_len_constraint: int | None = None

    @staticmethod
    def new_leaf() -> BasicConstraints:
        """Return constraints for a leaf certificate."""
        return BasicConstraints(ca=False, path_len_constraint=None)

    @staticmethod
    def new_ca(path_len: int | None = None) -> BasicConstraints:
        """Return constraints for a CA certificate.

        ``path_len`` should be None unless the key is used for KEY_CERT_SIGN.
        """
        return BasicConstraints(ca=True, path_len_constraint=path_len)

    def is_leaf(self) -> bool:
        """Return True if these constraints belong to a leaf certificate."""
        return not self.ca

    def is_ca(self) -> bool:
        """Return True if these constraints belong to a CA certificate."""
        return self.ca

    def path_len(self) -> int | None:
        """Return how many subordinate levels (including a leaf) a CA allows."""
        return self.path_len_constraint if self.ca else None

    def to_cryptography(self) -> x509.BasicConstraints:
        """Return the extension value."""
        return x509.BasicConstraints(ca=self.ca, path_length=self.path_len_constraint)

    @staticmethod
    def from_cryptography(basic_constraints: x509.BasicConstraints) -> BasicConstraints:
        """Return a new instance from the extension value."""
        return BasicConstraints(
            ca=basic_constraints.ca,
            path_len_constraint=basic_constraints.path_length,
        )