"""Collection of X.509 certificate extensions for certificate building."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cryptography import x509

from .basic_constraints import BasicConstraints
from .certificate_policies import CertificatePolicy
from .crl_distribution_points import CrlDistributionPoint
from .extended_key_usage import AnyExtendedKeyUsage, ExtendedKeyUsage, _to_object_identifier
from .key_identifier import AuthorityKeyIdentifier, SubjectKeyIdentifier
from .key_usage import KeyUsage


class Extensions:
    """Ordered set of X.509 certificate extensions."""

    def __init__(self) -> None:
        self._extensions: list[x509.Extension] = []

    def __len__(self) -> int:
        return len(self._extensions)

    def to_cryptography(self) -> x509.Extensions | None:
        """Return the extensions, or None when there are none."""
        if not self._extensions:
            return None
        return x509.Extensions(list(self._extensions))

    def _add(self, oid: Sequence[int], critical: bool, value: x509.ExtensionType) -> None:
        self._extensions.append(x509.Extension(_to_object_identifier(oid), critical, value))

    def add_basic_constraints(self, basic_constraints: BasicConstraints) -> None:
        """Add Basic Constraints, critical for CA certificates."""
        self._add(
            BasicConstraints.OID,
            basic_constraints.is_ca(),
            basic_constraints.to_cryptography(),
        )

    def add_key_usage(self, key_usages: Iterable[KeyUsage]) -> None:
        """Add a critical Key Usage extension unless no usage is given."""
        usages = list(key_usages)
        if usages:
            self._add(KeyUsage.OID, True, KeyUsage.to_cryptography(usages))

    def add_certificate_policies(
        self, certificate_policies: Iterable[CertificatePolicy]
    ) -> None:
        """Add Certificate Policies unless no policy is given."""
        policies = list(certificate_policies)
        if policies:
            self._add(CertificatePolicy.OID, False, CertificatePolicy.to_cryptography(policies))

    def add_crl_distribution_points(self, crl_distribution_point_uri: str) -> None:
        """Add a CRL Distribution Points extension pointing at one URI."""
        self._add(
            CrlDistributionPoint.OID,
            False,
            CrlDistributionPoint.to_cryptography(crl_distribution_point_uri),
        )

    def add_authority_key_identifier(
        self, authority_key_identifier: AuthorityKeyIdentifier
    ) -> None:
        """Add an Authority Key Identifier."""
        self._add(
            AuthorityKeyIdentifier.OID,
            False,
            authority_key_identifier.to_cryptography(),
        )

    def add_subject_key_identifier(self, subject_key_identifier: SubjectKeyIdentifier) -> None:
        """Add a Subject Key Identifier."""
        self._add(
            SubjectKeyIdentifier.OID,
            False,
            subject_key_identifier.to_cryptography(),
        )

    def add_extended_key_usage(
        self, extended_key_usages: Iterable[AnyExtendedKeyUsage]
    ) -> None:
        """Add Extended Key Usage unless no usage is given."""
        usages = list(extended_key_usages)
        if usages:
            self._add(ExtendedKeyUsage.OID, False, ExtendedKeyUsage.to_cryptography(usages))