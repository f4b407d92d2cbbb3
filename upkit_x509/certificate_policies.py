"""X.509 certificate Certificate Policies extension (RFC 5280 4.2.1.4)."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from cryptography import x509

from .extended_key_usage import _oid_tuple, _to_object_identifier

_EXPLICIT_TEXT_MAX_CHARS = 200


class WellKnownCertificatePolicy(enum.Enum):
    """Common certificate policy object identifiers."""

    # RFC 5280: no limit on the set of policies for paths through this certificate.
    ANY_POLICY = (2, 5, 29, 32, 0)
    # CA/Browser Forum: Extended Validation Guidelines.
    CABF_EXTENDED_VALIDATION = (2, 23, 140, 1, 1)
    # CA/Browser Forum: TLS Baseline Requirements.
    CABF_BASELINE_REQUIREMENTS = (2, 23, 140, 1, 2)
    # TLS Baseline Requirements, no entity identity asserted.
    CABF_DOMAIN_VALIDATED = (2, 23, 140, 1, 2, 1)
    # TLS Baseline Requirements, organization identity asserted.
    CABF_ORGANIZATION_VALIDATED = (2, 23, 140, 1, 2, 2)
    # TLS Baseline Requirements, individual identity asserted.
    CABF_INDIVIDUAL_VALIDATED = (2, 23, 140, 1, 2, 3)
    # EV Code Signing per the Code Signing Baseline Requirements.
    CABF_EXTENDED_VALIDATION_CODE_SIGNING = (2, 23, 140, 1, 3)
    # Code Signing per the Code Signing Baseline Requirements.
    CABF_CODE_SIGNING_REQUIREMENTS_CODE_SIGNING = (2, 23, 140, 1, 4, 1)
    # Timestamping per the Code Signing Baseline Requirements.
    CABF_CODE_SIGNING_REQUIREMENTS_TIMESTAMPING = (2, 23, 140, 1, 4, 2)

    def as_oid(self) -> tuple[int, ...]:
        """Return the certificate policy OID."""
        return self.value


class CertificatePolicy:
    """Base of the certificate policy kinds: OidPolicy, CspPolicy, UserNoticePolicy."""

    OID = (2, 5, 29, 32)
    _OID_QUALIFIER_ID_CPS = (1, 3, 6, 1, 5, 5, 7, 2, 1)
    _OID_QUALIFIER_ID_UNOTICE = (1, 3, 6, 1, 5, 5, 7, 2, 2)

    def _to_policy_information(self) -> x509.PolicyInformation:
        raise NotImplementedError

    @staticmethod
    def to_cryptography(
        certificate_policies: Iterable[CertificatePolicy],
    ) -> x509.CertificatePolicies:
        """Return the extension value holding the given policies in order."""
        return x509.CertificatePolicies(
            [policy._to_policy_information() for policy in certificate_policies]
        )

    @staticmethod
    def from_cryptography(policies: Iterable[x509.PolicyInformation]) -> list[CertificatePolicy]:
        """Return the policies held in the extension value.

        Only the first qualifier of each policy is considered. A qualifier that
        is neither a CPS URI nor a user notice raises ValueError.
        """
        return [_from_policy_information(policy) for policy in policies]


def _from_policy_information(policy: x509.PolicyInformation) -> CertificatePolicy:
    oid = _oid_tuple(policy.policy_identifier)
    for qualifier in policy.policy_qualifiers or ():
        if isinstance(qualifier, str):
            return CspPolicy(oid, qualifier)
        if isinstance(qualifier, x509.UserNotice):
            notice_ref = None
            if qualifier.notice_reference is not None:
                reference = qualifier.notice_reference
                notice_ref = (
                    reference.organization or "",
                    tuple(reference.notice_numbers),
                )
            return UserNoticePolicy(oid, notice_ref, qualifier.explicit_text)
        raise ValueError(f"Unknown certificate policy qualifier {qualifier!r}.")
    return OidPolicy(oid)


@dataclass(frozen=True)
class OidPolicy(CertificatePolicy):
    """Policy given by its OID alone, as RFC 5280 recommends."""

    oid: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "oid", _oid_tuple(self.oid))

    def _to_policy_information(self) -> x509.PolicyInformation:
        return x509.PolicyInformation(_to_object_identifier(self.oid), None)


@dataclass(frozen=True)
class CspPolicy(CertificatePolicy):
    """Policy given by OID with a pointer to the Certification Practice Statement."""

    oid: tuple[int, ...]
    uri: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "oid", _oid_tuple(self.oid))

    def _to_policy_information(self) -> x509.PolicyInformation:
        if not self.uri.isascii():
            raise ValueError(f"CPS URI '{self.uri}' is not an IA5String.")
        return x509.PolicyInformation(_to_object_identifier(self.oid), [self.uri])


@dataclass(frozen=True)
class UserNoticePolicy(CertificatePolicy):
    """Policy with a user notice meant for display to a relying party."""

    oid: tuple[int, ...]
    notice_ref: tuple[str, tuple[int, ...]] | None = None
    explicit_text: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "oid", _oid_tuple(self.oid))
        if self.notice_ref is not None:
            organization, numbers = self.notice_ref
            object.__setattr__(
                self, "notice_ref", (organization, tuple(int(n) for n in numbers))
            )

    def _to_policy_information(self) -> x509.PolicyInformation:
        reference = None
        if self.notice_ref is not None:
            organization, numbers = self.notice_ref
            reference = x509.NoticeReference(organization, list(numbers))
        # DisplayText holds 1..200 characters.
        text = self.explicit_text[:_EXPLICIT_TEXT_MAX_CHARS] if self.explicit_text else None
        return x509.PolicyInformation(
            _to_object_identifier(self.oid),
            [x509.UserNotice(reference, text)],
        )


def _as_sequence(oid: Sequence[int]) -> tuple[int, ...]:
    return _oid_tuple(oid)