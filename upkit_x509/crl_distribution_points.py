"""X.509 CRL Distribution Points extension (RFC 5280 4.2.1.13)."""

from __future__ import annotations

from collections.abc import Iterable

from cryptography import x509


class CrlDistributionPoint:
    """CRL distribution point handling.

    Segmenting CRLs by reason and indirect CRLs are not supported: parsing picks
    a CA issued CRL for all reasons, and building emits a single such point.
    """

    OID = (2, 5, 29, 31)

    @staticmethod
    def from_cryptography(cdps: Iterable[x509.DistributionPoint]) -> str | None:
        """Return a CA issued CDP URI covering all reasons, preferring http over ldap."""
        for point in cdps:
            if point.reasons is not None or point.crl_issuer is not None:
                continue
            if point.full_name is None:
                continue
            # Sorting puts http(s) before ldap(s).
            uris = sorted(
                name.value
                for name in point.full_name
                if isinstance(name, x509.UniformResourceIdentifier)
            )
            if uris:
                return uris[0]
        return None

    @staticmethod
    def to_cryptography(cdp_uri: str) -> x509.CRLDistributionPoints:
        """Return the extension value pointing at a CA issued CRL for all reasons."""
        if not cdp_uri.isascii():
            raise ValueError(f"CDP URI '{cdp_uri}' is not an IA5String.")
        # The certificate issuer is also the CRL issuer, so cRLIssuer is omitted.
        return x509.CRLDistributionPoints(
            [
                x509.DistributionPoint(
                    full_name=[x509.UniformResourceIdentifier(cdp_uri)],
                    relative_name=None,
                    reasons=None,
                    crl_issuer=None,
                )
            ]
        )