"""X.509 certificate Key Usage extension (RFC 5280 4.2.1.3)."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from cryptography import x509


class KeyUsage(enum.Enum):
    """Key usages, declared in bit order from the most significant bit."""

    DIGITAL_SIGNATURE = "digital_signature"
    NON_REPUDIATION = "non_repudiation"
    KEY_ENCIPHERMENT = "key_encipherment"
    DATA_ENCIPHERMENT = "data_encipherment"
    KEY_AGREEMENT = "key_agreement"
    KEY_CERT_SIGN = "key_cert_sign"
    CRL_SIGN = "crl_sign"
    ENCIPHER_ONLY = "encipher_only"
    DECIPHER_ONLY = "decipher_only"

    def index(self) -> int:
        """Return the bit index: 0 for DIGITAL_SIGNATURE up to 8 for DECIPHER_ONLY."""
        return list(KeyUsage).index(self)

    @staticmethod
    def to_cryptography(key_usages: Iterable[KeyUsage]) -> x509.KeyUsage:
        """Build the extension value from a collection of key usages.

        ENCIPHER_ONLY and DECIPHER_ONLY require KEY_AGREEMENT; a ValueError
        is raised otherwise.
        """
        chosen = set(key_usages)
        return x509.KeyUsage(
            digital_signature=KeyUsage.DIGITAL_SIGNATURE in chosen,
            content_commitment=KeyUsage.NON_REPUDIATION in chosen,
            key_encipherment=KeyUsage.KEY_ENCIPHERMENT in chosen,
            data_encipherment=KeyUsage.DATA_ENCIPHERMENT in chosen,
            key_agreement=KeyUsage.KEY_AGREEMENT in chosen,
            key_cert_sign=KeyUsage.KEY_CERT_SIGN in chosen,
            crl_sign=KeyUsage.CRL_SIGN in chosen,
            encipher_only=KeyUsage.ENCIPHER_ONLY in chosen,
            decipher_only=KeyUsage.DECIPHER_ONLY in chosen,
        )

    @staticmethod
    def from_cryptography(key_usage: x509.KeyUsage) -> list[KeyUsage]:
        """Return the key usages set in the extension value, in bit order."""
        flags = {
            KeyUsage.DIGITAL_SIGNATURE: key_usage.digital_signature,
            KeyUsage.NON_REPUDIATION: key_usage.content_commitment,
            KeyUsage.KEY_ENCIPHERMENT: key_usage.key_encipherment,
            KeyUsage.DATA_ENCIPHERMENT: key_usage.data_encipherment,
            KeyUsage.KEY_AGREEMENT: key_usage.key_agreement,
            KeyUsage.KEY_CERT_SIGN: key_usage.key_cert_sign,
            KeyUsage.CRL_SIGN: key_usage.crl_sign,
        }
        if key_usage.key_agreement:
            flags[KeyUsage.ENCIPHER_ONLY] = key_usage.encipher_only
            flags[KeyUsage.DECIPHER_ONLY] = key_usage.decipher_only
        return [ku for ku in KeyUsage if flags.get(ku, False)]


KeyUsage.OID = (2, 5, 29, 15)