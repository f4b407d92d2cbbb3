"""Errors raised while parsing X.509 certificates."""

from __future__ import annotations

import enum


class CertificateParsingErrorKind(enum.Enum):
    """Cause of a certificate parsing error."""

    CERTIFICATE_DECODING_ERROR = "CertificateDecodingError"

    def __str__(self) -> str:
        return self.value

    def error_with_msg(self, msg: str) -> CertificateParsingError:
        """Return a new error of this kind carrying a message."""
        return CertificateParsingError(self, msg)

    def error(self) -> CertificateParsingError:
        """Return a new error of this kind without a message."""
        return CertificateParsingError(self, None)


class CertificateParsingError(Exception):
    """Certificate parsing error."""

    def __init__(self, kind: CertificateParsingErrorKind, msg: str | None = None) -> None:
        self.kind = kind
        self.msg = msg
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.msg is not None:
            return f"{self.kind} {self.msg}"
        return str(self.kind)