import pytest

from upkit_x509.errors import CertificateParsingError, CertificateParsingErrorKind


def test_error_with_msg_keeps_kind_and_message():
    err = CertificateParsingErrorKind.CERTIFICATE_DECODING_ERROR.error_with_msg("bad data")
    assert err.kind is CertificateParsingErrorKind.CERTIFICATE_DECODING_ERROR
    assert err.msg == "bad data"


def test_error_with_msg_display():
    err = CertificateParsingErrorKind.CERTIFICATE_DECODING_ERROR.error_with_msg("bad data")
    assert str(err) == "CertificateDecodingError bad data"


def test_error_without_msg_display():
    err = CertificateParsingErrorKind.CERTIFICATE_DECODING_ERROR.error()
    assert err.msg is None
    assert str(err) == "CertificateDecodingError"


def test_kind_display():
    err = CertificateParsingErrorKind.CERTIFICATE_DECODING_ERROR.error()
    assert str(err.kind) == "CertificateDecodingError"


def test_error_can_be_raised_and_caught():
    err = CertificateParsingErrorKind.CERTIFICATE_DECODING_ERROR.error_with_msg("oops")
    with pytest.raises(CertificateParsingError) as info:
        raise err
    assert info.value is err
    assert str(err) == "CertificateDecodingError oops"