import pytest

from esclient.errors.errors import (
    APIError,
    DecodingError,
    EncodingError,
    HTTPError,
    ServerRejectedError,
    TransportError,
)


@pytest.mark.parametrize(
    "cls", [EncodingError, TransportError, HTTPError, DecodingError, ServerRejectedError]
)
def test_all_errors_share_base(cls):
    assert issubclass(cls, APIError)


def test_str_includes_status_and_url():
    err = HTTPError("503 Service Unavailable", status=503, url="http://es/i/t/1")
    assert str(err) == "503 Service Unavailable | status=503 | url=http://es/i/t/1"


def test_str_message_only():
    assert str(EncodingError("Cannot serialize document")) == "Cannot serialize document"


@pytest.mark.parametrize("status,expected", [(503, True), (429, True), (404, False)])
def test_http_error_retryable_by_status(status, expected):
    assert HTTPError("x", status=status).is_retryable() is expected


def test_transport_error_is_retryable():
    assert TransportError("Connection refused").is_retryable()


def test_terminal_errors_are_not_retryable():
    assert not DecodingError("bad body").is_retryable()
    assert not ServerRejectedError("Response wasn't OK", status=200).is_retryable()
    assert not EncodingError("bad doc").is_retryable()
