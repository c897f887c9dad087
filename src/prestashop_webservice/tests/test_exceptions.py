import pytest

from ..exceptions import (
    LanguagesNotFetchedError,
    LanguageValidationError,
    MethodNotAllowedError,
    NoActiveLanguageError,
    NotConnectedError,
    TransportError,
    UnknownLanguageError,
    WebserviceConnectionError,
    WebservicePermissionError,
)
from ..interfaces import Method, RequestDescriptor


@pytest.mark.parametrize(
    "error, expected",
    [
        (
            WebserviceConnectionError("https://shop.example.com"),
            "failed to connect to https://shop.example.com",
        ),
        (
            WebserviceConnectionError("https://shop.example.com", "timed out"),
            "failed to connect to https://shop.example.com: timed out",
        ),
        (
            NoActiveLanguageError("https://shop.example.com"),
            "no active language is available at https://shop.example.com",
        ),
        (NotConnectedError(), "the session is not connected"),
        (
            MethodNotAllowedError("addresses", Method.PUT),
            'method PUT is not allowed for resource "addresses"',
        ),
        (LanguagesNotFetchedError(), "the language list is not available"),
        (UnknownLanguageError("9"), "no language known as '9'"),
        (
            TransportError(
                RequestDescriptor("https://shop.example.com/api/", Method.GET),
                status=503,
                detail="maintenance",
            ),
            "GET https://shop.example.com/api/ failed with status 503 (maintenance)",
        ),
    ],
)
def test_message(error, expected):
    assert error.message == expected
    assert str(error) == expected


def test_hierarchy():
    assert issubclass(NoActiveLanguageError, WebserviceConnectionError)
    assert issubclass(NotConnectedError, WebservicePermissionError)
    assert issubclass(MethodNotAllowedError, WebservicePermissionError)
    assert issubclass(UnknownLanguageError, LanguageValidationError)
    assert issubclass(LanguagesNotFetchedError, LanguageValidationError)
