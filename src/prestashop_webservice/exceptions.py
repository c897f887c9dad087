import abc
import typing

from .interfaces import Method, RequestDescriptor


class PrestaShopWebserviceException(Exception, metaclass=abc.ABCMeta):
    message: str

    def __str__(self):
        return self.message


class InvalidDeclarationError(PrestaShopWebserviceException):
    message: str

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WebserviceConnectionError(PrestaShopWebserviceException):
    endpoint: str
    detail: typing.Optional[str]

    @property
    def message(self) -> str:
        if self.detail is None:
            return f"failed to connect to {self.endpoint}"
        return f"failed to connect to {self.endpoint}: {self.detail}"

    def __init__(self, endpoint: str, detail: typing.Optional[str] = None):
        super().__init__(endpoint, detail)
        self.endpoint = endpoint
        self.detail = detail


class NoActiveLanguageError(WebserviceConnectionError):
    @property
    def message(self) -> str:
        return f"no active language is available at {self.endpoint}"

    def __init__(self, endpoint: str):
        super().__init__(endpoint, "no active language")


class WebservicePermissionError(PrestaShopWebserviceException, metaclass=abc.ABCMeta):
    pass


class NotConnectedError(WebservicePermissionError):
    @property
    def message(self) -> str:
        return "the session is not connected"


class MethodNotAllowedError(WebservicePermissionError):
    resource: str
    method: Method

    @property
    def message(self) -> str:
        return f'method {self.method.value.upper()} is not allowed for resource "{self.resource}"'

    def __init__(self, resource: str, method: Method):
        super().__init__(resource, method)
        self.resource = resource
        self.method = method


class LanguageValidationError(PrestaShopWebserviceException, metaclass=abc.ABCMeta):
    pass


class LanguagesNotFetchedError(LanguageValidationError):
    @property
    def message(self) -> str:
        return "the language list is not available"


class UnknownLanguageError(LanguageValidationError):
    language_id: str

    @property
    def message(self) -> str:
        return f"no language known as {self.language_id!r}"

    def __init__(self, language_id: str):
        super().__init__(language_id)
        self.language_id = language_id


class TransportError(PrestaShopWebserviceException):
    request: RequestDescriptor
    status: typing.Optional[int]
    detail: typing.Optional[str]

    @property
    def message(self) -> str:
        buf = [f"{self.request.method.value.upper()} {self.request.url} failed"]
        if self.status is not None:
            buf.append(f" with status {self.status}")
        if self.detail is not None:
            buf.append(f" ({self.detail})")
        return "".join(buf)

    def __init__(
        self,
        request: RequestDescriptor,
        status: typing.Optional[int] = None,
        detail: typing.Optional[str] = None,
    ):
        super().__init__(request, status, detail)
        self.request = request
        self.status = status
        self.detail = detail
