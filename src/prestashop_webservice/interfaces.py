"""
This module contains the interfaces of the collaborators the client core
depends on but never implements itself: the transport that carries a request
to the web service, and the builder that turns a resource name into its URL.

"""
import abc
import dataclasses
import enum
import typing

from .serde.types import JSONValue


class Method(enum.Enum):
    """
    HTTP verbs as they are named in the web service's capability matrix.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"


@dataclasses.dataclass
class RequestDescriptor:
    """
    A :py:class:`RequestDescriptor` describes a single request to the web service.

    :param str url: the target URL as built by a :py:class:`URLBuilder`.
    :param Method method: the HTTP verb.
    :param Mapping[str, str] params: query parameters.
    :param Optional[str] body: the XML document for writes.
    """

    url: str
    method: Method
    params: typing.Mapping[str, str] = dataclasses.field(default_factory=dict)
    body: typing.Optional[str] = None


@dataclasses.dataclass
class Response:
    """
    The parsed outcome of a request.  ``payload`` is the decoded JSON body, or
    :py:const:`None` when the body was empty or not JSON.
    """

    ok: bool
    status: int
    payload: JSONValue = None


class Transport(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    async def __call__(self, request: RequestDescriptor) -> Response:
        """
        Issues the request and returns its parsed response.

        Implementations raise :py:class:`TransportError` for failures that
        yield no response at all, and return a :py:class:`Response` with
        ``ok`` set to :py:const:`False` for error statuses.

        :param RequestDescriptor request: the request to issue.
        :return: the parsed response.
        """
        ...  # pragma: nocover

    async def close(self) -> None:
        """
        Releases whatever the transport holds.  Does nothing by default.
        """


class URLBuilder(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def resource_url(
        self, resource: typing.Optional[str] = None, id: typing.Optional[typing.Any] = None
    ) -> str:
        """
        Builds the address of a resource collection or of a single item.
        Without a resource, returns the address of the service root.

        :param Optional[str] resource: the collection name, e.g. ``addresses``.
        :param Any id: the identifier of a single item.
        :return: the URL.
        """
        ...  # pragma: nocover
