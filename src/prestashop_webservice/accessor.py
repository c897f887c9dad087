"""
:py:mod:`prestashop_webservice.accessor` exposes the CRUD operations of a
resource.  A single :py:class:`ResourceAccessor` class serves every resource;
what differs between resources is the :py:class:`ResourceDescriptor` it is
built with.

Synopsis
--------

.. code-block:: python

   session = await ConnectionSession.connect("https://shop.example.com", key)
   addresses = accessor_for(session, "addresses")

   address = await addresses.get(1)
   address["city"] = "Lyon"
   await addresses.update(address)

"""

import collections.abc
import logging
import typing

from .exceptions import MethodNotAllowedError, NotConnectedError, TransportError
from .interfaces import Method, RequestDescriptor, Response
from .models import ResourceDescriptor
from .querying import FULL, SearchCriteria
from .resources import REGISTRY
from .serde.deserializer import ResponseDeserializer
from .serde.exceptions import DecodeError
from .serde.models import ID, Operation
from .serde.renderer import PayloadRenderer
from .serde.types import JSONValue, ResourceInstance
from .serde.utils import JSONPointer
from .session import ConnectionSession

logger = logging.getLogger(__name__)

LANGUAGE_PARAM = "language"
METHOD_OVERRIDE_PARAM = "ps_method"

T = typing.TypeVar("T", bound=ResourceInstance)


class ResourceAccessor(typing.Generic[T]):
    """
    The CRUD surface of one resource.  Every operation checks that the session
    is connected and that the resource allows the method before anything is
    encoded or sent.

    :param ResourceDescriptor descr: the descriptor of the resource.
    :param ConnectionSession session: the session to issue requests through.
    """

    descr: ResourceDescriptor
    session: ConnectionSession
    _renderer: PayloadRenderer
    _deserializer: ResponseDeserializer

    def _check_method(self, method: Method) -> None:
        if not self.session.connected:
            logger.warning(
                "%s %s refused: not connected", method.value.upper(), self.descr.name
            )
            raise NotConnectedError()
        if not self.session.is_method_allowed(self.descr.name, method):
            logger.warning(
                "%s %s refused: method not allowed", method.value.upper(), self.descr.name
            )
            raise MethodNotAllowedError(self.descr.name, method)

    def _params(self, **extra: str) -> typing.Dict[str, str]:
        params: typing.Dict[str, str] = {}
        language_id = self.session.active_language_id
        if language_id is not None:
            params[LANGUAGE_PARAM] = language_id
        params.update(extra)
        return params

    async def _send(self, request: RequestDescriptor) -> Response:
        logger.debug("%s %s", request.method.value.upper(), request.url)
        response = await self.session.transport(request)
        if not response.ok:
            raise TransportError(request, status=response.status)
        return response

    async def get(self, id: typing.Any) -> typing.Optional[T]:
        """
        Fetches a single item with all its fields.

        :param id: the identifier of the item.
        :return: the item, or :py:const:`None` if the response holds none.
        """
        self._check_method(Method.GET)
        response = await self._send(
            RequestDescriptor(
                url=self.session.url_builder.resource_url(self.descr.name, id),
                method=Method.GET,
                params=self._params(display=FULL),
            )
        )
        items = self._deserializer.extract(self.descr, response.payload)
        if not items:
            return None
        return typing.cast(T, items[0])

    async def search(self, criteria: typing.Optional[SearchCriteria] = None) -> typing.List[T]:
        """
        Lists the items matching the criteria.  Associations are only
        normalized for full listings; summary listings do not carry them.

        :param Optional[SearchCriteria] criteria: defaults to a full, unfiltered listing.
        """
        if criteria is None:
            criteria = SearchCriteria()
        self._check_method(Method.GET)
        response = await self._send(
            RequestDescriptor(
                url=self.session.url_builder.resource_url(self.descr.name),
                method=Method.GET,
                params=self._params(**criteria.to_params()),
            )
        )
        return typing.cast(
            typing.List[T],
            self._deserializer.extract(self.descr, response.payload, normalize=criteria.is_full),
        )

    async def _write(
        self,
        input: typing.Union[T, typing.Sequence[T]],
        method: Method,
        operation: Operation,
    ) -> typing.Tuple[typing.Sequence[T], typing.List[T], JSONValue]:
        self._check_method(method)
        instances: typing.Sequence[T]
        if isinstance(input, collections.abc.Mapping):
            instances = [input]
        else:
            instances = input
        language_id = self.session.active_language_id
        body = self._renderer(self.descr, input, operation, language_id or "")
        response = await self._send(
            RequestDescriptor(
                url=self.session.url_builder.resource_url(self.descr.name),
                method=method,
                params=self._params(),
                body=body,
            )
        )
        items = self._deserializer.extract(self.descr, response.payload)
        return instances, typing.cast(typing.List[T], items), response.payload

    async def create(self, input: typing.Union[T, typing.Sequence[T]]) -> typing.List[T]:
        """
        Creates one or more items in a single request.  The ``id`` of every
        given instance is set from the response, the n-th instance taking the
        id of the n-th item returned.

        :return: the created items as returned by the service.
        """
        instances, items, payload = await self._write(input, Method.POST, Operation.CREATE)
        if len(items) < len(instances):
            raise DecodeError(
                payload,
                JSONPointer() / self.descr.name,
                f"expected {len(instances)} created items, got {len(items)}",
            )
        for instance, item in zip(instances, items):
            instance[ID] = item.get(ID)
        return items

    async def update(self, input: typing.Union[T, typing.Sequence[T]]) -> typing.List[T]:
        """
        Updates one or more items in a single request.

        :return: the updated items as returned by the service.
        """
        _, items, _ = await self._write(input, Method.PUT, Operation.UPDATE)
        return items

    async def delete(self, id: typing.Union[typing.Any, typing.Sequence[typing.Any]]) -> bool:
        """
        Deletes one or more items in a single request.

        The request is a POST carrying ``ps_method=DELETE`` rather than a
        DELETE, and is checked against the resource's POST permission.

        :return: whether the service answered with a success status.
        """
        method = Method.POST
        self._check_method(method)
        if isinstance(id, (str, bytes)) or not isinstance(id, collections.abc.Iterable):
            ids = [id]
        else:
            ids = list(id)
        request = RequestDescriptor(
            url=self.session.url_builder.resource_url(self.descr.name),
            method=method,
            params={
                ID: "[" + ",".join(str(i) for i in ids) + "]",
                METHOD_OVERRIDE_PARAM: "DELETE",
            },
        )
        logger.debug("%s %s %r", request.method.value.upper(), request.url, request.params)
        response = await self.session.transport(request)
        return response.ok

    def __init__(self, descr: ResourceDescriptor, session: ConnectionSession):
        self.descr = descr
        self.session = session
        self._renderer = PayloadRenderer()
        self._deserializer = ResponseDeserializer()


def accessor_for(
    session: ConnectionSession,
    name: str,
    registry: typing.Mapping[str, ResourceDescriptor] = REGISTRY,
) -> ResourceAccessor[ResourceInstance]:
    """
    Returns an accessor for the resource registered under the given collection name.

    :raises KeyError: if no such resource is registered.
    """
    return ResourceAccessor(registry[name], session)
