"""
A :py:class:`Transport` backed by aiohttp.

Synopsis
--------

.. code-block:: python

   from prestashop_webservice.implementations.aiohttp import AiohttpTransport

   async with AiohttpTransport(key) as transport:
       response = await transport(RequestDescriptor(url, Method.GET))

"""

import asyncio
import logging
import typing

import aiohttp
from aiohttp import ClientTimeout

from ...exceptions import TransportError
from ...interfaces import RequestDescriptor, Response, Transport
from ...serde.types import JSONValue

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = ClientTimeout(
    total=30,
    connect=10,
    sock_read=20,
)

XML_CONTENT_TYPE = "text/xml"


def create_client_session(
    timeout: typing.Optional[ClientTimeout] = None,
    **kwargs,
) -> aiohttp.ClientSession:
    """
    Creates an :py:class:`aiohttp.ClientSession` with a timeout configuration.

    :param Optional[ClientTimeout] timeout: a custom timeout.
        Defaults to :py:data:`DEFAULT_TIMEOUT`.
    :param kwargs: further arguments passed to :py:class:`aiohttp.ClientSession`.
    """
    if timeout is None:
        timeout = DEFAULT_TIMEOUT
    return aiohttp.ClientSession(timeout=timeout, **kwargs)


class AiohttpTransport(Transport):
    """
    Sends requests with HTTP basic auth, the web service key being the user
    name and the password empty.

    :param str key: the web service key.
    :param Optional[ClientTimeout] timeout: the timeout of the session created by the transport.
    :param str output_format: the value of the ``output_format`` query parameter.
    :param Optional[aiohttp.ClientSession] session: a session to use instead of creating one.
        The transport does not close sessions it did not create.
    """

    _auth: aiohttp.BasicAuth
    _timeout: typing.Optional[ClientTimeout]
    _output_format: str
    _session: typing.Optional[aiohttp.ClientSession]
    _owns_session: bool

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = create_client_session(self._timeout)
            self._owns_session = True
        return self._session

    async def _read_payload(self, resp: aiohttp.ClientResponse) -> JSONValue:
        try:
            return await resp.json(content_type=None)
        except ValueError:
            logger.debug("response body of %s is not JSON", resp.url)
            return None

    async def __call__(self, request: RequestDescriptor) -> Response:
        params = dict(request.params)
        params["output_format"] = self._output_format
        headers = {}
        if request.body is not None:
            headers["Content-Type"] = XML_CONTENT_TYPE
        logger.debug("%s %s %r", request.method.value.upper(), request.url, params)
        try:
            async with self._get_session().request(
                request.method.value.upper(),
                request.url,
                params=params,
                data=request.body,
                headers=headers,
                auth=self._auth,
            ) as resp:
                payload = await self._read_payload(resp)
                return Response(ok=200 <= resp.status < 300, status=resp.status, payload=payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(request, detail=str(e) or type(e).__name__) from e

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
            self._owns_session = False

    async def __aenter__(self) -> "AiohttpTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def __init__(
        self,
        key: str,
        timeout: typing.Optional[ClientTimeout] = None,
        output_format: str = "JSON",
        session: typing.Optional[aiohttp.ClientSession] = None,
    ):
        self._auth = aiohttp.BasicAuth(key, "")
        self._timeout = timeout
        self._output_format = output_format
        self._session = session
        self._owns_session = False
