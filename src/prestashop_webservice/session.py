import collections.abc
import dataclasses
import logging
import types
import typing

from .defaults import DefaultURLBuilder
from .exceptions import (
    LanguagesNotFetchedError,
    NoActiveLanguageError,
    PrestaShopWebserviceException,
    TransportError,
    UnknownLanguageError,
    WebserviceConnectionError,
)
from .interfaces import Method, RequestDescriptor, Transport, URLBuilder
from .querying import FULL
from .resources import LANGUAGE
from .serde.deserializer import ResponseDeserializer
from .serde.exceptions import DecodeError
from .utils import coerce_flag

if typing.TYPE_CHECKING:
    from .config import WebserviceConfig  # noqa: F401

logger = logging.getLogger(__name__)

CAPABILITIES = "api"

LanguageObserver = typing.Callable[[str], None]
MethodMatrix = typing.Mapping[str, typing.Mapping[str, bool]]


@dataclasses.dataclass(frozen=True)
class Language:
    """
    A language the shop knows of.  ``attributes`` holds the item as it was
    received, e.g. ``name`` and ``iso_code``.
    """

    id: str
    active: bool
    attributes: typing.Mapping[str, typing.Any] = dataclasses.field(default_factory=dict)


def _parse_method_matrix(value: typing.Any) -> typing.Optional[MethodMatrix]:
    if not isinstance(value, collections.abc.Mapping):
        return None
    matrix: typing.Dict[str, typing.Mapping[str, bool]] = {}
    for resource, methods in value.items():
        if not isinstance(methods, collections.abc.Mapping):
            continue
        matrix[resource] = types.MappingProxyType(
            {
                method.value: coerce_flag(methods.get(method.value, False))
                for method in Method
            }
        )
    return types.MappingProxyType(matrix)


class ConnectionSession:
    """
    A :py:class:`ConnectionSession` holds what a shop advertised when it was
    connected to: which methods each resource allows, and which languages exist.
    Both are fetched once and never refreshed.  The active language, used to tag
    translatable values on writes, can be changed among the fetched languages;
    changes are announced to the observers registered with :py:meth:`subscribe`.

    Sessions are obtained with :py:meth:`connect`.
    """

    endpoint: str
    transport: Transport
    url_builder: URLBuilder
    _owns_transport: bool
    _deserializer: ResponseDeserializer
    _resource_methods: typing.Optional[MethodMatrix] = None
    _languages: typing.Optional[typing.Tuple[Language, ...]] = None
    _active_language_id: typing.Optional[str] = None
    _observers: typing.List[LanguageObserver]

    @property
    def connected(self) -> bool:
        return self._resource_methods is not None

    @property
    def resource_methods(self) -> MethodMatrix:
        if self._resource_methods is None:
            return types.MappingProxyType({})
        return self._resource_methods

    @property
    def languages(self) -> typing.Optional[typing.Tuple[Language, ...]]:
        return self._languages

    @property
    def active_language_id(self) -> typing.Optional[str]:
        return self._active_language_id

    def is_method_allowed(self, resource: str, method: typing.Union[Method, str]) -> bool:
        if self._resource_methods is None:
            return False
        methods = self._resource_methods.get(resource)
        if methods is None:
            return False
        name = method.value if isinstance(method, Method) else str(method).lower()
        return methods.get(name, False)

    async def fetch_languages(self) -> typing.Tuple[Language, ...]:
        """
        Fetches the shop's languages and selects the first active one.  The
        result is cached: only the first successful call reaches the network.

        :return: the languages, in the order the shop lists them.
        :raises NoActiveLanguageError: if none of the languages is active.
        :raises TransportError: if the request fails.
        :raises DecodeError: if the response does not hold languages.
        """
        if self._languages is not None:
            return self._languages
        request = RequestDescriptor(
            url=self.url_builder.resource_url(LANGUAGE.name),
            method=Method.GET,
            params={"display": FULL},
        )
        logger.debug("fetching languages from %s", request.url)
        response = await self.transport(request)
        if not response.ok:
            raise TransportError(request, status=response.status)
        languages = tuple(
            Language(
                id=str(item.get("id")),
                active=coerce_flag(item.get("active")),
                attributes=types.MappingProxyType(item),
            )
            for item in self._deserializer.extract(LANGUAGE, response.payload)
        )
        active = next((language for language in languages if language.active), None)
        if active is None:
            raise NoActiveLanguageError(self.endpoint)
        self._languages = languages
        self._active_language_id = active.id
        return languages

    def set_active_language(self, language_id: typing.Any) -> None:
        """
        Makes the given language the one translatable values are tagged with,
        then notifies the observers.  Every observer is called even if one of
        them raises; the first such error is re-raised afterwards, the change
        of language standing.

        :raises LanguagesNotFetchedError: if the languages have not been fetched yet.
        :raises UnknownLanguageError: if no fetched language has this id.
        """
        if self._languages is None:
            raise LanguagesNotFetchedError()
        value = str(language_id)
        if not any(language.id == value for language in self._languages):
            raise UnknownLanguageError(value)
        self._active_language_id = value
        logger.info("active language of %s set to %s", self.endpoint, value)
        errors: typing.List[Exception] = []
        for observer in list(self._observers):
            try:
                observer(value)
            except Exception as e:
                logger.exception("language observer %r failed", observer)
                errors.append(e)
        if errors:
            raise errors[0]

    def subscribe(self, observer: LanguageObserver) -> typing.Callable[[], None]:
        """
        Registers a callable to be invoked with the new id whenever the active
        language changes.

        :return: a callable that unregisters the observer.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def _discover(self) -> None:
        request = RequestDescriptor(url=self.url_builder.resource_url(), method=Method.GET)
        logger.debug("discovering capabilities of %s", request.url)
        try:
            response = await self.transport(request)
        except TransportError as e:
            raise WebserviceConnectionError(self.endpoint, e.message) from e
        if not response.ok:
            raise WebserviceConnectionError(
                self.endpoint, f"capability discovery answered {response.status}"
            )
        matrix = None
        if isinstance(response.payload, collections.abc.Mapping):
            matrix = _parse_method_matrix(response.payload.get(CAPABILITIES))
        if matrix is None:
            raise WebserviceConnectionError(
                self.endpoint, f'capability discovery response lacks "{CAPABILITIES}"'
            )
        self._resource_methods = matrix

    async def _connect(self) -> None:
        await self._discover()
        try:
            await self.fetch_languages()
        except NoActiveLanguageError:
            self._resource_methods = None
            raise
        except (TransportError, DecodeError) as e:
            self._resource_methods = None
            raise WebserviceConnectionError(self.endpoint, str(e)) from e
        logger.info(
            "connected to %s (%d resources, active language %s)",
            self.endpoint,
            len(self.resource_methods),
            self._active_language_id,
        )

    @classmethod
    async def _open(
        cls,
        endpoint: str,
        transport: Transport,
        url_builder: URLBuilder,
        owns_transport: bool,
    ) -> "ConnectionSession":
        session = cls(endpoint, transport, url_builder)
        session._owns_transport = owns_transport
        try:
            await session._connect()
        except PrestaShopWebserviceException:
            await session.close()
            raise
        return session

    @classmethod
    async def connect(
        cls,
        endpoint: str,
        key: str,
        transport: typing.Optional[Transport] = None,
        url_builder: typing.Optional[URLBuilder] = None,
    ) -> "ConnectionSession":
        """
        Connects to a shop: discovers the methods allowed per resource, then
        fetches the languages.

        :param str endpoint: the shop's base URL.
        :param str key: the web service key, used when no transport is given.
        :param Optional[Transport] transport: the transport to issue requests with.
            Defaults to an :py:class:`AiohttpTransport` owned by the session.
        :param Optional[URLBuilder] url_builder: defaults to :py:class:`DefaultURLBuilder`.
        :return: the connected session.
        :raises WebserviceConnectionError: if either step fails, including
            :py:class:`NoActiveLanguageError` when no language is active.
        """
        owns_transport = transport is None
        if transport is None:
            from .implementations.aiohttp import AiohttpTransport

            transport = AiohttpTransport(key)
        return await cls._open(
            endpoint,
            transport,
            url_builder if url_builder is not None else DefaultURLBuilder(endpoint),
            owns_transport,
        )

    @classmethod
    async def from_config(
        cls, config: "WebserviceConfig", transport: typing.Optional[Transport] = None
    ) -> "ConnectionSession":
        owns_transport = transport is None
        if transport is None:
            from .implementations.aiohttp import AiohttpTransport

            transport = AiohttpTransport(
                config.key,
                timeout=config.client_timeout(),
                output_format=config.output_format,
            )
        return await cls._open(
            config.endpoint, transport, DefaultURLBuilder(config.endpoint), owns_transport
        )

    async def close(self) -> None:
        """
        Releases the transport if the session created it.
        """
        if self._owns_transport:
            await self.transport.close()

    def __init__(self, endpoint: str, transport: Transport, url_builder: URLBuilder):
        self.endpoint = endpoint
        self.transport = transport
        self.url_builder = url_builder
        self._owns_transport = False
        self._deserializer = ResponseDeserializer()
        self._observers = []
