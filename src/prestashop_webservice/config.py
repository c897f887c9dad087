"""
Connection settings, with support for environment variable overrides.
"""

import dataclasses
import os

import aiohttp

ENV_URL = "PRESTASHOP_WS_URL"
ENV_KEY = "PRESTASHOP_WS_KEY"
ENV_TIMEOUT = "PRESTASHOP_WS_TIMEOUT"
ENV_CONNECT_TIMEOUT = "PRESTASHOP_WS_CONNECT_TIMEOUT"


def _get_env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclasses.dataclass(frozen=True)
class WebserviceConfig:
    """
    Settings of a connection to a shop's web service.

    :param str endpoint: the shop's base URL.
    :param str key: the web service key, sent as the basic auth user.
    :param str output_format: the response format asked from the service.
    :param float timeout: total time in seconds allowed for a request.
    :param float connect_timeout: time in seconds allowed to establish a connection.
    """

    endpoint: str
    key: str
    output_format: str = "JSON"
    timeout: float = 30.0
    connect_timeout: float = 10.0

    def client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.timeout, connect=self.connect_timeout)

    @classmethod
    def from_env(cls) -> "WebserviceConfig":
        """
        Reads the settings from ``PRESTASHOP_WS_*`` environment variables.

        :raises ValueError: if the URL or the key is missing, or a timeout is not a number.
        """
        endpoint = os.environ.get(ENV_URL)
        if not endpoint:
            raise ValueError(f"{ENV_URL} is not set")
        key = os.environ.get(ENV_KEY)
        if not key:
            raise ValueError(f"{ENV_KEY} is not set")
        return cls(
            endpoint=endpoint,
            key=key,
            timeout=_get_env_float(ENV_TIMEOUT, cls.timeout),
            connect_timeout=_get_env_float(ENV_CONNECT_TIMEOUT, cls.connect_timeout),
        )
