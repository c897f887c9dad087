import typing
import urllib.parse

from .interfaces import URLBuilder


class DefaultURLBuilder(URLBuilder):
    """
    Builds URLs of the form ``<endpoint>/api/<resource>/<id>``.

    :param str endpoint: the shop's base URL, e.g. ``https://shop.example.com``.
    :param str api_path: the path of the web service below the endpoint.
    """

    endpoint: str
    api_path: str

    def resource_url(
        self, resource: typing.Optional[str] = None, id: typing.Optional[typing.Any] = None
    ) -> str:
        url = f"{self.endpoint}/{self.api_path}/"
        if resource is None:
            return url
        url += urllib.parse.quote(resource)
        if id is not None:
            url += "/" + urllib.parse.quote(str(id), safe="")
        return url

    def __init__(self, endpoint: str, api_path: str = "api"):
        self.endpoint = endpoint.rstrip("/")
        self.api_path = api_path.strip("/")
