import typing


def _escape(component: str) -> str:
    return component.replace("~", "~0").replace("/", "~1")


def _unescape(component: str) -> str:
    return component.replace("~1", "/").replace("~0", "~")


class JSONPointer:
    """
    An immutable JSON pointer used to locate the offending node of a payload
    in error reports.

    .. code-block:: python

       JSONPointer() / "addresses" / 0  # -> /addresses/0
    """

    components: typing.Tuple[str, ...]

    def __truediv__(self, component: typing.Union[str, int]) -> "JSONPointer":
        return JSONPointer(self.components + (str(component),))

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, str):
            other = JSONPointer(other)
        if not isinstance(other, JSONPointer):
            return NotImplemented
        return self.components == other.components

    def __hash__(self) -> int:
        return hash(self.components)

    def __str__(self) -> str:
        return "/" + "/".join(_escape(c) for c in self.components)

    def __repr__(self) -> str:
        return f"JSONPointer({str(self)!r})"

    def __init__(self, components: typing.Union[str, typing.Iterable[str]] = ()):
        if isinstance(components, str):
            self.components = tuple(_unescape(c) for c in components.split("/")[1:] if c)
        else:
            self.components = tuple(components)
