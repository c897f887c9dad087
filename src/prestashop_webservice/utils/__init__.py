import typing

T = typing.TypeVar("T")

FALSY_STRINGS = frozenset(["", "0", "false"])


def assert_not_none(value: typing.Optional[T]) -> T:
    assert value is not None
    return value


def coerce_flag(value: typing.Any) -> bool:
    """
    Interprets a boolean as the web service spells it: JSON booleans,
    numbers, or the strings ``"1"``/``"0"`` and ``"true"``/``"false"``.
    """
    if isinstance(value, str):
        return value.strip().lower() not in FALSY_STRINGS
    return bool(value)
