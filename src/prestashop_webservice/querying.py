import dataclasses
import typing

FULL = "full"
"""
The ``display`` value asking for every field of every item.
"""

FilterValue = typing.Union[str, int, typing.Sequence[typing.Union[str, int]]]


def _render_filter_value(value: FilterValue) -> str:
    if isinstance(value, str):
        if value.startswith(("[", "%")):
            return value
        return f"[{value}]"
    if isinstance(value, int):
        return f"[{value}]"
    return "[" + "|".join(str(v) for v in value) + "]"


@dataclasses.dataclass
class SearchCriteria:
    """
    Criteria of a listing request.

    :param display: :py:data:`FULL` for every field, a sequence of field names for
        a subset, or :py:const:`None` for the summary listing holding ids only.
    :param filters: field names mapped to values.  A string starting with ``[`` or
        ``%`` is passed through as is, so that ranges (``[1,10]``) and
        ``LIKE``-style patterns (``%[shirt]%``) can be expressed.
    :param sort: sort keys such as ``name_ASC``.
    :param limit: the maximum number of items.
    :param offset: the number of items to skip.  Requires ``limit``.
    """

    display: typing.Union[str, typing.Sequence[str], None] = FULL
    filters: typing.Mapping[str, FilterValue] = dataclasses.field(default_factory=dict)
    sort: typing.Sequence[str] = ()
    limit: typing.Optional[int] = None
    offset: typing.Optional[int] = None

    @property
    def is_full(self) -> bool:
        return self.display == FULL

    def to_params(self) -> typing.Dict[str, str]:
        params: typing.Dict[str, str] = {}
        if self.display is not None:
            if isinstance(self.display, str):
                params["display"] = self.display
            else:
                params["display"] = "[" + ",".join(self.display) + "]"
        for name, value in self.filters.items():
            params[f"filter[{name}]"] = _render_filter_value(value)
        if self.sort:
            params["sort"] = "[" + ",".join(self.sort) + "]"
        if self.offset is not None:
            if self.limit is None:
                raise ValueError("offset requires limit")
            params["limit"] = f"{self.offset},{self.limit}"
        elif self.limit is not None:
            params["limit"] = str(self.limit)
        return params
