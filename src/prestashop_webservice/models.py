import types
import typing
from collections import OrderedDict

from .exceptions import InvalidDeclarationError
from .utils import assert_not_none


class ResourceMemberDescriptor:
    parent: typing.Optional["ResourceDescriptor"] = None
    name: str

    T = typing.TypeVar("T", bound="ResourceMemberDescriptor")

    def bind(self: T, parent: "ResourceDescriptor") -> T:
        self.parent = parent
        return self


class ResourceFieldDescriptor(ResourceMemberDescriptor):
    """
    A :py:class:`ResourceFieldDescriptor` describes a single field of a resource.

    :param str name: the name of the field, used as the element name on writes and the key on reads.
    :param bool translatable: set to :py:const:`True` if the value is stored per language.
    :param bool read_only: set to :py:const:`True` if the field never appears in write documents.
    :param bool required: set to :py:const:`True` if the field must hold a non-blank value on writes.
    """

    translatable: bool
    read_only: bool
    required: bool

    @property
    def writable(self) -> bool:
        return not self.read_only

    def __repr__(self) -> str:
        flags = [
            flag for flag in ("translatable", "read_only", "required") if getattr(self, flag)
        ]
        return f"{type(self).__name__}({self.name!r}{''.join(', ' + f for f in flags)})"

    def __init__(
        self,
        name: str,
        translatable: bool = False,
        read_only: bool = False,
        required: bool = False,
    ):
        self.name = name
        self.translatable = translatable
        self.read_only = read_only
        self.required = required


class ResourceAssociationDescriptor(ResourceMemberDescriptor):
    """
    A :py:class:`ResourceAssociationDescriptor` describes a nested collection
    embedded in a resource's representation.

    :param str name: the name of the association, e.g. ``categories``.
    :param Mapping[str, Sequence[str]] nodes: the element name of each nested item
        (e.g. ``category``) mapped to the fields such an item carries, in order.
    """

    _nodes: typing.Mapping[str, typing.Tuple[str, ...]]

    @property
    def nodes(self) -> typing.Mapping[str, typing.Tuple[str, ...]]:
        return self._nodes

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {dict(self._nodes)!r})"

    def __init__(self, name: str, nodes: typing.Mapping[str, typing.Sequence[str]]):
        self.name = name
        self._nodes = types.MappingProxyType(
            OrderedDict((node_name, tuple(fields)) for node_name, fields in nodes.items())
        )


class ResourceDescriptor:
    """
    A :py:class:`ResourceDescriptor` holds everything the serializer needs to know
    about a resource type of the web service.  Descriptors are not modified after
    construction, so a single instance can be shared by every accessor.

    :param str node_name: the element name wrapping one instance on writes, e.g. ``address``.
    :param str name: the collection name used in URLs and response envelopes, e.g. ``addresses``.
    :param Iterable[ResourceFieldDescriptor] fields: the fields of the resource, in wire order.
    :param Iterable[ResourceAssociationDescriptor] associations: the nested collections of the resource.
    """

    node_name: str
    """
    The element name wrapping one instance.
    """
    name: str
    """
    The name of the resource collection.
    """
    _fields: typing.Mapping[str, ResourceFieldDescriptor]
    _associations: typing.Mapping[str, ResourceAssociationDescriptor]

    @property
    def fields(self) -> typing.Mapping[str, ResourceFieldDescriptor]:
        """
        The mapping of field names to :py:class:`ResourceFieldDescriptor`s, in wire order.
        """
        return self._fields

    @property
    def associations(self) -> typing.Mapping[str, ResourceAssociationDescriptor]:
        """
        The mapping of association names to :py:class:`ResourceAssociationDescriptor`s.
        """
        return self._associations

    @property
    def has_associations(self) -> bool:
        return bool(self._associations)

    @property
    def field_names(self) -> typing.Tuple[str, ...]:
        return tuple(self._fields)

    def _indices(self, predicate: typing.Callable[[ResourceFieldDescriptor], bool]):
        return frozenset(i for i, field in enumerate(self._fields.values()) if predicate(field))

    @property
    def translatable_indices(self) -> typing.FrozenSet[int]:
        return self._indices(lambda field: field.translatable)

    @property
    def read_only_indices(self) -> typing.FrozenSet[int]:
        return self._indices(lambda field: field.read_only)

    @property
    def required_indices(self) -> typing.FrozenSet[int]:
        return self._indices(lambda field: field.required)

    def is_translatable(self, name: str) -> bool:
        field = self._fields.get(name)
        return field is not None and field.translatable

    def is_writable(self, name: str) -> bool:
        field = self._fields.get(name)
        return field is not None and field.writable

    def is_required(self, name: str) -> bool:
        field = self._fields.get(name)
        return field is not None and field.required

    def __repr__(self) -> str:
        return f"{type(self).__name__}(node_name={self.node_name!r}, name={self.name!r})"

    @classmethod
    def from_indices(
        cls,
        node_name: str,
        name: str,
        fields: typing.Sequence[str],
        translatable_indices: typing.Iterable[int] = (),
        read_only_indices: typing.Iterable[int] = (),
        required_indices: typing.Iterable[int] = (),
        associations: typing.Optional[
            typing.Mapping[str, typing.Mapping[str, typing.Sequence[str]]]
        ] = None,
    ) -> "ResourceDescriptor":
        """
        Builds a descriptor from a field list and sets of positions into it.

        :param str node_name: the element name wrapping one instance.
        :param str name: the collection name.
        :param Sequence[str] fields: the field names, in wire order.
        :param Iterable[int] translatable_indices: positions of the translatable fields.
        :param Iterable[int] read_only_indices: positions of the read-only fields.
        :param Iterable[int] required_indices: positions of the required fields.
        :param associations: association names mapped to node names mapped to field lists.
        :raises InvalidDeclarationError: if a position does not denote a field.
        """
        index_sets = {
            "translatable": frozenset(translatable_indices),
            "read_only": frozenset(read_only_indices),
            "required": frozenset(required_indices),
        }
        for flag, indices in index_sets.items():
            for i in sorted(indices):
                if not 0 <= i < len(fields):
                    raise InvalidDeclarationError(
                        f"{flag} index {i} is out of range for the "
                        f'{len(fields)} fields of "{node_name}"'
                    )
        return cls(
            node_name=node_name,
            name=name,
            fields=[
                ResourceFieldDescriptor(
                    field_name,
                    **{flag: i in indices for flag, indices in index_sets.items()},
                )
                for i, field_name in enumerate(fields)
            ],
            associations=[
                ResourceAssociationDescriptor(association_name, nodes)
                for association_name, nodes in (associations or {}).items()
            ],
        )

    def __init__(
        self,
        node_name: str,
        name: str,
        fields: typing.Iterable[ResourceFieldDescriptor] = (),
        associations: typing.Iterable[ResourceAssociationDescriptor] = (),
    ) -> None:
        self.node_name = node_name
        self.name = name
        _fields: typing.MutableMapping[str, ResourceFieldDescriptor] = OrderedDict()
        for field in fields:
            if field.name in _fields:
                raise InvalidDeclarationError(
                    f'field "{field.name}" is declared twice in "{node_name}"'
                )
            _fields[assert_not_none(field.name)] = field.bind(self)
        _associations: typing.MutableMapping[str, ResourceAssociationDescriptor] = OrderedDict()
        for association in associations:
            if association.name in _associations:
                raise InvalidDeclarationError(
                    f'association "{association.name}" is declared twice in "{node_name}"'
                )
            _associations[assert_not_none(association.name)] = association.bind(self)
        self._fields = types.MappingProxyType(_fields)
        self._associations = types.MappingProxyType(_associations)
