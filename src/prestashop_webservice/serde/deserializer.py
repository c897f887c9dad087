import collections.abc
import typing

from .exceptions import DecodeError
from .models import ASSOCIATIONS
from .types import JSONValue, ResourceInstance
from .utils import JSONPointer


class ResponseDeserializer:
    """
    Extracts resource instances from the JSON documents the web service returns.
    """

    def normalize_associations(
        self,
        descr: "models.ResourceDescriptor",
        item: ResourceInstance,
        pointer: typing.Optional[JSONPointer] = None,
        payload: JSONValue = None,
    ) -> ResourceInstance:
        """
        Makes every association declared by the descriptor resolve to a list.
        Associations the item lacks, or holds as ``null`` or ``""``, become
        empty lists; the others are kept as they are.  The item is modified in
        place and returned.

        :raises DecodeError: if the item's ``associations`` is not an object.
        """
        if not descr.has_associations:
            return item
        associations = item.get(ASSOCIATIONS)
        if associations is None:
            associations = {}
        elif isinstance(associations, collections.abc.Mapping):
            associations = dict(associations)
        else:
            raise DecodeError(
                payload if payload is not None else item,
                (pointer if pointer is not None else JSONPointer()) / ASSOCIATIONS,
                f"value must be an object, got {associations!r}",
            )
        for name in descr.associations:
            if not associations.get(name):
                associations[name] = []
        item[ASSOCIATIONS] = associations
        return item

    def _items(
        self, descr: "models.ResourceDescriptor", payload: JSONValue
    ) -> typing.Tuple[JSONPointer, typing.Sequence[typing.Any], bool]:
        root = JSONPointer()
        if isinstance(payload, collections.abc.Sequence) and not isinstance(payload, str):
            # the service answers an empty array when nothing matches
            if not payload:
                return root, (), False
            raise DecodeError(payload, root, f'value must be an object holding "{descr.name}"')
        if not isinstance(payload, collections.abc.Mapping):
            raise DecodeError(payload, root, f'value must be an object holding "{descr.name}"')
        if descr.name in payload:
            items = payload[descr.name]
            if isinstance(items, str) or not isinstance(items, collections.abc.Sequence):
                raise DecodeError(
                    payload, root / descr.name, f"value must be an array, got {items!r}"
                )
            return root / descr.name, items, False
        if descr.node_name in payload:
            item = payload[descr.node_name]
            return root / descr.node_name, (item,), True
        raise DecodeError(payload, root, f'value must have a property "{descr.name}"')

    def extract(
        self,
        descr: "models.ResourceDescriptor",
        payload: JSONValue,
        normalize: bool = True,
    ) -> typing.List[ResourceInstance]:
        """
        Extracts the instances of a resource from a response document.

        :param ResourceDescriptor descr: the descriptor of the expected resource.
        :param JSONValue payload: the parsed response.
        :param bool normalize: set to :py:const:`False` to leave associations as they came.
        :return: shallow copies of the items found in the response.
        :raises DecodeError: if the document does not hold the expected resource.
        """
        pointer, items, single = self._items(descr, payload)
        retval: typing.List[ResourceInstance] = []
        for i, item in enumerate(items):
            item_pointer = pointer if single else pointer / i
            if not isinstance(item, collections.abc.Mapping):
                raise DecodeError(payload, item_pointer, f"value must be an object, got {item!r}")
            instance = dict(item)
            if normalize:
                self.normalize_associations(descr, instance, item_pointer, payload)
            retval.append(instance)
        return retval

    def __call__(
        self,
        descr: "models.ResourceDescriptor",
        payload: JSONValue,
        normalize: bool = True,
    ) -> typing.List[ResourceInstance]:
        return self.extract(descr, payload, normalize)


if typing.TYPE_CHECKING:
    from .. import models  # noqa: E402
