"""
:py:mod:`prestashop_webservice.serde.renderer` renders resource instances into
the XML documents the web service accepts for writes.

Synopsis
--------

.. code-block:: python

   from prestashop_webservice.resources import ADDRESS
   from prestashop_webservice.serde.models import Operation
   from prestashop_webservice.serde.renderer import PayloadRenderer

   renderer = PayloadRenderer()

   document = renderer(
       ADDRESS,
       {
           "id_customer": "1",
           "id_country": "8",
           "alias": "Home",
           ...
       },
       Operation.CREATE,
       language_id="1",
   )

"""

import collections.abc
import re
import typing
import xml.etree.ElementTree as ET

from .exceptions import (
    IdentifierMismatchError,
    InvalidStructureError,
    MissingAssociationPropertiesError,
    MissingPropertiesError,
    RequiredPropertiesNotSetError,
    SerializationError,
)
from .models import ASSOCIATIONS, ID, LANGUAGE, ROOT_TAG, Operation
from .types import ResourceInstance
from .utils import stringify

_XML_ILLEGAL_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _missing(
    item: typing.Mapping[str, typing.Any], names: typing.Iterable[str]
) -> typing.List[str]:
    return [name for name in names if name not in item]


class PayloadRenderer:
    _root_tag: str = ROOT_TAG

    def _effective_field_names(
        self, descr: "models.ResourceDescriptor", operation: Operation
    ) -> typing.List[str]:
        names = list(descr.field_names)
        if descr.has_associations:
            names.append(ASSOCIATIONS)
        if operation is Operation.UPDATE:
            names.append(ID)
        return names

    def _text(self, descr: "models.ResourceDescriptor", value: typing.Any, path: str) -> str:
        text = stringify(value)
        if _XML_ILLEGAL_CHARS.search(text) is not None:
            raise InvalidStructureError(descr, "value holds characters not allowed in XML", path)
        return text

    def _render_associations(
        self,
        descr: "models.ResourceDescriptor",
        parent: ET.Element,
        associations: typing.Any,
    ) -> None:
        if associations is None:
            associations = {}
        if not isinstance(associations, collections.abc.Mapping):
            raise InvalidStructureError(descr, "associations must be a mapping", ASSOCIATIONS)
        elem = ET.SubElement(parent, ASSOCIATIONS)
        for assoc_descr in descr.associations.values():
            items = associations.get(assoc_descr.name)
            if not items:
                continue
            path = f"{ASSOCIATIONS}.{assoc_descr.name}"
            if isinstance(items, (str, bytes)) or not isinstance(items, collections.abc.Sequence):
                raise InvalidStructureError(descr, "association items must be a list", path)
            assoc_elem = ET.SubElement(elem, assoc_descr.name)
            for node_name, field_names in assoc_descr.nodes.items():
                node_path = f"{path}.{node_name}"
                for item in items:
                    if not isinstance(item, collections.abc.Mapping):
                        raise InvalidStructureError(
                            descr, "association item must be a mapping", node_path
                        )
                    missing = _missing(item, field_names)
                    if missing:
                        raise MissingAssociationPropertiesError(descr, missing, node_path)
                    node_elem = ET.SubElement(assoc_elem, node_name)
                    for name in field_names:
                        ET.SubElement(node_elem, name).text = self._text(
                            descr, item[name], f"{node_path}.{name}"
                        )

    def render_instance(
        self,
        descr: "models.ResourceDescriptor",
        instance: ResourceInstance,
        operation: Operation,
        language_id: str,
    ) -> ET.Element:
        """
        Validates a single instance against the descriptor and renders it.

        :param ResourceDescriptor descr: the descriptor of the instance's resource.
        :param ResourceInstance instance: the instance.
        :param Operation operation: the write the element is meant for.
        :param str language_id: the language translatable values are tagged with.
        :return: the element named after the descriptor's ``node_name``.
        :raises SerializationError: if the instance does not fit the descriptor.
        """
        missing = _missing(instance, self._effective_field_names(descr, operation))
        if missing:
            raise MissingPropertiesError(descr, missing)

        not_set = [
            field.name
            for field in descr.fields.values()
            if field.required and not stringify(instance[field.name])
        ]
        if not_set:
            raise RequiredPropertiesNotSetError(descr, not_set)

        elem = ET.Element(descr.node_name)
        id_ = self._text(descr, instance.get(ID), ID)
        if operation is Operation.UPDATE:
            if not id_:
                raise IdentifierMismatchError(descr, operation)
            ET.SubElement(elem, ID).text = id_
        elif id_:
            raise IdentifierMismatchError(descr, operation)

        for field in descr.fields.values():
            if field.read_only:
                continue
            value = self._text(descr, instance[field.name], field.name)
            field_elem = ET.SubElement(elem, field.name)
            if field.translatable:
                ET.SubElement(field_elem, LANGUAGE, {ID: language_id}).text = value
            else:
                field_elem.text = value

        if descr.has_associations:
            self._render_associations(descr, elem, instance[ASSOCIATIONS])
        return elem

    def render(
        self,
        descr: "models.ResourceDescriptor",
        instances: typing.Iterable[ResourceInstance],
        operation: Operation,
        language_id: str,
    ) -> ET.Element:
        root = ET.Element(self._root_tag)
        for i, instance in enumerate(instances):
            try:
                root.append(self.render_instance(descr, instance, operation, language_id))
            except SerializationError as e:
                e.index = i
                raise
        return root

    def __call__(
        self,
        descr: "models.ResourceDescriptor",
        input: typing.Union[ResourceInstance, typing.Sequence[ResourceInstance]],
        operation: Operation,
        language_id: str,
    ) -> str:
        """
        Renders one instance or a batch of instances into a write document.
        The batch is rendered all-or-nothing: the first instance that fails
        aborts the whole document.

        :return: the XML document as a string.
        """
        if isinstance(input, collections.abc.Mapping):
            root = ET.Element(self._root_tag)
            root.append(self.render_instance(descr, input, operation, language_id))
        else:
            root = self.render(descr, input, operation, language_id)
        return ET.tostring(root, encoding="unicode")


if typing.TYPE_CHECKING:
    from .. import models  # noqa: E402
