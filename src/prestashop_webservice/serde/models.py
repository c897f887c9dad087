"""
Names and enumerations shared by the renderer and the deserializer of
:py:mod:`prestashop_webservice.serde`.
"""

import enum

ROOT_TAG = "prestashop"
"""
The tag of the root element of every write document.
"""

ID = "id"
LANGUAGE = "language"
ASSOCIATIONS = "associations"


class Operation(enum.Enum):
    """
    The kind of write a document is rendered for.  It decides whether the
    ``id`` element is required (``UPDATE``) or forbidden (``CREATE``).
    """

    CREATE = "create"
    UPDATE = "update"
