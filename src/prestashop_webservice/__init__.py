"""
A client for the PrestaShop web service.
"""

from .accessor import ResourceAccessor, accessor_for  # noqa: F401
from .config import WebserviceConfig  # noqa: F401
from .exceptions import (  # noqa: F401
    InvalidDeclarationError,
    LanguagesNotFetchedError,
    LanguageValidationError,
    MethodNotAllowedError,
    NoActiveLanguageError,
    NotConnectedError,
    PrestaShopWebserviceException,
    TransportError,
    UnknownLanguageError,
    WebserviceConnectionError,
    WebservicePermissionError,
)
from .interfaces import Method, RequestDescriptor, Response, Transport, URLBuilder  # noqa: F401
from .models import (  # noqa: F401
    ResourceAssociationDescriptor,
    ResourceDescriptor,
    ResourceFieldDescriptor,
)
from .querying import FULL, SearchCriteria  # noqa: F401
from .resources import REGISTRY, ResourceRegistry  # noqa: F401
from .serde.exceptions import (  # noqa: F401
    DecodeError,
    IdentifierMismatchError,
    InvalidStructureError,
    MissingAssociationPropertiesError,
    MissingPropertiesError,
    RequiredPropertiesNotSetError,
    SerdeError,
    SerializationError,
)
from .serde.models import Operation  # noqa: F401
from .session import ConnectionSession, Language  # noqa: F401
