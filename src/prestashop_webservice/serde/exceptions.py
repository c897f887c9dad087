import abc
import typing

from .models import Operation
from .types import JSONValue
from .utils import JSONPointer, english_enumerate


class SerdeError(Exception):
    message: str

    def __str__(self):
        return self.message


class SerializationError(SerdeError, metaclass=abc.ABCMeta):
    """
    Raised when an instance cannot be rendered into a write document.
    ``names`` lists the offending fields, ``path`` the dotted location they
    belong to (empty for top-level fields) and ``index`` the position of the
    instance within a batch.
    """

    resource: "models.ResourceDescriptor"
    names: typing.Sequence[str]
    path: str
    index: typing.Optional[int]

    @property
    @abc.abstractmethod
    def problem(self) -> str:
        ...  # pragma: nocover

    @property
    def message(self) -> str:  # type: ignore
        location = f"{self.path} " if self.path else ""
        at = f" (item #{self.index})" if self.index is not None else ""
        detail = f": {english_enumerate(self.names)}" if self.names else ""
        return f'{location}{self.problem} in "{self.resource.node_name}"{at}{detail}'

    def __init__(
        self,
        resource: "models.ResourceDescriptor",
        names: typing.Sequence[str] = (),
        path: str = "",
        index: typing.Optional[int] = None,
    ):
        super().__init__(resource, names, path, index)
        self.resource = resource
        self.names = tuple(names)
        self.path = path
        self.index = index


class MissingPropertiesError(SerializationError):
    problem = "missing properties"  # type: ignore


class RequiredPropertiesNotSetError(SerializationError):
    problem = "required properties not set"  # type: ignore


class MissingAssociationPropertiesError(SerializationError):
    problem = "missing association properties"  # type: ignore


class InvalidStructureError(SerializationError):
    detail: str

    @property
    def problem(self) -> str:
        return self.detail

    def __init__(
        self,
        resource: "models.ResourceDescriptor",
        detail: str,
        path: str = "",
        index: typing.Optional[int] = None,
    ):
        super().__init__(resource, (), path, index)
        self.detail = detail


class IdentifierMismatchError(SerializationError):
    operation: Operation

    @property
    def problem(self) -> str:
        if self.operation is Operation.UPDATE:
            return "id must be set for update"
        else:
            return "id must be empty for create"

    @property
    def message(self) -> str:  # type: ignore
        at = f" (item #{self.index})" if self.index is not None else ""
        return f'{self.problem} in "{self.resource.node_name}"{at}'

    def __init__(
        self,
        resource: "models.ResourceDescriptor",
        operation: Operation,
        index: typing.Optional[int] = None,
    ):
        super().__init__(resource, ("id",), "", index)
        self.operation = operation


class DecodeError(SerdeError):
    payload: JSONValue
    pointer: JSONPointer
    detail: str

    @property
    def message(self) -> str:  # type: ignore
        return f"{self.pointer}: {self.detail}"

    def __init__(self, payload: JSONValue, pointer: JSONPointer, detail: str):
        super().__init__(pointer, detail)
        self.payload = payload
        self.pointer = pointer
        self.detail = detail


if typing.TYPE_CHECKING:
    from .. import models  # noqa: E402
