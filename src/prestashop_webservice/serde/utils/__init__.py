from .formatting import english_enumerate, stringify  # noqa
from .jsonpointer import JSONPointer  # noqa
