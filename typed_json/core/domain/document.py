# typed_json/core/domain/document.py

"""Document handle owning a parsed JSON tree"""

# Standard library imports
from collections.abc import Sequence
from datetime import datetime

# Local imports
from typed_json.core.domain.values import JsonObject
from typed_json.core.domain.values import JsonValue
from typed_json.core.types.json import JSONType

MEMORY_SOURCE = "<memory>"


class Document:
    """Root of one parsed JSON document plus where it came from

    The tree is immutable, so a Document can be shared between threads and
    queried concurrently. Objects handed out by read_object are nodes of this
    same tree, not copies; holding one keeps its part of the tree alive even
    after the Document itself is dropped.

    The read_* methods are shortcuts for the accessor functions applied to the
    root node.
    """

    __slots__ = ("root", "source", "loaded_at")

    def __init__(self, root: JsonValue, source: str = MEMORY_SOURCE) -> None:
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "loaded_at", datetime.now())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Document is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Document is immutable")

    def __repr__(self) -> str:
        return f"Document(source={self.source!r}, root={self.root.kind.value})"

    @property
    def is_from_file(self) -> bool:
        return self.source != MEMORY_SOURCE

    def to_python(self) -> JSONType:
        """Plain Python copy of the whole document"""
        return self.root.to_python()

    # Accessor shortcuts on the root node

    def read_string(self, key: str) -> str:
        # Local imports
        from typed_json.application.accessors import read_string

        return read_string(self.root, key)

    def read_number_as_int(self, key: str) -> int:
        # Local imports
        from typed_json.application.accessors import read_number_as_int

        return read_number_as_int(self.root, key)

    def read_number_as_float(self, key: str) -> float:
        # Local imports
        from typed_json.application.accessors import read_number_as_float

        return read_number_as_float(self.root, key)

    def read_bool(self, key: str) -> bool:
        # Local imports
        from typed_json.application.accessors import read_bool

        return read_bool(self.root, key)

    def read_object(self, key: str) -> JsonObject:
        # Local imports
        from typed_json.application.accessors import read_object

        return read_object(self.root, key)

    def read_array_of_string(self, key: str) -> list[str]:
        # Local imports
        from typed_json.application.accessors import read_array_of_string

        return read_array_of_string(self.root, key)

    def read_value(self, key: str) -> JsonValue:
        # Local imports
        from typed_json.application.accessors import read_value

        return read_value(self.root, key)

    def read_path(self, path: str | Sequence[str]) -> JsonValue:
        # Local imports
        from typed_json.application.accessors import read_path

        return read_path(self.root, path)

    def has_key(self, key: str) -> bool:
        # Local imports
        from typed_json.application.accessors import has_key

        return has_key(self.root, key)
