# typed_json/core/domain/enums.py

"""Domain enumerations for typed JSON reading"""

# Standard library imports
from enum import Enum


class ValueKind(Enum):
    """Kind tag of a parsed JSON value"""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"  # JSON has a single number kind, integers included
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class ErrorKind(Enum):
    """Distinguishable failure kinds surfaced by loaders and accessors"""

    IO = "io"  # Source file missing, unreadable or too large
    PARSE = "parse"  # Text is not well-formed JSON
    NOT_AN_OBJECT = "not_an_object"  # Accessor called on a non-object node
    KEY_NOT_FOUND = "key_not_found"  # Key absent from an object node
    TYPE_MISMATCH = "type_mismatch"  # Key present but value has the wrong kind
