# typed_json/core/domain/__init__.py

"""Core domain models: the JSON value tree, documents and errors"""

# Local imports
from typed_json.core.domain.document import Document
from typed_json.core.domain.enums import ErrorKind
from typed_json.core.domain.enums import ValueKind
from typed_json.core.domain.errors import JsonIOError
from typed_json.core.domain.errors import JsonReadError
from typed_json.core.domain.errors import KeyNotFoundError
from typed_json.core.domain.errors import NotAnObjectError
from typed_json.core.domain.errors import ParseError
from typed_json.core.domain.errors import TypeMismatchError
from typed_json.core.domain.values import JsonArray
from typed_json.core.domain.values import JsonBool
from typed_json.core.domain.values import JsonNull
from typed_json.core.domain.values import JsonNumber
from typed_json.core.domain.values import JsonObject
from typed_json.core.domain.values import JsonString
from typed_json.core.domain.values import JsonValue
from typed_json.core.domain.values import from_python

__all__ = [
    "Document",
    "ErrorKind",
    "ValueKind",
    "JsonIOError",
    "JsonReadError",
    "KeyNotFoundError",
    "NotAnObjectError",
    "ParseError",
    "TypeMismatchError",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "from_python",
]
