# typed_json/__init__.py

"""typed_json

Read JSON documents (game settings, level lists, save data) through typed
accessors that either return the requested shape or raise a distinguishable
error.

    >>> from typed_json import load_from_text, read_object, read_number_as_int
    >>> doc = load_from_text('{"screenSize": {"width": 800, "height": 600}}')
    >>> read_number_as_int(read_object(doc.root, "screenSize"), "width")
    800
"""

# Local imports
# Typed accessors
from typed_json.application.accessors import has_key
from typed_json.application.accessors import read_array
from typed_json.application.accessors import read_array_of_bool
from typed_json.application.accessors import read_array_of_int
from typed_json.application.accessors import read_array_of_object
from typed_json.application.accessors import read_array_of_string
from typed_json.application.accessors import read_bool
from typed_json.application.accessors import read_number_as_float
from typed_json.application.accessors import read_number_as_int
from typed_json.application.accessors import read_object
from typed_json.application.accessors import read_path
from typed_json.application.accessors import read_string
from typed_json.application.accessors import read_value
from typed_json.application.safe_access import attempt
from typed_json.application.safe_access import try_load_from_file
from typed_json.application.safe_access import try_load_from_text

# Value model and errors
from typed_json.core.domain import Document
from typed_json.core.domain import ErrorKind
from typed_json.core.domain import JsonArray
from typed_json.core.domain import JsonBool
from typed_json.core.domain import JsonIOError
from typed_json.core.domain import JsonNull
from typed_json.core.domain import JsonNumber
from typed_json.core.domain import JsonObject
from typed_json.core.domain import JsonReadError
from typed_json.core.domain import JsonString
from typed_json.core.domain import JsonValue
from typed_json.core.domain import KeyNotFoundError
from typed_json.core.domain import NotAnObjectError
from typed_json.core.domain import ParseError
from typed_json.core.domain import TypeMismatchError
from typed_json.core.domain import ValueKind
from typed_json.core.domain import from_python
from typed_json.core.types import Err
from typed_json.core.types import Ok
from typed_json.core.types import Result

# Loading and configuration
from typed_json.infrastructure.config import ReaderConfig
from typed_json.infrastructure.config import get_config
from typed_json.infrastructure.logging import setup_logging
from typed_json.infrastructure.persistence import load_from_file
from typed_json.infrastructure.persistence import load_from_text

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Loading
    "load_from_file",
    "load_from_text",
    "Document",
    # Accessors
    "read_string",
    "read_number_as_int",
    "read_number_as_float",
    "read_bool",
    "read_object",
    "read_value",
    "read_array",
    "read_array_of_string",
    "read_array_of_int",
    "read_array_of_bool",
    "read_array_of_object",
    "read_path",
    "has_key",
    # Result style
    "attempt",
    "try_load_from_file",
    "try_load_from_text",
    "Ok",
    "Err",
    "Result",
    # Value model
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "ValueKind",
    "from_python",
    # Errors
    "ErrorKind",
    "JsonReadError",
    "JsonIOError",
    "ParseError",
    "NotAnObjectError",
    "KeyNotFoundError",
    "TypeMismatchError",
    # Configuration
    "ReaderConfig",
    "get_config",
    "setup_logging",
    # Version
    "__version__",
]
