# typed_json/core/types/__init__.py

"""Type definitions for typed_json

JSON aliases for parser output and the Ok/Err result types.
"""

# Local imports
from typed_json.core.types.json import JSONDict
from typed_json.core.types.json import JSONList
from typed_json.core.types.json import JSONPrimitive
from typed_json.core.types.json import JSONType
from typed_json.core.types.results import Err
from typed_json.core.types.results import Ok
from typed_json.core.types.results import Result

__all__ = [
    # JSON
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    # Results
    "Ok",
    "Err",
    "Result",
]
