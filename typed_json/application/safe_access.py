# typed_json/application/safe_access.py

"""Result-returning wrappers around loaders and accessors

Useful where a caller wants to collect every problem in a settings file rather
than stop at the first one. Only JsonReadError failures become Err values; any
other exception is a bug and propagates unchanged.
"""

# Standard library imports
from os import PathLike
from typing import Callable

# Local imports
from typed_json.core.domain.document import Document
from typed_json.core.domain.errors import JsonReadError
from typed_json.core.domain.values import JsonValue
from typed_json.core.types.results import Err
from typed_json.core.types.results import Ok
from typed_json.core.types.results import Result
from typed_json.infrastructure.config import ReaderConfig
from typed_json.infrastructure.persistence import load_from_file
from typed_json.infrastructure.persistence import load_from_text


def attempt[T](accessor: Callable[[JsonValue, str], T], node: JsonValue, key: str) -> Result[T]:
    """Run an accessor and capture its failure as an Err

    Example:
        >>> attempt(read_string, doc.root, "gameTitle")  # doctest: +SKIP
        Ok(type='ok', value='My New Game')
    """
    try:
        return Ok(value=accessor(node, key))
    except JsonReadError as e:
        return Err.from_exception(e)


def try_load_from_file(
    path: str | PathLike[str], config: ReaderConfig | None = None
) -> Result[Document]:
    """load_from_file returning Ok/Err instead of raising"""
    try:
        return Ok(value=load_from_file(path, config))
    except JsonReadError as e:
        return Err.from_exception(e)


def try_load_from_text(text: str, config: ReaderConfig | None = None) -> Result[Document]:
    """load_from_text returning Ok/Err instead of raising"""
    try:
        return Ok(value=load_from_text(text, config))
    except JsonReadError as e:
        return Err.from_exception(e)


__all__ = ["attempt", "try_load_from_file", "try_load_from_text"]
