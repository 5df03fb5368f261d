# typed_json/infrastructure/persistence/_parser.py

"""Adapter around the stdlib JSON parser producing JsonValue trees"""

# Standard library imports
from json import JSONDecodeError
from json import loads

# Local imports
from typed_json.core.domain.errors import ParseError
from typed_json.core.domain.values import JsonValue
from typed_json.core.domain.values import from_python
from typed_json.core.types.json import JSONDict
from typed_json.core.types.json import JSONType
from typed_json.infrastructure.config import ParsingConfig


class _DuplicateKey(ValueError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)


class _NonFiniteLiteral(ValueError):
    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(literal)


def _reject_constant(literal: str) -> float:
    raise _NonFiniteLiteral(literal)


def _unique_pairs(pairs: list[tuple[str, JSONType]]) -> JSONDict:
    result: JSONDict = {}
    for key, value in pairs:
        if key in result:
            raise _DuplicateKey(key)
        result[key] = value
    return result


def parse_text(text: str, source: str, parsing: ParsingConfig) -> JsonValue:
    """Parse JSON text into an immutable value tree

    Args:
        text: JSON text
        source: Name of where the text came from, used in error messages
        parsing: Parsing options

    Returns:
        Root node of the parsed document

    Raises:
        ParseError: text is not well-formed JSON under the given options
    """
    hooks: dict[str, object] = {}
    if not parsing.allow_non_finite:
        hooks["parse_constant"] = _reject_constant
    if parsing.reject_duplicate_keys:
        hooks["object_pairs_hook"] = _unique_pairs

    try:
        data = loads(text, **hooks)  # type: ignore[arg-type]
        return from_python(data, allow_non_finite=parsing.allow_non_finite)
    except JSONDecodeError as e:
        raise ParseError(e.msg, source, e.lineno, e.colno, e.pos) from e
    except _NonFiniteLiteral as e:
        raise ParseError(f"Non-finite number literal {e.literal} is not valid JSON", source) from e
    except _DuplicateKey as e:
        raise ParseError(f"Duplicate object key {e.key!r}", source) from e
    except RecursionError as e:
        raise ParseError("Document is nested too deeply", source) from e
    except ValueError as e:
        # Out of range literals such as 1e400 decode to inf without hitting parse_constant
        raise ParseError(str(e), source) from e
