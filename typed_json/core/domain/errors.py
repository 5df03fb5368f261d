# typed_json/core/domain/errors.py

"""Error taxonomy for loading and reading JSON documents

Every failure surfaced by this package is a JsonReadError, so callers can catch
the whole family in one place. Each concrete error also derives from the
builtin exception a Python caller would naturally expect (OSError for file
problems, ValueError for malformed text, KeyError for missing keys, TypeError
for kind mismatches), and carries an ErrorKind on its ``kind`` attribute.
"""

# Local imports
from typed_json.core.domain.enums import ErrorKind
from typed_json.core.domain.enums import ValueKind


class JsonReadError(Exception):
    """Base class for all typed_json failures"""

    kind: ErrorKind

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class JsonIOError(JsonReadError, OSError):
    """Source file is missing, unreadable, undecodable or too large"""

    kind = ErrorKind.IO

    def __init__(self, message: str, source: str) -> None:
        self.source = source
        super().__init__(message)


class ParseError(JsonReadError, ValueError):
    """Input text is not well-formed JSON

    line and column are 1-based, offset is the 0-based character index into the
    text. All three are best effort and may be None when the parser could not
    locate the failure.
    """

    kind = ErrorKind.PARSE

    def __init__(
        self,
        message: str,
        source: str,
        line: int | None = None,
        column: int | None = None,
        offset: int | None = None,
    ) -> None:
        self.source = source
        self.line = line
        self.column = column
        self.offset = offset
        if line is not None and column is not None:
            message = f"{message} ({source}, line {line}, column {column})"
        else:
            message = f"{message} ({source})"
        super().__init__(message)


class NotAnObjectError(JsonReadError, TypeError):
    """An accessor was called on a node that is not an object"""

    kind = ErrorKind.NOT_AN_OBJECT

    def __init__(self, path: str, actual: ValueKind) -> None:
        self.actual = actual
        super().__init__(f"Expected object at {path}, found {actual.value}", path)


class KeyNotFoundError(JsonReadError, KeyError):
    """The requested key is absent from an object node"""

    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, path: str, key: str) -> None:
        self.key = key
        super().__init__(f"Key {key!r} not found in object at {path}", path)


class TypeMismatchError(JsonReadError, TypeError):
    """A value exists but its kind is not the one the accessor requires

    For array reads, index names the first element that failed the check and
    path points at that element.
    """

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(
        self,
        path: str,
        key: str,
        expected: ValueKind,
        actual: ValueKind,
        index: int | None = None,
        message: str | None = None,
    ) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            message or f"Expected {expected.value} at {path}, found {actual.value}", path
        )


__all__ = [
    "JsonReadError",
    "JsonIOError",
    "ParseError",
    "NotAnObjectError",
    "KeyNotFoundError",
    "TypeMismatchError",
]
