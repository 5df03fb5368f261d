# tests/unit/core/domain/test_errors.py

"""Tests for the error taxonomy"""

# Third party imports
import pytest

# Local imports
from typed_json.core.domain.enums import ErrorKind
from typed_json.core.domain.enums import ValueKind
from typed_json.core.domain.errors import JsonIOError
from typed_json.core.domain.errors import JsonReadError
from typed_json.core.domain.errors import KeyNotFoundError
from typed_json.core.domain.errors import NotAnObjectError
from typed_json.core.domain.errors import ParseError
from typed_json.core.domain.errors import TypeMismatchError


class TestErrorHierarchy:
    """Every error is a JsonReadError and the matching builtin"""

    @pytest.mark.parametrize(
        "error,builtin,kind",
        [
            (JsonIOError("gone", source="a.json"), OSError, ErrorKind.IO),
            (ParseError("bad", source="a.json"), ValueError, ErrorKind.PARSE),
            (NotAnObjectError("$", ValueKind.ARRAY), TypeError, ErrorKind.NOT_AN_OBJECT),
            (KeyNotFoundError("$", "k"), KeyError, ErrorKind.KEY_NOT_FOUND),
            (
                TypeMismatchError("$.k", "k", ValueKind.STRING, ValueKind.NUMBER),
                TypeError,
                ErrorKind.TYPE_MISMATCH,
            ),
        ],
    )
    def test_family_and_builtin(self, error, builtin, kind):
        assert isinstance(error, JsonReadError)
        assert isinstance(error, builtin)
        assert error.kind is kind

    def test_kinds_are_distinct(self):
        """The five failure kinds can be told apart"""
        kinds = {
            JsonIOError.kind,
            ParseError.kind,
            NotAnObjectError.kind,
            KeyNotFoundError.kind,
            TypeMismatchError.kind,
        }
        assert len(kinds) == 5


class TestErrorMessages:
    """Messages name the location and the kinds involved"""

    def test_key_not_found_message_is_not_repr_quoted(self):
        """KeyError normally renders as repr; ours is a readable sentence"""
        error = KeyNotFoundError("$.screenSize", "depth")
        assert str(error) == "Key 'depth' not found in object at $.screenSize"
        assert error.key == "depth"
        assert error.path == "$.screenSize"

    def test_type_mismatch_message(self):
        error = TypeMismatchError("$.levels[1]", "levels", ValueKind.STRING, ValueKind.NUMBER, 1)
        assert str(error) == "Expected string at $.levels[1], found number"
        assert error.index == 1
        assert error.expected is ValueKind.STRING
        assert error.actual is ValueKind.NUMBER

    def test_not_an_object_message(self):
        error = NotAnObjectError("$.levels", ValueKind.ARRAY)
        assert str(error) == "Expected object at $.levels, found array"

    def test_parse_error_position(self):
        error = ParseError("Expecting value", source="level.json", line=3, column=7, offset=21)
        assert str(error) == "Expecting value (level.json, line 3, column 7)"
        assert (error.line, error.column, error.offset) == (3, 7, 21)

    def test_parse_error_without_position(self):
        error = ParseError("Duplicate object key 'a'", source="<memory>")
        assert str(error) == "Duplicate object key 'a' (<memory>)"
        assert error.line is None

    def test_io_error_source(self):
        error = JsonIOError("Cannot read a.json: No such file or directory", source="a.json")
        assert error.source == "a.json"
        assert "No such file" in str(error)
