# tests/unit/infrastructure/persistence/test_json_parser.py

"""Tests for the stdlib parser adapter"""

# Third party imports
import pytest

# Local imports
from typed_json import JsonObject
from typed_json import ParseError
from typed_json import ValueKind
from typed_json.infrastructure.config import ParsingConfig
from typed_json.infrastructure.persistence import parse_text


class TestParseText:
    """Test parsing into value trees"""

    def test_parses_object(self):
        root = parse_text('{"a": [1, true, null]}', "<memory>", ParsingConfig())
        assert isinstance(root, JsonObject)
        assert [item.kind for item in root.get("a")] == [
            ValueKind.NUMBER,
            ValueKind.BOOLEAN,
            ValueKind.NULL,
        ]

    def test_scalar_root(self):
        assert parse_text("42", "<memory>", ParsingConfig()).kind is ValueKind.NUMBER

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "{",
            '{"a": }',
            "{'a': 1}",
            '{"a": 1,}',
            "[1, 2",
            '{"a": 1} trailing',
        ],
    )
    def test_malformed_text(self, text):
        with pytest.raises(ParseError):
            parse_text(text, "<memory>", ParsingConfig())

    def test_error_position(self):
        text = '{\n  "width": 800,\n  "height": \n}'
        with pytest.raises(ParseError) as exc_info:
            parse_text(text, "screen.json", ParsingConfig())
        error = exc_info.value
        assert error.line == 4
        assert error.column == 1
        assert error.offset == text.index("}")
        assert error.source == "screen.json"
        assert "line 4" in str(error)

    def test_error_is_chained(self):
        with pytest.raises(ParseError) as exc_info:
            parse_text("{", "<memory>", ParsingConfig())
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestParsingOptions:
    """Test the ParsingConfig switches"""

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_rejected_by_default(self, literal):
        with pytest.raises(ParseError, match=literal):
            parse_text(f'{{"speed": {literal}}}', "<memory>", ParsingConfig())

    @pytest.mark.parametrize("literal", ["1e400", "-1e400"])
    def test_out_of_range_literal_is_parse_error(self, literal):
        """Literals that overflow to infinity are refused like Infinity itself"""
        with pytest.raises(ParseError, match=r"Non-finite number .* at \$\.speed") as exc_info:
            parse_text(f'{{"speed": {literal}}}', "<memory>", ParsingConfig())
        assert exc_info.value.source == "<memory>"

    def test_out_of_range_literal_allowed(self):
        root = parse_text('{"speed": 1e400}', "<memory>", ParsingConfig(allow_non_finite=True))
        assert root.get("speed").value == float("inf")

    def test_non_finite_allowed(self):
        root = parse_text('{"speed": Infinity}', "<memory>", ParsingConfig(allow_non_finite=True))
        assert root.get("speed").value == float("inf")

    def test_duplicate_keys_last_wins_by_default(self):
        root = parse_text('{"lives": 3, "lives": 5}', "<memory>", ParsingConfig())
        assert root.get("lives").value == 5

    def test_duplicate_keys_rejected(self):
        config = ParsingConfig(reject_duplicate_keys=True)
        with pytest.raises(ParseError, match="Duplicate object key 'lives'"):
            parse_text('{"nested": {"lives": 3, "lives": 5}}', "<memory>", config)

    def test_duplicate_check_keeps_order(self):
        config = ParsingConfig(reject_duplicate_keys=True)
        root = parse_text('{"b": 1, "a": 2}', "<memory>", config)
        assert root.keys() == ["b", "a"]

    def test_too_deep(self):
        depth = 100_000
        with pytest.raises(ParseError, match="nested too deeply"):
            parse_text("[" * depth + "]" * depth, "<memory>", ParsingConfig())
