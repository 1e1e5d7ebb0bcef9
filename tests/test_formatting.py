"""Tests for the JSON pretty-printer."""

import pytest

from zmq_json_validator import format_json


class TestFormatJson:
    def test_indents_objects(self) -> None:
        assert format_json('{"height":100,"hash":"abc"}') == (
            '{\n  "height": 100,\n  "hash": "abc"\n}'
        )

    def test_custom_indent(self) -> None:
        assert format_json("[1,2]", indent=4) == "[\n    1,\n    2\n]"

    def test_accepts_bytes(self) -> None:
        assert format_json(b'{"a":[]}') == '{\n  "a": []\n}'

    def test_keeps_number_text(self) -> None:
        """Numbers are displayed as received."""
        assert "100.0" in format_json('{"a":100.0}')

    @pytest.mark.parametrize("text", ["{not json", "", '{"a":1', "[1,]", "nul"])
    def test_malformed_json_returns_error_string(self, text: str) -> None:
        """Malformed input is described, never raised."""
        result = format_json(text)
        assert result.startswith("Error parsing JSON: ")
        assert len(result) > len("Error parsing JSON: ")

    def test_wrong_input_type_returns_error_string(self) -> None:
        assert format_json(None).startswith("Error parsing JSON: ")

    @pytest.mark.parametrize("depth", [129, 5000, 100_000])
    def test_deeply_nested_input_returns_error_string(self, depth: int) -> None:
        result = format_json("[" * depth + "]" * depth)
        assert result.startswith("Error parsing JSON: ")

    def test_nesting_up_to_the_limit_is_formatted(self) -> None:
        result = format_json('{"a":' * 128 + "1" + "}" * 128)
        assert not result.startswith("Error")
        assert result.endswith("}")
