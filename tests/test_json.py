"""JSON reading and parsing tests."""

import pytest

from jsonaccessors._errors import InvalidJSONError, MaxDepthExceededError, SampleReadError
from jsonaccessors._json import parse_json, read_json_file


class TestParseJSON:
    def test_object(self):
        assert parse_json('{"a": [1, 2.5, "x", true, null]}') == {
            "a": [1, 2.5, "x", True, None]
        }

    @pytest.mark.parametrize("text", ['"s"', "1", "true", "null", "[]"])
    def test_top_level_scalars_and_arrays(self, text):
        parse_json(text)

    @pytest.mark.parametrize("text", ["", "{", "[1,]", "{'a': 1}", "tru"])
    def test_syntax_errors(self, text):
        with pytest.raises(InvalidJSONError, match="^Invalid JSON: "):
            parse_json(text)

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(InvalidJSONError):
            parse_json(text)

    def test_invalid_utf8(self):
        with pytest.raises(InvalidJSONError):
            parse_json(b'{"a": "\xff"}')

    def test_wrapped_decoder_error(self):
        with pytest.raises(InvalidJSONError) as exc_info:
            parse_json("{")
        assert exc_info.value.wrapped is not None
        assert "line 1 column 2" in exc_info.value.internal()

    def test_excessive_nesting(self):
        with pytest.raises(MaxDepthExceededError):
            parse_json("[" * 100000 + "]" * 100000)


class TestReadJSONFile:
    def test_reads_file(self, trade_file, trade_document):
        assert read_json_file(trade_file) == trade_document

    def test_accepts_str_path(self, trade_file, trade_document):
        assert read_json_file(str(trade_file)) == trade_document

    def test_unreadable(self, tmp_path):
        with pytest.raises(SampleReadError, match="cannot read sample document"):
            read_json_file(tmp_path / "nope.json")
