"""Tests for parse() and parse_bytes().

Covers verbatim text retention, comment tolerance, Decimal numbers,
duplicate keys, malformed input (InvalidJsonData with line/column and a
chained cause), byte ranges, encodings, and config handling.
"""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from json_datatype.config import ParserConfig
from json_datatype.exceptions import ErrorCode, InvalidJsonData
from json_datatype.parser import parse, parse_bytes
from json_datatype.textform import Verbatim
from json_datatype.tree.nodes import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)


class TestParseSuccess:
    def test_verbatim_text_kept_exactly(self) -> None:
        text = '{ "a" :  1 ,"b":[true , null] }'
        doc = parse(text)
        assert doc.text_form == Verbatim(text)
        assert doc.verbatim_text == text

    def test_tree_built(self) -> None:
        doc = parse('{"a":1,"b":[true,null,"s"]}')
        expected = JsonObject(
            {
                "a": JsonNumber(1),
                "b": JsonArray((JsonBool(True), JsonNull(), JsonString("s"))),
            }
        )
        assert doc.root == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("null", JsonNull()),
            ("true", JsonBool(True)),
            ("false", JsonBool(False)),
            ("7", JsonNumber(7)),
            ('"x"', JsonString("x")),
            ("[]", JsonArray(())),
            ("{}", JsonObject({})),
        ],
    )
    def test_top_level_values(self, text: str, expected: object) -> None:
        assert parse(text).root == expected

    def test_fractional_number_is_decimal(self) -> None:
        node = parse("0.1").root
        assert isinstance(node, JsonNumber)
        assert isinstance(node.value, Decimal)
        assert node.value == Decimal("0.1")

    def test_exponent_number_is_decimal(self) -> None:
        node = parse("1e2").root
        assert isinstance(node, JsonNumber)
        assert node.value == Decimal("100")

    def test_big_integer_kept_exact(self) -> None:
        node = parse("123456789012345678901234567890").root
        assert isinstance(node, JsonNumber)
        assert node.value == 123456789012345678901234567890

    def test_integer_beyond_str_digit_limit(self) -> None:
        literal = "1" * 5000
        doc = parse(literal)
        assert isinstance(doc.root, JsonNumber)
        assert doc.root.value == Decimal(literal)
        assert doc.serialize_to_string() == literal

    def test_nested_integer_beyond_str_digit_limit(self) -> None:
        literal = "-" + "9" * 5000
        doc = parse('{"a":' + literal + "}")
        assert doc.get("a").serialize_to_string() == literal
        assert doc.get("a").root == JsonNumber(Decimal(literal))

    def test_unicode_and_escapes(self) -> None:
        node = parse('"caf\\u00e9 \\"q\\" \\n"').root
        assert node == JsonString('café "q" \n')

    def test_surrounding_whitespace_allowed(self) -> None:
        assert parse("  \n[1]\t ").root == JsonArray((JsonNumber(1),))


class TestComments:
    def test_line_comment(self) -> None:
        doc = parse('{"a": 1 // one\n}')
        assert doc.root == JsonObject({"a": JsonNumber(1)})

    def test_block_comment(self) -> None:
        doc = parse('/* header */ {"a": /* inline */ 1}')
        assert doc.root == JsonObject({"a": JsonNumber(1)})

    def test_verbatim_text_keeps_comments(self) -> None:
        text = "[1] // note"
        assert parse(text).verbatim_text == text

    def test_comment_markers_in_strings_untouched(self) -> None:
        doc = parse('{"u": "http://x/*y*/"}')
        assert doc.root == JsonObject({"u": JsonString("http://x/*y*/")})

    def test_comments_rejected_when_disabled(self) -> None:
        with pytest.raises(InvalidJsonData):
            parse("[1] // note", ParserConfig(allow_comments=False))

    def test_unterminated_block_comment_is_invalid(self) -> None:
        with pytest.raises(InvalidJsonData):
            parse("[1] /* open")


class TestDuplicateKeys:
    def test_last_value_wins(self) -> None:
        doc = parse('{"a":1,"a":2}')
        assert doc.root == JsonObject({"a": JsonNumber(2)})

    def test_verbatim_text_keeps_both_occurrences(self) -> None:
        text = '{"a":1,"a":2}'
        assert str(parse(text)) == text

    def test_nested_duplicates(self) -> None:
        doc = parse('{"o":{"k":"x","k":"y"},"o2":1}')
        inner = doc.root.get("o")  # type: ignore[union-attr]
        assert inner == JsonObject({"k": JsonString("y")})


class TestParseFailure:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "{",
            '{"a":}',
            "[1,]",
            '{"a" 1}',
            "{'a': 1}",
            "tru",
            "[1] [2]",
            '{"a":1} x',
            "NaN",
            "Infinity",
            "[-Infinity]",
            '"unterminated',
        ],
    )
    def test_malformed_raises_invalid_json_data(self, text: str) -> None:
        with pytest.raises(InvalidJsonData):
            parse(text)

    def test_error_code(self) -> None:
        with pytest.raises(InvalidJsonData) as exc_info:
            parse("{")
        assert exc_info.value.code == ErrorCode.INVALID_JSON_DATA
        assert str(exc_info.value).startswith("INVALID_JSON_DATA: ")

    def test_line_and_column_reported(self) -> None:
        with pytest.raises(InvalidJsonData) as exc_info:
            parse('{\n  "a": 1,\n  "b": }')
        assert exc_info.value.line == 3
        assert exc_info.value.column == 8

    def test_position_accounts_for_comments(self) -> None:
        """Blanked comments keep the original line/column numbering."""
        with pytest.raises(InvalidJsonData) as exc_info:
            parse('/* c */ {"a": }')
        assert exc_info.value.line == 1
        assert exc_info.value.column == 15

    def test_cause_is_chained(self) -> None:
        with pytest.raises(InvalidJsonData) as exc_info:
            parse("[1,")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
        assert exc_info.value.message == exc_info.value.__cause__.msg

    def test_constant_rejection_has_no_position(self) -> None:
        with pytest.raises(InvalidJsonData) as exc_info:
            parse("NaN")
        assert exc_info.value.line is None
        assert exc_info.value.column is None
        assert "NaN" in exc_info.value.message

    def test_deep_nesting_is_invalid(self) -> None:
        with pytest.raises(InvalidJsonData, match="too deep"):
            parse("[" * 100_000 + "]" * 100_000)

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse(b"[1]")  # type: ignore[arg-type]


class TestParseBytes:
    def test_whole_buffer(self) -> None:
        doc = parse_bytes(b'{"a":1}')
        assert doc.root == JsonObject({"a": JsonNumber(1)})
        assert doc.verbatim_text == '{"a":1}'

    def test_offset_and_length(self) -> None:
        buf = b'xx[1,2]yy'
        doc = parse_bytes(buf, 2, 5)
        assert doc.root == JsonArray((JsonNumber(1), JsonNumber(2)))
        assert doc.verbatim_text == "[1,2]"

    def test_offset_without_length_reads_to_end(self) -> None:
        assert parse_bytes(b"  true", 2).root == JsonBool(True)

    def test_utf8_decoded(self) -> None:
        doc = parse_bytes('"né"'.encode())
        assert doc.root == JsonString("né")

    def test_bytearray_and_memoryview(self) -> None:
        assert parse_bytes(bytearray(b"[1]")).root == JsonArray((JsonNumber(1),))
        assert parse_bytes(memoryview(b"[1]")).root == JsonArray((JsonNumber(1),))

    @pytest.mark.parametrize(
        ("offset", "length"), [(-1, 1), (0, 10), (4, 1), (1, -1)]
    )
    def test_range_outside_buffer(self, offset: int, length: int) -> None:
        with pytest.raises(ValueError, match="outside buffer"):
            parse_bytes(b"[1]", offset, length)

    def test_undecodable_bytes(self) -> None:
        with pytest.raises(InvalidJsonData) as exc_info:
            parse_bytes(b'"\xff"')
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_custom_encoding(self) -> None:
        config = ParserConfig(encoding="latin-1")
        doc = parse_bytes('"é"'.encode("latin-1"), config=config)
        assert doc.root == JsonString("é")

    def test_malformed_bytes(self) -> None:
        with pytest.raises(InvalidJsonData):
            parse_bytes(b"{", 0, 1)
