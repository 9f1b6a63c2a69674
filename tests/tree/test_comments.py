"""Tests for strip_comments.

Covers line and block comments, comment markers inside strings, escaped
quotes, position preservation, and unterminated block comments.
"""

from __future__ import annotations

import json

import pytest

from json_datatype.tree.comments import strip_comments


class TestStripComments:
    def test_text_without_slash_returned_unchanged(self) -> None:
        text = '{"a": 1}'
        assert strip_comments(text) is text

    def test_line_comment_blanked(self) -> None:
        text = '{"a": 1} // trailing'
        stripped = strip_comments(text)
        assert json.loads(stripped) == {"a": 1}
        assert "trailing" not in stripped

    def test_block_comment_blanked(self) -> None:
        text = '{/* lead */"a": /* mid */ 1}'
        assert json.loads(strip_comments(text)) == {"a": 1}

    def test_length_preserved(self) -> None:
        text = '[1, /* two\nlines */ 2] // end'
        assert len(strip_comments(text)) == len(text)

    def test_newlines_in_block_comment_kept(self) -> None:
        text = "/* a\nb\nc */1"
        stripped = strip_comments(text)
        assert stripped.count("\n") == 2
        assert stripped.strip() == "1"

    def test_line_comment_stops_at_newline(self) -> None:
        text = "// comment\n[1]"
        assert json.loads(strip_comments(text)) == [1]

    @pytest.mark.parametrize(
        "text",
        [
            '{"url": "http://example.com"}',
            '{"glob": "/* not a comment */"}',
            '{"q": "say \\"//hi\\""}',
        ],
    )
    def test_markers_inside_strings_kept(self, text: str) -> None:
        assert strip_comments(text) == text

    def test_escaped_backslash_before_quote_closes_string(self) -> None:
        text = '["a\\\\" // gone\n]'
        assert json.loads(strip_comments(text)) == ["a\\"]

    def test_unterminated_block_comment_left_in_place(self) -> None:
        text = "[1] /* never closed"
        assert strip_comments(text) == text

    def test_lone_slash_kept(self) -> None:
        text = "[1] / 2"
        assert strip_comments(text) == text
