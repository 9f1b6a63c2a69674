"""Tests for ParserConfig.

Verifies defaults, immutability, and encoding validation.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_datatype.config import DEFAULT_CONFIG, ParserConfig


class TestDefaults:
    def test_comments_allowed_by_default(self) -> None:
        assert ParserConfig().allow_comments is True

    def test_utf8_by_default(self) -> None:
        assert ParserConfig().encoding == "utf-8"

    def test_module_default_matches(self) -> None:
        assert DEFAULT_CONFIG == ParserConfig()


class TestValidation:
    def test_frozen(self) -> None:
        config = ParserConfig()
        with pytest.raises(FrozenInstanceError):
            config.allow_comments = False  # type: ignore[misc]

    @pytest.mark.parametrize("encoding", ["latin-1", "UTF-8", "utf_16", "ascii"])
    def test_known_encodings_accepted(self, encoding: str) -> None:
        assert ParserConfig(encoding=encoding).encoding == encoding

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ValueError, match="known codec"):
            ParserConfig(encoding="no-such-codec")
