"""Tests for termintent.keys: key identifiers and raw sequence decoding."""

from __future__ import annotations

import pytest

from termintent.keys import (
    Key,
    char_of,
    format_key_id,
    normalize_key_id,
    parse_key,
    parse_key_id,
)


# ---------------------------------------------------------------------------
# Key helper class
# ---------------------------------------------------------------------------


class TestKeyConstants:
    def test_special_keys(self):
        assert Key.enter == "enter"
        assert Key.escape == "escape"
        assert Key.page_up == "pageUp"
        assert Key.page_down == "pageDown"

    def test_combinators(self):
        assert Key.ctrl("q") == "ctrl+q"
        assert Key.alt(Key.enter) == "alt+enter"
        assert Key.shift("tab") == "shift+tab"


# ---------------------------------------------------------------------------
# Key ID helpers
# ---------------------------------------------------------------------------


class TestParseKeyId:
    def test_plain_key(self):
        assert parse_key_id("a") == {"modifiers": 0, "key": "a"}

    def test_modifiers(self):
        assert parse_key_id("ctrl+shift+a") == {"modifiers": 5, "key": "a"}

    def test_plus_key(self):
        assert parse_key_id("ctrl++") == {"modifiers": 4, "key": "+"}
        assert parse_key_id("+") == {"modifiers": 0, "key": "+"}

    def test_empty(self):
        assert parse_key_id("") is None

    def test_modifier_only(self):
        assert parse_key_id("ctrl+") is None


class TestNormalizeKeyId:
    def test_modifier_case_and_order(self):
        assert normalize_key_id("Alt+Ctrl+X") == "ctrl+alt+x"

    def test_named_key_case(self):
        assert normalize_key_id("PageUp") == "pageUp"
        assert normalize_key_id("Shift+Enter") == "shift+enter"

    def test_esc_alias(self):
        assert normalize_key_id("esc") == "escape"

    def test_plain_character_keeps_case(self):
        assert normalize_key_id("Q") == "Q"
        assert normalize_key_id("q") == "q"

    def test_format_key_id(self):
        assert format_key_id("up", 4 | 2) == "ctrl+alt+up"


class TestEquivalentSpellings:
    def test_modifier_case(self):
        assert normalize_key_id("Ctrl+Q") == normalize_key_id("ctrl+q")

    def test_different_keys(self):
        assert normalize_key_id("ctrl+q") != normalize_key_id("ctrl+w")

    def test_case_of_plain_characters(self):
        assert normalize_key_id("Q") != normalize_key_id("q")


class TestCharOf:
    def test_printable(self):
        assert char_of("a") == "a"
        assert char_of("?") == "?"

    def test_space(self):
        assert char_of("space") == " "

    def test_named_keys_type_nothing(self):
        assert char_of("enter") is None
        assert char_of("ctrl+a") is None

    def test_control_character(self):
        assert char_of("\x01") is None


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


class TestParseKeyLegacy:
    """Legacy terminal sequences and control characters."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            ("\r", "enter"),
            ("\n", "enter"),
            ("\t", "tab"),
            ("\x1b", "escape"),
            ("\x7f", "backspace"),
            ("\x08", "backspace"),
            (" ", "space"),
            ("\x11", "ctrl+q"),
            ("\x15", "ctrl+u"),
            ("\x04", "ctrl+d"),
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1bOA", "up"),
            ("\x1b[1;5A", "ctrl+up"),
            ("\x1b[5~", "pageUp"),
            ("\x1b[6~", "pageDown"),
            ("\x1b[15~", "f5"),
            ("\x1bOP", "f1"),
            ("\x1b[5;5~", "ctrl+pageUp"),
            ("\x1b[Z", "shift+tab"),
        ],
    )
    def test_sequences(self, data, expected):
        assert parse_key(data) == expected

    def test_alt_enter(self):
        assert parse_key("\x1b\r") == "alt+enter"
        assert parse_key("\x1b\n") == "alt+enter"

    def test_alt_letter(self):
        assert parse_key("\x1bx") == "alt+x"
        assert parse_key("\x1bX") == "shift+alt+x"

    def test_printable_keeps_case(self):
        assert parse_key("a") == "a"
        assert parse_key("A") == "A"
        assert parse_key("?") == "?"

    def test_unknown(self):
        assert parse_key("") is None
        assert parse_key("\x1b[99~") is None


class TestParseKeyKitty:
    """Kitty CSI u sequences."""

    def test_enter(self):
        assert parse_key("\x1b[13u") == "enter"

    def test_alt_enter(self):
        assert parse_key("\x1b[13;3u") == "alt+enter"

    def test_ctrl_q(self):
        assert parse_key("\x1b[113;5u") == "ctrl+q"

    def test_plain_letter(self):
        assert parse_key("\x1b[97u") == "a"

    def test_shifted_letter(self):
        assert parse_key("\x1b[97;2u") == "A"

    def test_shifted_symbol(self):
        assert parse_key("\x1b[47:63;2u") == "?"

    def test_function_key(self):
        assert parse_key("\x1b[57368u") == "f5"

    def test_release_is_ignored(self):
        assert parse_key("\x1b[97;1:3u") is None

    def test_out_of_range_codepoint(self):
        assert parse_key("\x1b[99999999u") is None
