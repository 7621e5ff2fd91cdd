"""Tests for termintent.grammar: decomposition of command text."""

from __future__ import annotations

import pytest

from termintent.grammar import EMPTY_DECOMPOSITION, Decomposition, decompose


# ---------------------------------------------------------------------------
# Patterns and regex flags
# ---------------------------------------------------------------------------


class TestPattern:
    """A leading token of non-space, non-slash, non-colon characters."""

    def test_empty_text(self):
        assert decompose("") == EMPTY_DECOMPOSITION

    def test_plain_pattern(self):
        assert decompose("foo") == Decomposition(pattern="foo")

    def test_question_mark_is_part_of_pattern(self):
        assert decompose("ab?").pattern == "ab?"

    def test_unicode_pattern(self):
        assert decompose("été").pattern == "été"


class TestRegexFlags:
    """A slash after the pattern, or before it, asks for a regex."""

    def test_trailing_flags(self):
        assert decompose("foo/i") == Decomposition(pattern="foo", flags_requested="i")

    def test_trailing_slash_without_flags(self):
        assert decompose("a/") == Decomposition(pattern="a", flags_requested="")

    def test_leading_slash_without_flags(self):
        assert decompose("/a") == Decomposition(pattern="a", flags_requested="")

    def test_leading_slash_and_explicit_flags(self):
        assert decompose("/re/gi") == Decomposition(pattern="re", flags_requested="gi")

    def test_lone_slash_has_no_flags(self):
        # flags only exist attached to a pattern
        assert decompose("/") == EMPTY_DECOMPOSITION

    def test_double_slash_has_no_flags(self):
        assert decompose("//") == EMPTY_DECOMPOSITION

    def test_flags_never_without_pattern(self):
        for text in ["/", "//", "/:x", ":a/b", " /i"]:
            d = decompose(text)
            if d.pattern is None:
                assert d.flags_requested is None, text


# ---------------------------------------------------------------------------
# Trailing invocation
# ---------------------------------------------------------------------------


class TestInvocation:
    """Everything after the first whitespace/colon run is the invocation."""

    def test_colon_separator(self):
        assert decompose("abc:verb arg") == Decomposition(
            pattern="abc", invocation_text="verb arg"
        )

    def test_colon_without_pattern(self):
        assert decompose(":q") == Decomposition(invocation_text="q")

    def test_space_separator(self):
        assert decompose("a b") == Decomposition(pattern="a", invocation_text="b")

    def test_separator_run_is_consumed(self):
        assert decompose("a :  b").invocation_text == "b"

    def test_separator_only(self):
        d = decompose("a:")
        assert d.pattern == "a"
        assert d.invocation_text == ""
        assert d.has_invocation is True

    def test_after_flags(self):
        assert decompose("a/i x") == Decomposition(
            pattern="a", flags_requested="i", invocation_text="x"
        )

    def test_invocation_kept_verbatim(self):
        assert decompose("a:cp /tmp/x: y").invocation_text == "cp /tmp/x: y"

    def test_invocation_may_span_lines(self):
        assert decompose("a b\nc").invocation_text == "b\nc"

    def test_no_invocation(self):
        assert decompose("foo").has_invocation is False


# ---------------------------------------------------------------------------
# Totality
# ---------------------------------------------------------------------------


class TestTotality:
    """decompose never raises."""

    def test_unaccountable_text_is_empty(self):
        assert decompose("a/b/c") == EMPTY_DECOMPOSITION

    @pytest.mark.parametrize(
        "text",
        ["\x00", "\n", "::::", "/ /", "a/b/c/d", "​", "🙂/x y", "/" * 50, " " * 10],
    )
    def test_arbitrary_text(self, text):
        assert isinstance(decompose(text), Decomposition)
