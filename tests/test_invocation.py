"""Tests for termintent.invocation."""

from __future__ import annotations

from termintent.invocation import Invocation, parse_invocation


class TestParseInvocation:
    """The verb name runs up to the first whitespace; the rest is args."""

    def test_name_only(self):
        assert parse_invocation("q") == Invocation(name="q")

    def test_name_and_args(self):
        assert parse_invocation("verb arg") == Invocation(name="verb", args="arg")

    def test_args_keep_inner_whitespace(self):
        assert parse_invocation("cp a  b").args == "a  b"

    def test_empty(self):
        inv = parse_invocation("")
        assert inv.name == ""
        assert inv.args is None
        assert inv.is_empty is True

    def test_not_empty_with_name(self):
        assert parse_invocation("rm").is_empty is False


class TestInvocationStr:
    def test_name_only(self):
        assert str(Invocation(name="q")) == "q"

    def test_with_args(self):
        assert str(Invocation(name="cd", args="..")) == "cd .."
