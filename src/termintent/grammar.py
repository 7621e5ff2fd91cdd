"""Decomposition of typed command text.

The grammar, anchored at both ends::

    [/] [pattern] [/flags] [<whitespace-or-colon>+ invocation]

``pattern`` is a run of characters that are neither whitespace, ``/`` nor
``:``. ``flags`` is a run of word characters. Everything after the first
whitespace/colon run is the trailing invocation, taken verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Compiled once at import; re.Pattern objects are immutable and thread-safe.
_COMMAND_RE = re.compile(
    r"""
    (?P<slash_before>/)?
    (?P<pattern>[^\s/:]+)?
    (?:/(?P<flags>\w*))?
    (?:[\s:]+(?P<invocation>.*))?
    """,
    re.VERBOSE | re.DOTALL,
)

# Characters which, anywhere in a batch command, mean "execute it".
INVOCATION_SEPARATOR = ":"


@dataclass(frozen=True)
class Decomposition:
    pattern: str | None = None
    # "" means a regex was asked for (leading or trailing slash) with no flags
    flags_requested: str | None = None
    invocation_text: str | None = None

    @property
    def has_invocation(self) -> bool:
        return self.invocation_text is not None


EMPTY_DECOMPOSITION = Decomposition()


def decompose(text: str) -> Decomposition:
    """Split *text* into pattern, regex flags and trailing invocation.

    Never raises. Text the grammar cannot account for as a whole (for
    instance ``"a/b/c"``) yields an empty decomposition.
    """
    match = _COMMAND_RE.fullmatch(text)
    if match is None:
        return EMPTY_DECOMPOSITION

    pattern = match.group("pattern")
    flags: str | None = None
    if pattern is not None:
        flags = match.group("flags")
        if flags is None and match.group("slash_before") is not None:
            flags = ""

    return Decomposition(
        pattern=pattern,
        flags_requested=flags,
        invocation_text=match.group("invocation"),
    )
