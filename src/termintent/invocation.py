"""Default parser for the trailing invocation of a command."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

_WHITESPACE_RE = re.compile(r"\s+")


class Invocation(BaseModel):
    """A verb name with its optional, still unparsed, arguments."""

    model_config = ConfigDict(frozen=True)

    name: str
    args: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when the separator was typed but nothing after it yet."""
        return not self.name and self.args is None

    def __str__(self) -> str:
        if self.args is None:
            return self.name
        return f"{self.name} {self.args}"


def parse_invocation(text: str) -> Invocation:
    name, *rest = _WHITESPACE_RE.split(text, maxsplit=1)
    return Invocation(name=name, args=rest[0] if rest else None)
