"""Commands supplied all at once, from a startup argument or a file."""

from __future__ import annotations

import logging
from pathlib import Path

from termintent.command import CommandState
from termintent.intent import InvocationParser
from termintent.invocation import parse_invocation

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_SEPARATOR = ";"


def parse_command_sequence(
    text: str,
    separator: str = DEFAULT_COMMAND_SEPARATOR,
    invocation_parser: InvocationParser = parse_invocation,
) -> list[CommandState]:
    """Split *text* on *separator* into independent batch commands.

    Entries that are empty once stripped are skipped; the others are kept
    verbatim, so ``"foo ;:rm"`` yields ``"foo "`` and ``":rm"``.
    """
    if not separator:
        raise ValueError("command separator must not be empty")
    commands = [
        CommandState.from_text(part, invocation_parser=invocation_parser)
        for part in text.split(separator)
        if part.strip()
    ]
    logger.debug("Parsed %d command(s) from %r", len(commands), text)
    return commands


def read_command_file(
    path: str | Path,
    invocation_parser: InvocationParser = parse_invocation,
) -> list[CommandState]:
    """Read one command per line, ignoring blank lines and ``#`` comments."""
    content = Path(path).read_text(encoding="utf-8")
    commands: list[CommandState] = []
    for line in content.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        commands.append(CommandState.from_text(line, invocation_parser=invocation_parser))
    return commands
