"""Serial delivery of raw terminal input to a command state.

Raw input can arrive in partial chunks, especially escape sequences such as
mouse reports. ``CommandFeed`` keeps incomplete sequences until the rest
arrives, then applies every complete event, in order, to the single
``CommandState`` it owns.
"""

from __future__ import annotations

import logging
import queue
import re
from typing import Callable

from termintent.command import CommandState
from termintent.events import KeyEvent, parse_event
from termintent.intent import Intent
from termintent.keys import Key, char_of

logger = logging.getLogger(__name__)

ESC = "\x1b"
BRACKETED_PASTE_START = "\x1b[200~"
BRACKETED_PASTE_END = "\x1b[201~"

_SGR_MOUSE_PAYLOAD_RE = re.compile(r"<\d+;\d+;\d+[Mm]")


def _sequence_status(data: str) -> str:
    """Return 'complete', 'incomplete' or 'not-escape' for *data*."""
    if not data.startswith(ESC):
        return "not-escape"
    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [
    if after_esc.startswith("["):
        if after_esc.startswith("[M"):
            return "complete" if len(data) >= 6 else "incomplete"
        if len(data) < 3:
            return "incomplete"
        payload = data[2:]
        if not 0x40 <= ord(payload[-1]) <= 0x7E:
            return "incomplete"
        if payload.startswith("<"):
            return "complete" if _SGR_MOUSE_PAYLOAD_RE.fullmatch(payload) else "incomplete"
        return "complete"

    # SS3 sequences: ESC O
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key: ESC followed by a single character
    return "complete"


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete sequences and an incomplete remainder."""
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]
        if not remaining.startswith(ESC):
            sequences.append(remaining[0])
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            candidate = remaining[:seq_end]
            if _sequence_status(candidate) == "incomplete":
                seq_end += 1
                continue
            sequences.append(candidate)
            pos += seq_end
            break
        else:
            return sequences, remaining

    return sequences, ""


class CommandFeed:
    """Feeds raw terminal input, one complete event at a time, to a state."""

    def __init__(self, state: CommandState | None = None) -> None:
        self.state = state or CommandState()
        self._buffer: str = ""
        self._paste_buffer: str | None = None

    def feed(self, data: str) -> list[Intent]:
        """Process a chunk of raw input and return the intent after each event."""
        intents: list[Intent] = []
        self._buffer += data

        while self._buffer:
            if self._paste_buffer is not None:
                # The end marker may itself be split across chunks.
                self._paste_buffer += self._buffer
                self._buffer = ""
                end_index = self._paste_buffer.find(BRACKETED_PASTE_END)
                if end_index == -1:
                    break
                pasted = self._paste_buffer[:end_index]
                self._buffer = self._paste_buffer[end_index + len(BRACKETED_PASTE_END):]
                self._paste_buffer = None
                intents.extend(self._paste(pasted))
                continue

            start_index = self._buffer.find(BRACKETED_PASTE_START)
            head = self._buffer if start_index == -1 else self._buffer[:start_index]
            sequences, remainder = split_sequences(head)
            for sequence in sequences:
                intents.extend(self._dispatch(sequence))

            if start_index == -1:
                self._buffer = remainder
                break
            if remainder:
                intents.extend(self._dispatch(remainder))
            self._buffer = self._buffer[start_index + len(BRACKETED_PASTE_START):]
            self._paste_buffer = ""

        return intents

    def flush(self) -> list[Intent]:
        """Treat whatever is buffered as complete (e.g. a lone ESC)."""
        pending, self._buffer = self._buffer, ""
        if not pending:
            return []
        return self._dispatch(pending)

    def pump(
        self,
        source: queue.Queue[str | None],
        on_intent: Callable[[Intent], None] | None = None,
    ) -> None:
        """Drain raw chunks from *source* until a ``None`` sentinel arrives.

        The input capture can run on another thread and ``put`` chunks;
        this consumer applies them serially.
        """
        while True:
            chunk = source.get()
            try:
                intents = self.flush() if chunk is None else self.feed(chunk)
                if on_intent is not None:
                    for intent in intents:
                        on_intent(intent)
            finally:
                source.task_done()
            if chunk is None:
                return

    def _dispatch(self, sequence: str) -> list[Intent]:
        event = parse_event(sequence)
        if event is None:
            logger.debug("Ignoring unrecognized input %r", sequence)
            return []
        return [self.state.apply(event)]

    def _paste(self, text: str) -> list[Intent]:
        intents: list[Intent] = []
        for ch in text:
            key = Key.space if ch == " " else ch
            if char_of(key) is None:
                continue
            intents.append(self.state.apply(KeyEvent(key)))
        return intents
