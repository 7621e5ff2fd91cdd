"""Command state: the text being typed and the intent it currently expresses.

The intent is recomputed from scratch after every change to the text, so it
only ever depends on the current text and on whether the last event asked
for the command to be run.
"""

from __future__ import annotations

import logging

from termintent.events import Click, DoubleClick, InputEvent, KeyEvent
from termintent.grammar import EMPTY_DECOMPOSITION, INVOCATION_SEPARATOR, Decomposition, decompose
from termintent.intent import (
    AltOpenSelection,
    Back,
    Intent,
    InvocationParser,
    MoveSelection,
    Next,
    Quit,
    Refresh,
    ScrollPage,
    ShowHelp,
    Unparsed,
    derive,
)
from termintent.intent import Click as ClickIntent
from termintent.intent import DoubleClick as DoubleClickIntent
from termintent.invocation import parse_invocation
from termintent.keybindings import CommandKeybindingsManager, get_command_keybindings
from termintent.keys import char_of

logger = logging.getLogger(__name__)


class CommandState:
    """Owns the raw command text and its derived intent.

    Not thread-safe: events must reach a given state one at a time.
    """

    def __init__(
        self,
        *,
        invocation_parser: InvocationParser = parse_invocation,
        keybindings: CommandKeybindingsManager | None = None,
    ) -> None:
        self._raw: str = ""
        self._decomposition: Decomposition = EMPTY_DECOMPOSITION
        self._intent: Intent = Unparsed()
        self._parse_invocation = invocation_parser
        self._keybindings = keybindings

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        invocation_parser: InvocationParser = parse_invocation,
        keybindings: CommandKeybindingsManager | None = None,
    ) -> CommandState:
        """Build a state from a complete, non-interactively supplied command.

        This is not how typed input is interpreted: any ``:`` in *text*,
        even a trailing one, means the command is to be executed, as if
        the user had hit enter.
        """
        state = cls(invocation_parser=invocation_parser, keybindings=keybindings)
        state._raw = text
        state._decomposition = decompose(text)
        state._intent = derive(
            state._decomposition,
            INVOCATION_SEPARATOR in text,
            state._parse_invocation,
        )
        return state

    # --- Read access ---

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def decomposition(self) -> Decomposition:
        return self._decomposition

    @property
    def intent(self) -> Intent:
        return self._intent

    @property
    def keybindings(self) -> CommandKeybindingsManager:
        return self._keybindings or get_command_keybindings()

    # --- Events ---

    def apply(self, event: InputEvent) -> Intent:
        """Update the state for *event* and return the new intent.

        Unknown events leave the state untouched.
        """
        if isinstance(event, Click):
            self._intent = ClickIntent(x=event.x, y=event.y)
        elif isinstance(event, DoubleClick):
            self._intent = DoubleClickIntent(x=event.x, y=event.y)
        elif isinstance(event, KeyEvent):
            self._apply_key(event.key)
        else:
            logger.debug("Ignoring unsupported event %r", event)
        return self._intent

    def _apply_key(self, key: str) -> None:  # noqa: C901
        kb = self.keybindings

        if kb.matches(key, "next"):
            self._intent = Next()
        elif kb.matches(key, "submit"):
            self._intent = derive(self._decomposition, True, self._parse_invocation)
        elif kb.matches(key, "altSubmit"):
            self._intent = AltOpenSelection()
        elif kb.matches(key, "quit"):
            self._intent = Quit()
        elif kb.matches(key, "selectUp"):
            self._intent = MoveSelection(delta=-1)
        elif kb.matches(key, "selectDown"):
            self._intent = MoveSelection(delta=1)
        elif kb.matches(key, "refresh"):
            self._intent = Refresh()
        elif kb.matches(key, "pageUp"):
            self._intent = ScrollPage(delta=-1)
        elif kb.matches(key, "pageDown"):
            self._intent = ScrollPage(delta=1)
        elif kb.matches(key, "help") and (
            not self._raw or self._decomposition.has_invocation
        ):
            # Elsewhere the help key is typed like any other character,
            # so it can be part of a pattern.
            self._intent = ShowHelp()
        elif kb.matches(key, "back"):
            self._intent = Back()
        elif kb.matches(key, "deleteCharBackward"):
            self._delete_char_backward()
        elif (char := char_of(key)) is not None:
            self._set_raw(self._raw + char)
        else:
            logger.debug("Ignoring key %r", key)
            return
        logger.debug("Key %r -> %r (raw=%r)", key, self._intent, self._raw)

    def _delete_char_backward(self) -> None:
        if not self._raw:
            self._intent = Back()
            return
        self._set_raw(self._raw[:-1])

    def _set_raw(self, raw: str) -> None:
        self._raw = raw
        self._decomposition = decompose(raw)
        self._intent = derive(self._decomposition, False, self._parse_invocation)

    def __repr__(self) -> str:
        return f"CommandState(raw={self._raw!r}, intent={self._intent!r})"
