"""User intents derived from a decomposed command.

Every intent is a frozen pydantic model tagged with a ``type`` literal, so
intents compare by value and dump to JSON for whatever dispatches them.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from termintent.grammar import Decomposition
from termintent.invocation import parse_invocation as default_parse_invocation

InvocationParser = Callable[[str], Any]


class _Intent(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Selection ---


class MoveSelection(_Intent):
    type: Literal["move_selection"] = "move_selection"
    delta: int  # negative is up


class ScrollPage(_Intent):
    type: Literal["scroll_page"] = "scroll_page"
    delta: int  # in pages, not lines


class OpenSelection(_Intent):
    type: Literal["open_selection"] = "open_selection"


class AltOpenSelection(_Intent):
    type: Literal["alt_open_selection"] = "alt_open_selection"


# --- Invocations ---


class InvocationEdit(_Intent):
    """An invocation still being typed."""

    type: Literal["invocation_edit"] = "invocation_edit"
    invocation: Any


class InvocationCommit(_Intent):
    """An invocation the user asked to run."""

    type: Literal["invocation_commit"] = "invocation_commit"
    invocation: Any


# --- Patterns ---


class PatternEdit(_Intent):
    type: Literal["pattern_edit"] = "pattern_edit"
    text: str


class PatternEditAsRegex(_Intent):
    type: Literal["pattern_edit_as_regex"] = "pattern_edit_as_regex"
    core: str
    flags: str


# --- Navigation and application ---


class Back(_Intent):
    type: Literal["back"] = "back"


class Next(_Intent):
    type: Literal["next"] = "next"


class Refresh(_Intent):
    type: Literal["refresh"] = "refresh"


class ShowHelp(_Intent):
    type: Literal["show_help"] = "show_help"


class Quit(_Intent):
    type: Literal["quit"] = "quit"


# --- Pointer ---


class Click(_Intent):
    type: Literal["click"] = "click"
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class DoubleClick(_Intent):
    """Always delivered after a Click at the same position."""

    type: Literal["double_click"] = "double_click"
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class Unparsed(_Intent):
    type: Literal["unparsed"] = "unparsed"


Intent = Annotated[
    Union[
        MoveSelection,
        ScrollPage,
        OpenSelection,
        AltOpenSelection,
        InvocationEdit,
        InvocationCommit,
        PatternEdit,
        PatternEditAsRegex,
        Back,
        Next,
        Refresh,
        ShowHelp,
        Quit,
        Click,
        DoubleClick,
        Unparsed,
    ],
    Field(discriminator="type"),
]

intent_adapter: TypeAdapter[Intent] = TypeAdapter(Intent)


def derive(
    decomposition: Decomposition,
    finished: bool,
    parse_invocation: InvocationParser = default_parse_invocation,
) -> Intent:
    """Compute the intent of a decomposed command.

    A trailing invocation wins over everything else. Without one, a
    finished command opens the selection, and an unfinished one edits the
    pattern (as a regex when flags were requested).
    """
    if decomposition.invocation_text is not None:
        invocation = parse_invocation(decomposition.invocation_text)
        if finished:
            return InvocationCommit(invocation=invocation)
        return InvocationEdit(invocation=invocation)
    if finished:
        return OpenSelection()
    if decomposition.pattern is not None:
        if decomposition.flags_requested is not None:
            return PatternEditAsRegex(
                core=decomposition.pattern, flags=decomposition.flags_requested
            )
        return PatternEdit(text=decomposition.pattern)
    return PatternEdit(text="")
