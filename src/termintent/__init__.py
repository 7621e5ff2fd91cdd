"""termintent: turns typed command text and terminal input into user intents."""

# Command state
from termintent.command import CommandState

# Input events
from termintent.events import Click, DoubleClick, InputEvent, KeyEvent, parse_event, parse_mouse

# Raw input delivery
from termintent.feed import CommandFeed, split_sequences

# Grammar
from termintent.grammar import EMPTY_DECOMPOSITION, Decomposition, decompose

# Intents
from termintent.intent import (
    AltOpenSelection,
    Back,
    Intent,
    InvocationCommit,
    InvocationEdit,
    MoveSelection,
    Next,
    OpenSelection,
    PatternEdit,
    PatternEditAsRegex,
    Quit,
    Refresh,
    ScrollPage,
    ShowHelp,
    Unparsed,
    derive,
    intent_adapter,
)

# Invocations
from termintent.invocation import Invocation, parse_invocation

# Keybindings
from termintent.keybindings import (
    DEFAULT_COMMAND_KEYBINDINGS,
    CommandAction,
    CommandKeybindingsManager,
    get_command_keybindings,
    set_command_keybindings,
)

# Keys
from termintent.keys import Key, KeyId, char_of, normalize_key_id, parse_key

# Batch commands
from termintent.sequence import parse_command_sequence, read_command_file

# Settings
from termintent.settings import Settings

__all__ = [
    # Command state
    "CommandState",
    # Events
    "Click",
    "DoubleClick",
    "InputEvent",
    "KeyEvent",
    "parse_event",
    "parse_mouse",
    # Feed
    "CommandFeed",
    "split_sequences",
    # Grammar
    "EMPTY_DECOMPOSITION",
    "Decomposition",
    "decompose",
    # Intents (Click/DoubleClick intents live in termintent.intent)
    "AltOpenSelection",
    "Back",
    "Intent",
    "InvocationCommit",
    "InvocationEdit",
    "MoveSelection",
    "Next",
    "OpenSelection",
    "PatternEdit",
    "PatternEditAsRegex",
    "Quit",
    "Refresh",
    "ScrollPage",
    "ShowHelp",
    "Unparsed",
    "derive",
    "intent_adapter",
    # Invocations
    "Invocation",
    "parse_invocation",
    # Keybindings
    "DEFAULT_COMMAND_KEYBINDINGS",
    "CommandAction",
    "CommandKeybindingsManager",
    "get_command_keybindings",
    "set_command_keybindings",
    # Keys
    "Key",
    "KeyId",
    "char_of",
    "normalize_key_id",
    "parse_key",
    # Batch commands
    "parse_command_sequence",
    "read_command_file",
    # Settings
    "Settings",
]
