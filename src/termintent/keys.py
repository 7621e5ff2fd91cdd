"""Key identifiers and decoding of raw terminal key sequences.

A key identifier is a string such as ``"a"``, ``"?"``, ``"enter"``,
``"alt+enter"`` or ``"ctrl+q"``. ``parse_key`` turns one raw terminal
sequence (legacy xterm, ESC-prefixed meta keys, control characters or
kitty ``CSI u``) into such an identifier.
"""

from __future__ import annotations

import re
import sys

KeyId = str


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    f1 = "f1"
    f5 = "f5"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

LOCK_MASK = 64 + 128

# Canonical modifier order in identifiers
_MODIFIER_ORDER = ("ctrl", "shift", "alt")

CODEPOINTS: dict[int, str] = {
    27: "escape",
    9: "tab",
    13: "enter",
    32: "space",
    127: "backspace",
    57414: "enter",  # keypad enter
}
# kitty private-use codepoints for F1-F12
CODEPOINTS.update({57364 + i: f"f{i + 1}" for i in range(12)})

# Final byte of ``CSI 1;<mod> X`` and SS3 sequences
_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

# Number of ``CSI <n> ~`` sequences
_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}

_KITTY_CSI_U_RE = re.compile(
    r"\x1b\[(\d+)(?::(\d+))?(?::\d+)?(?:;(\d+)(?::(\d+))?)?u"
)
_CSI_LETTER_RE = re.compile(r"\x1b(?:\[(?:1;(\d+)(?::\d+)?)?|O)([ABCDHFPQRS])")
_CSI_TILDE_RE = re.compile(r"\x1b\[(\d+)(?:;(\d+)(?::\d+)?)?~")

# kitty event type for key release
_RELEASE = 3


# ---------------------------------------------------------------------------
# Key ID helpers
# ---------------------------------------------------------------------------


def parse_key_id(key_id: str) -> dict[str, object] | None:
    """Split a key identifier like ``"ctrl+shift+a"`` into its components.

    Returns a dict with ``modifiers`` (bitmask, shift=1, alt=2, ctrl=4) and
    ``key`` (the base key), or ``None`` when there is no base key.
    """
    if not key_id:
        return None
    # "+" alone, or a trailing "+" as in "ctrl++", is the plus key itself
    if key_id == "+":
        return {"modifiers": 0, "key": "+"}

    parts = key_id.split("+")
    if key_id.endswith("++"):
        parts = parts[:-2] + ["+"]

    modifier = 0
    key_parts: list[str] = []
    for part in parts:
        lower = part.lower()
        if lower in MODIFIERS:
            modifier |= MODIFIERS[lower]
        else:
            key_parts.append(part)

    key = "+".join(key_parts)
    if not key:
        return None
    return {"modifiers": modifier, "key": key}


def format_key_id(key: str, modifiers: int = 0) -> KeyId:
    prefix = "".join(
        f"{name}+" for name in _MODIFIER_ORDER if modifiers & MODIFIERS[name]
    )
    return prefix + key


def normalize_key_id(key_id: str) -> KeyId:
    """Return *key_id* with lower-case modifiers in canonical order.

    An unmodified single character keeps its case, so ``"Q"`` and ``"q"``
    stay distinct. Named keys are case-insensitive.
    """
    parsed = parse_key_id(key_id)
    if parsed is None:
        return key_id
    key = str(parsed["key"])
    modifiers = int(parsed["modifiers"])  # type: ignore[arg-type]
    if len(key) == 1 and modifiers:
        key = key.lower()
    elif len(key) > 1:
        lower = key.lower()
        key = {"pageup": "pageUp", "pagedown": "pageDown", "esc": "escape"}.get(lower, lower)
    return format_key_id(key, modifiers)


def char_of(key_id: str) -> str | None:
    """Return the text a plain-character key types, or ``None``."""
    if key_id == Key.space:
        return " "
    if len(key_id) == 1 and key_id.isprintable():
        return key_id
    return None


# ---------------------------------------------------------------------------
# parse_key: determine what key was pressed from raw input
# ---------------------------------------------------------------------------


def _modifier_bits(raw: str | None) -> int:
    if not raw:
        return 0
    return (int(raw) - 1) & ~LOCK_MASK


def _parse_kitty(data: str) -> str | None:
    m = _KITTY_CSI_U_RE.fullmatch(data)
    if m is None:
        return None
    if m.group(4) and int(m.group(4)) == _RELEASE:
        return None
    codepoint = int(m.group(1))
    shifted = int(m.group(2)) if m.group(2) else None
    mods = _modifier_bits(m.group(3))

    name = CODEPOINTS.get(codepoint)
    if name is not None:
        return format_key_id(name, mods)

    # Shift with a reported shifted key types that key, e.g. shift+/ -> "?"
    if mods & MODIFIERS["shift"] and shifted is not None:
        mods &= ~MODIFIERS["shift"]
        codepoint = shifted
    if codepoint > sys.maxunicode:
        return None
    ch = chr(codepoint)
    if not ch.isprintable():
        return None
    if mods & MODIFIERS["shift"] and ch.isalpha():
        mods &= ~MODIFIERS["shift"]
        ch = ch.upper()
    return format_key_id(ch if mods == 0 else ch.lower(), mods)


def parse_key(data: str) -> KeyId | None:  # noqa: C901
    """Parse raw terminal input and return the key identifier, or ``None``.

    Plain printable characters are returned as-is (case preserved); a
    space is ``"space"``.
    """
    if not data:
        return None

    if data.startswith("\x1b["):
        kitty = _parse_kitty(data)
        if kitty is not None:
            return kitty
        if data == "\x1b[Z":
            return "shift+tab"

    m = _CSI_LETTER_RE.fullmatch(data)
    if m:
        return format_key_id(_LETTER_KEYS[m.group(2)], _modifier_bits(m.group(1)))

    m = _CSI_TILDE_RE.fullmatch(data)
    if m:
        name = _TILDE_KEYS.get(int(m.group(1)))
        if name is None:
            return None
        return format_key_id(name, _modifier_bits(m.group(2)))

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"
    if data == "\x00":
        return "ctrl+space"

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key(data[1])
        parsed = parse_key_id(inner) if inner is not None else None
        if parsed is None:
            return None
        key = str(parsed["key"])
        mods = int(parsed["modifiers"]) | MODIFIERS["alt"]  # type: ignore[arg-type]
        if len(key) == 1 and key.isupper():
            key = key.lower()
            mods |= MODIFIERS["shift"]
        return format_key_id(key, mods)

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return data

    return None
