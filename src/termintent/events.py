"""Input events consumed by the command state machine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from termintent.keys import KeyId, parse_key

# SGR mouse report: ESC [ < button ; x ; y (M press | m release), 1-based
_SGR_MOUSE_RE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
# X10 mouse report: ESC [ M followed by three bytes offset by 32
_X10_MOUSE_PREFIX = "\x1b[M"

_BUTTON_MASK = 0b11
_MOTION_BIT = 32
_WHEEL_BIT = 64


@dataclass(frozen=True)
class Click:
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"click coordinates must be non-negative, got ({self.x}, {self.y})")


@dataclass(frozen=True)
class DoubleClick:
    """A second click at the position of the previous one.

    Detecting the double click is the event source's job.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"click coordinates must be non-negative, got ({self.x}, {self.y})")


@dataclass(frozen=True)
class KeyEvent:
    key: KeyId


InputEvent = Union[Click, DoubleClick, KeyEvent]


def _is_left_press(button: int) -> bool:
    return button & _BUTTON_MASK == 0 and not button & (_MOTION_BIT | _WHEEL_BIT)


def parse_mouse(data: str) -> Click | None:
    """Return a Click for a left button press report, else ``None``."""
    m = _SGR_MOUSE_RE.fullmatch(data)
    if m:
        button, x, y = int(m.group(1)), int(m.group(2)), int(m.group(3))
        if m.group(4) == "M" and _is_left_press(button) and x > 0 and y > 0:
            return Click(x - 1, y - 1)
        return None

    if data.startswith(_X10_MOUSE_PREFIX) and len(data) == 6:
        button, x, y = (ord(c) - 32 for c in data[3:])
        if _is_left_press(button) and x > 0 and y > 0:
            return Click(x - 1, y - 1)
    return None


def parse_event(data: str) -> InputEvent | None:
    """Decode one complete raw terminal sequence into an event.

    Returns ``None`` for data that is neither a key nor a left click.
    """
    if data.startswith(("\x1b[<", _X10_MOUSE_PREFIX)):
        return parse_mouse(data)
    key = parse_key(data)
    if key is None:
        return None
    return KeyEvent(key)
