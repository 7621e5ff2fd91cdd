"""Command keybindings manager."""

from __future__ import annotations

from typing import Literal

from termintent.keys import KeyId, normalize_key_id

CommandAction = Literal[
    # Navigation
    "next",
    "selectUp",
    "selectDown",
    "pageUp",
    "pageDown",
    "back",
    # Opening
    "submit",
    "altSubmit",
    # Editing
    "deleteCharBackward",
    # Application
    "refresh",
    "help",
    "quit",
]

CommandKeybindingsConfig = dict[CommandAction, KeyId | list[KeyId]]

DEFAULT_COMMAND_KEYBINDINGS: dict[CommandAction, KeyId | list[KeyId]] = {
    # Navigation
    "next": "tab",
    "selectUp": "up",
    "selectDown": "down",
    "pageUp": ["pageUp", "ctrl+u"],
    "pageDown": ["pageDown", "ctrl+d"],
    "back": "escape",
    # Opening
    "submit": "enter",
    "altSubmit": "alt+enter",
    # Editing
    "deleteCharBackward": "backspace",
    # Application
    "refresh": "f5",
    "help": "?",
    "quit": "ctrl+q",
}


def _as_list(keys: KeyId | list[KeyId]) -> list[KeyId]:
    return list(keys) if isinstance(keys, list) else [keys]


class CommandKeybindingsManager:
    """Resolves keys to command actions.

    User config replaces the default keys of each action it names; actions
    it leaves out keep their defaults. Lookups go through an index keyed by
    normalized key id, so ``"Ctrl+U"`` in a settings file matches the
    ``ctrl+u`` reported by the terminal.
    """

    def __init__(self, config: CommandKeybindingsConfig | None = None) -> None:
        self._bindings: dict[CommandAction, list[KeyId]] = {}
        self._index: dict[KeyId, set[CommandAction]] = {}
        self.set_config(config or {})

    def set_config(self, config: CommandKeybindingsConfig) -> None:
        merged = {**DEFAULT_COMMAND_KEYBINDINGS, **config}
        self._bindings = {action: _as_list(keys) for action, keys in merged.items()}
        self._index = {}
        for action, keys in self._bindings.items():
            for key in keys:
                self._index.setdefault(normalize_key_id(key), set()).add(action)

    def matches(self, key: KeyId, action: CommandAction) -> bool:
        """True when *key* is one of the keys bound to *action*."""
        return action in self._index.get(normalize_key_id(key), ())

    def get_keys(self, action: CommandAction) -> list[KeyId]:
        return list(self._bindings.get(action, []))

    def items(self) -> list[tuple[CommandAction, list[KeyId]]]:
        return [(action, list(keys)) for action, keys in self._bindings.items()]


_global_command_keybindings: CommandKeybindingsManager | None = None


def get_command_keybindings() -> CommandKeybindingsManager:
    global _global_command_keybindings
    if _global_command_keybindings is None:
        _global_command_keybindings = CommandKeybindingsManager()
    return _global_command_keybindings


def set_command_keybindings(manager: CommandKeybindingsManager) -> None:
    global _global_command_keybindings
    _global_command_keybindings = manager
