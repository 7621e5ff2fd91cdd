"""Hierarchical JSON settings.

Project settings (``<cwd>/.termintent/settings.json``) override global
settings (``~/.termintent/settings.json``); nested objects are merged.
"""

from __future__ import annotations

import json
import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from termintent.keybindings import CommandKeybindingsManager
from termintent.sequence import DEFAULT_COMMAND_SEPARATOR

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".termintent"


# --- Deep merge ---


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Layer *overrides* on top of *base* without mutating either.

    Two objects under the same key are merged key by key, so a project file
    can rebind ``keybindings.quit`` and still inherit the global
    ``keybindings.refresh``. Any other value, lists included, replaces the
    base value outright. A JSON ``null`` leaves the base value in place.
    """
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        current = merged.get(key)
        both_objects = isinstance(current, dict) and isinstance(value, dict)
        merged[key] = deep_merge_settings(current, value) if both_objects else value
    return merged


class Settings:
    """Merged view of global and project settings.

    Use factory methods (load, in_memory) instead of calling the
    constructor directly.
    """

    def __init__(
        self,
        settings: dict[str, Any],
        *,
        load_error: Exception | None = None,
    ) -> None:
        self._settings = settings
        self._load_error = load_error

    # --- Factory methods ---

    @classmethod
    def load(cls, cwd: str | None = None, config_dir: str | None = None) -> Settings:
        """Load global then project settings from disk."""
        global_path = os.path.join(config_dir or _default_config_dir(), "settings.json")
        project_path = os.path.join(cwd or os.getcwd(), CONFIG_DIR_NAME, "settings.json")

        global_settings, global_error = _load_from_file(global_path)
        project_settings, project_error = _load_from_file(project_path)
        return cls(
            deep_merge_settings(global_settings, project_settings),
            load_error=global_error or project_error,
        )

    @classmethod
    def in_memory(cls, settings: dict[str, Any] | None = None) -> Settings:
        """Create settings without touching the filesystem, for testing."""
        return cls(dict(settings or {}))

    # --- Core operations ---

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Apply command-line overrides on top of merged settings."""
        self._settings = deep_merge_settings(self._settings, overrides)

    @property
    def settings(self) -> dict[str, Any]:
        """A copy of the merged settings."""
        return deepcopy(self._settings)

    @property
    def load_error(self) -> Exception | None:
        return self._load_error

    # --- Getters ---

    def get_keybindings(self) -> dict[str, Any]:
        value = self._settings.get("keybindings")
        return dict(value) if isinstance(value, dict) else {}

    def get_command_separator(self) -> str:
        return self._settings.get("commandSeparator") or DEFAULT_COMMAND_SEPARATOR

    def create_keybindings_manager(self) -> CommandKeybindingsManager:
        return CommandKeybindingsManager(self.get_keybindings())  # type: ignore[arg-type]


def _load_from_file(path: str) -> tuple[dict[str, Any], Exception | None]:
    """Load settings from a JSON file. Returns (settings, error)."""
    if not os.path.exists(path):
        return {}, None
    try:
        content = Path(path).read_text(encoding="utf-8")
        settings = json.loads(content)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}, e
    if not isinstance(settings, dict):
        error = ValueError(f"settings file {path} must contain a JSON object")
        logger.warning("%s", error)
        return {}, error
    return settings, None


def _default_config_dir() -> str:
    """Default configuration directory (~/.termintent)."""
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
