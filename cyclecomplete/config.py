"""Configuration management — JSON-based, stored in ~/.config/cyclecomplete/."""
import json
import logging
from pathlib import Path

from cyclecomplete.tokenizer import DEFAULT_WORD_SEPARATORS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "word_separators": DEFAULT_WORD_SEPARATORS,
    "hotkey_next": "Ctrl+/",
    "hotkey_previous": "Ctrl+Shift+/",
    "reset_on_cursor_move": True,
    "debug_logging": False,
}

CONFIG_DIR = Path.home() / ".config" / "cyclecomplete"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    """Completion settings. Unknown keys in the file are kept but unused."""

    def __init__(self):
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if not CONFIG_FILE.exists():
            return
        try:
            with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, e)
            return
        if not isinstance(stored, dict):
            logger.warning("Ignoring config %s: expected an object", CONFIG_FILE)
            return
        self._data.update(stored)

    def update(self, values: dict):
        """Apply several settings and write the file once."""
        unknown = set(values) - set(DEFAULT_CONFIG)
        if unknown:
            raise KeyError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        self._data.update(values)
        self.save()

    def save(self):
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    @property
    def word_separators(self) -> str:
        return str(self._data.get("word_separators", DEFAULT_WORD_SEPARATORS))

    @property
    def hotkey_next(self) -> str:
        return self._data.get("hotkey_next", DEFAULT_CONFIG["hotkey_next"])

    @property
    def hotkey_previous(self) -> str:
        return self._data.get("hotkey_previous", DEFAULT_CONFIG["hotkey_previous"])

    @property
    def reset_on_cursor_move(self) -> bool:
        return bool(self._data.get("reset_on_cursor_move", True))

    @property
    def debug_logging(self) -> bool:
        return bool(self._data.get("debug_logging", False))
