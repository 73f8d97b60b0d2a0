"""Lenient reading of values from a simple JSON object."""

from __future__ import annotations

import json
from typing import Any, Union


class JsonReader:
    """Parses a JSON text and reads typed values with fall-back defaults.

    Any value that is missing or of the wrong type yields the given default.
    """

    def __init__(self) -> None:
        self._data: Any = None

    def load_text(self, text: Union[str, bytes, bytearray]) -> bool:
        """Parse ``text`` (bytes are read as UTF-8); returns whether it succeeded."""
        try:
            if isinstance(text, (bytes, bytearray)):
                text = bytes(text).decode("utf-8")
            self._data = json.loads(text)
        except (ValueError, UnicodeDecodeError):
            self._data = None
            return False
        return True

    def _lookup(self, name: str) -> Any:
        if isinstance(self._data, dict) and name in self._data:
            return self._data[name]
        raise KeyError(name)

    def _number(self, name: str) -> Union[int, float, bool]:
        value = self._lookup(name)
        if not isinstance(value, (int, float)):
            raise TypeError(name)
        return value

    def get_int(self, name: str, default: int) -> int:
        """The value of ``name`` as an integer (fractions are truncated)."""
        try:
            return int(self._number(name))
        except (KeyError, TypeError, OverflowError, ValueError):
            return default

    def get_bool(self, name: str, default: bool) -> bool:
        """The boolean value of ``name``."""
        try:
            value = self._lookup(name)
        except KeyError:
            return default
        return value if isinstance(value, bool) else default

    def get_float(self, name: str, default: float) -> float:
        """The value of ``name`` as a float."""
        try:
            return float(self._number(name))
        except (KeyError, TypeError):
            return default

    def get_string(self, name: str, default: str) -> str:
        """The string value of ``name``."""
        try:
            value = self._lookup(name)
        except KeyError:
            return default
        return value if isinstance(value, str) else default