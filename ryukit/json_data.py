"""An editable JSON object whose members can be reached by name or by position."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

Key = Union[int, str]


class JsonData:
    """A JSON object document that keeps its members in insertion order.

    Members can be read by position (out-of-range positions give an empty
    result) or by name (a missing name raises ``KeyError``).
    """

    def __init__(self, text: Optional[str] = None) -> None:
        self._members: dict[str, Any] = {}
        if text is not None:
            self.parse(text)

    def parse(self, text: str) -> None:
        """Replace the document with the JSON object in ``text``."""
        value = json.loads(text)
        if not isinstance(value, dict):
            raise ValueError("JSON document must be an object")
        self._members = value

    def load_from_file(self, filename: Union[str, Path]) -> None:
        """Load the document from a file; text without braces loads as an empty object."""
        text = Path(filename).read_text(encoding="utf-8")
        if "{" not in text or "}" not in text:
            text = "{}"
        self.parse(text)

    def save_to_file(self, filename: Union[str, Path]) -> None:
        """Write the compact JSON text of the document to a file."""
        Path(filename).write_text(self.get_text(), encoding="utf-8")

    def get_text(self) -> str:
        """The document as compact JSON text."""
        return json.dumps(self._members, ensure_ascii=False, separators=(",", ":"))

    def __len__(self) -> int:
        return len(self._members)

    def name_at(self, index: int) -> str:
        """The name of the member at ``index``, or ``""`` if there is none."""
        names = list(self._members)
        if 0 <= index < len(names):
            return names[index]
        return ""

    def _value_at(self, index: int) -> Any:
        values = list(self._members.values())
        if 0 <= index < len(values):
            return values[index]
        return None

    def _name_for(self, key: Key) -> str:
        if isinstance(key, str):
            return key
        names = list(self._members)
        if not 0 <= key < len(names):
            raise IndexError(f"member index out of range: {key}")
        return names[key]

    def get_string(self, key: Key) -> str:
        """A string member by position or name."""
        if isinstance(key, int) and not isinstance(key, bool):
            value = self._value_at(key)
            if value is None:
                return ""
        else:
            value = self._members[key]
        if not isinstance(value, str):
            raise TypeError(f"member {key!r} is not a string")
        return value

    def get_int(self, key: Key) -> int:
        """An integer member by position or name."""
        if isinstance(key, int) and not isinstance(key, bool):
            value = self._value_at(key)
            if value is None:
                return 0
        else:
            value = self._members[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"member {key!r} is not an integer")
        return value

    def set_string(self, key: Key, value: str) -> None:
        """Set a member to a string; a new name is added at the end."""
        self._members[self._name_for(key)] = str(value)

    def set_int(self, key: Key, value: int) -> None:
        """Set a member to an integer; a new name is added at the end."""
        self._members[self._name_for(key)] = int(value)