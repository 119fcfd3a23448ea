"""
document_settings.py

Editor-session metadata stored as a JSON trailer at the end of a Fountain file:

    ...screenplay body...

    /* If you're seeing this, you can remove the following stuff - BEAT:
    {"Caret Position":42,"Page Size":"A4"}
    END_BEAT*/

Older files may use the short start marker "/* BEAT:". Both pair with the
same end marker.

Loading
-------
- The LAST occurrence of the primary start marker begins the trailer; the
  short marker is used only when the primary one is absent.
- No start marker: the whole text is body, settings are empty.
- Start marker but no end marker: the trailer is dropped as malformed,
  settings are empty.
- Malformed JSON, or JSON that is not an object: a warning is printed and
  settings are empty. The body is still everything before the marker.

Saving
------
An empty settings map produces no trailer. Otherwise the map is encoded as
compact JSON in insertion order, wrapped in the primary start marker and the
end marker, and separated from the body by a blank line.

Unknown keys are kept as-is so files written by other tools round-trip.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

SETTINGS_BLOCK_START = "/* If you're seeing this, you can remove the following stuff - BEAT:"
ALT_SETTINGS_BLOCK_START = "/* BEAT:"
SETTINGS_BLOCK_END = "END_BEAT*/"

BODY_SEPARATOR = "\n\n"

KEY_CARET_POSITION = "Caret Position"
KEY_PAGE_SIZE = "Page Size"
KEY_CHARACTER_GENDERS = "CharacterGenders"
KEY_CHARACTER_DATA = "CharacterData"
KEY_REVISIONS = "Revision"
KEY_SCENE_NUMBER_START = "Scene Numbering Starts From"
KEY_PRINT_SCENE_NUMBERS = "Print scene numbers"
KEY_HEADER = "Header"
KEY_HEADER_ALIGNMENT = "Header Alignment"
KEY_STYLESHEET = "Stylesheet"
KEY_WINDOW_WIDTH = "Window Width"
KEY_WINDOW_HEIGHT = "Window Height"
KEY_LOCKED = "Locked"
KEY_SIDEBAR_VISIBLE = "Sidebar Visible"
KEY_SIDEBAR_WIDTH = "Sidebar Width"


class DocumentSettings:
    """
    String-keyed map of JSON values (None, bool, int, float, str, list, dict).

    The parser never touches it; hosts read and write it during a session.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentSettings):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"DocumentSettings({self._values!r})"

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def has(self, key: str) -> bool:
        return key in self._values

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def update(self, values: Dict[str, Any]) -> None:
        self._values.update(values)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        if isinstance(value, str):
            return value.lower() == "true" or value == "1"
        return default

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._values.get(key)
        if isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                return default
        return default

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)

    def get_string(self, key: str, default: str = "") -> str:
        value = self._values.get(key)
        if isinstance(value, str):
            return value
        if value is not None:
            return str(value)
        return default

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = value

    @property
    def caret_position(self) -> int:
        return self.get_int(KEY_CARET_POSITION)

    @caret_position.setter
    def caret_position(self, value: int) -> None:
        self.set_int(KEY_CARET_POSITION, value)

    @property
    def page_size(self) -> str:
        return self.get_string(KEY_PAGE_SIZE, default="A4")

    @page_size.setter
    def page_size(self, value: str) -> None:
        self.set_string(KEY_PAGE_SIZE, value)

    @property
    def print_scene_numbers(self) -> bool:
        return self.get_bool(KEY_PRINT_SCENE_NUMBERS, default=True)

    @print_scene_numbers.setter
    def print_scene_numbers(self, value: bool) -> None:
        self.set_bool(KEY_PRINT_SCENE_NUMBERS, value)

    @property
    def locked(self) -> bool:
        return self.get_bool(KEY_LOCKED)

    @locked.setter
    def locked(self, value: bool) -> None:
        self.set_bool(KEY_LOCKED, value)

    def to_settings_string(self) -> str:
        """Wrapped trailer block, or "" when there is nothing to store."""
        if not self._values:
            return ""
        payload = json.dumps(self._values, ensure_ascii=False, separators=(",", ":"))
        return f"{SETTINGS_BLOCK_START}\n{payload}\n{SETTINGS_BLOCK_END}"


@dataclass
class SettingsSplit:
    """
    settings: decoded settings (empty when absent or malformed)
    body: text strictly before the start marker (all text if there is none)
    marker_start: index of the start marker, or None when no marker was found
    """
    settings: DocumentSettings
    body: str
    marker_start: Optional[int] = None

    @property
    def content_range(self) -> Tuple[int, int]:
        return 0, len(self.body)


def _find_start_marker(content: str) -> Tuple[int, str]:
    # the short marker is only a fallback: stored values may contain it
    primary = content.rfind(SETTINGS_BLOCK_START)
    if primary != -1:
        return primary, SETTINGS_BLOCK_START
    return content.rfind(ALT_SETTINGS_BLOCK_START), ALT_SETTINGS_BLOCK_START


def parse_settings(content: str) -> SettingsSplit:
    settings = DocumentSettings()

    start, marker = _find_start_marker(content)
    if start == -1:
        return SettingsSplit(settings=settings, body=content)

    body = content[:start]
    end = content.find(SETTINGS_BLOCK_END, start + len(marker))
    if end == -1:
        return SettingsSplit(settings=settings, body=body, marker_start=start)

    raw_json = content[start + len(marker):end].strip()
    try:
        parsed = json.loads(raw_json)
    except json.JSONDecodeError as exc:
        print(f"[warn] failed to parse document settings: {exc}", flush=True)
        parsed = None
    else:
        if not isinstance(parsed, dict):
            print(f"[warn] document settings are not a JSON object: {type(parsed).__name__}", flush=True)
            parsed = None

    if parsed:
        settings.update(parsed)
    return SettingsSplit(settings=settings, body=body, marker_start=start)


def compose_document(body: str, settings: DocumentSettings) -> str:
    """Body followed by the settings trailer, if there is one."""
    trailer = settings.to_settings_string()
    if not trailer:
        return body
    return f"{body}{BODY_SEPARATOR}{trailer}"


def decompose_document(content: str) -> Tuple[str, DocumentSettings]:
    """
    Inverse of compose_document(): the body with the separator written before
    the trailer removed, and the decoded settings.
    """
    split = parse_settings(content)
    body = split.body
    if split.marker_start is not None and body.endswith(BODY_SEPARATOR):
        body = body[: -len(BODY_SEPARATOR)]
    return body, split.settings
