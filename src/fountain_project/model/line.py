"""
line.py

Data model for one parsed screenplay line.

A Line is produced fresh by every parse pass and never mutated afterwards.
Its formatting is a separate immutable annotation (Formatting) holding one
tuple of Range objects per inline category. Collaborators that need to attach
a scene number, color or pre-edit snapshot do so with dataclasses.replace().
"""
from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from typing import Optional, Tuple

from fountain_project.model.line_kind import LineKind, is_character

_LONE_STAR_RE = re.compile(r"(?<!\*)\*(?!\*)")


def new_line_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Range:
    """Half-open interval [start, end) of character offsets within one line."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.length <= 0

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def overlaps(self, other: Range) -> bool:
        return self.start < other.end and self.end > other.start

    def intersection(self, other: Range) -> Optional[Range]:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start < end:
            return Range(start, end)
        return None


@dataclass(frozen=True)
class Formatting:
    """
    Inline formatting ranges for a single line.

    bold/italic/underline/note/omitted are filled by the formatting extractor.
    strikeout and escape are part of the record but have no Fountain markup
    that produces them, so they stay empty.
    """
    bold: Tuple[Range, ...] = ()
    italic: Tuple[Range, ...] = ()
    underline: Tuple[Range, ...] = ()
    note: Tuple[Range, ...] = ()
    omitted: Tuple[Range, ...] = ()
    strikeout: Tuple[Range, ...] = ()
    escape: Tuple[Range, ...] = ()


@dataclass(frozen=True, eq=False)
class Line:
    """
    text: raw line content, without the trailing newline
    kind: element kind assigned by the parser
    offset: character offset of the line's first character in the full document
    formatting: inline ranges, offsets local to this line
    line_id: opaque identity token, unique within the running process
    scene_number / color: optional heading metadata set by collaborators
    original_text: pre-edit snapshot kept for collaborators that diff lines
    """
    text: str
    kind: LineKind = LineKind.EMPTY
    offset: int = 0
    formatting: Formatting = field(default_factory=Formatting)
    line_id: str = field(default_factory=new_line_id)
    scene_number: Optional[str] = None
    color: Optional[str] = None
    original_text: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.line_id == other.line_id

    def __hash__(self) -> int:
        return hash(self.line_id)

    def __repr__(self) -> str:
        return f"Line(kind={self.kind.display_name!r}, text={self.text!r})"

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def text_range(self) -> Range:
        return Range(self.offset, self.offset + self.length)

    @property
    def bold_ranges(self) -> Tuple[Range, ...]:
        return self.formatting.bold

    @property
    def italic_ranges(self) -> Tuple[Range, ...]:
        return self.formatting.italic

    @property
    def underline_ranges(self) -> Tuple[Range, ...]:
        return self.formatting.underline

    @property
    def note_ranges(self) -> Tuple[Range, ...]:
        return self.formatting.note

    @property
    def omitted_ranges(self) -> Tuple[Range, ...]:
        return self.formatting.omitted

    @property
    def character_name(self) -> Optional[str]:
        """
        Normalized speaker name for character cues, None for any other kind.

        Strips the forced-character '@', the dual dialogue '^' and any
        extension such as (V.O.) or (CONT'D), then uppercases.
        """
        if not is_character(self.kind):
            return None
        return normalize_character_name(self.text)

    @property
    def stripped_text(self) -> str:
        """Text with bold, italic, underline and note markup removed."""
        s = self.text.replace("**", "")
        s = _LONE_STAR_RE.sub("", s)
        s = s.replace("_", "")
        return s.replace("[[", "").replace("]]", "")

    @property
    def section_depth(self) -> Optional[int]:
        if self.kind != LineKind.SECTION:
            return None
        s = self.text.strip()
        return len(s) - len(s.lstrip("#"))


def normalize_character_name(cue: str) -> str:
    name = cue.strip()
    if name.startswith("@"):
        name = name[1:]
    if name.endswith("^"):
        name = name[:-1].strip()
    paren = name.find("(")
    if paren > 0:
        name = name[:paren].strip()
    return name.upper()
