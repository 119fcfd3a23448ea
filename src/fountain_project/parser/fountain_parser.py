"""
fountain_parser.py

Parser façade for Fountain screenplay text.

Pipeline
--------
    text
      -> segment_text()          positioned segments, one per '\\n'-separated line
      -> scan_title_page()       key/value header block, if the document opens with one
      -> classify_lines()        one LineKind per line, fixed rule precedence
      -> extract_formatting()    inline ranges, per line, independent of neighbours
      -> Line records

parse_screenplay() is a pure function: text in, new ParseResult out.
FountainParser keeps the latest result for readers and swaps it in one
assignment, so a reader sees either the previous or the next complete parse.

There is no incremental path. Every edit reparses the whole document; hosts
that need interactive speed should debounce calls instead.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from fountain_project.model.line import Line
from fountain_project.model.line_kind import LineKind, is_character
from fountain_project.parser.classifier import classify_lines
from fountain_project.parser.formatting import extract_formatting
from fountain_project.parser.segmenter import segment_text
from fountain_project.parser.title_page import scan_title_page


@dataclass(frozen=True)
class ParseResult:
    lines: Tuple[Line, ...] = ()
    title_page: Dict[str, List[Line]] = field(default_factory=dict)


def parse_screenplay(text: str) -> ParseResult:
    segments = segment_text(text)
    texts = [seg.text for seg in segments]

    scan = scan_title_page(texts)
    kinds = classify_lines(texts, scan.kinds)

    lines = tuple(
        Line(
            text=seg.text,
            kind=kind,
            offset=seg.offset,
            formatting=extract_formatting(seg.text),
        )
        for seg, kind in zip(segments, kinds)
    )

    title_page = {key: [lines[i] for i in indices] for key, indices in scan.fields.items()}
    return ParseResult(lines=lines, title_page=title_page)


class FountainParser:
    """Holds the most recent parse of one document and answers queries about it."""

    def __init__(self, text: str = "") -> None:
        self._result = parse_screenplay(text)

    def parse_text(self, text: str) -> None:
        self._result = parse_screenplay(text)

    def parse_change_in_range(self, start: int, length: int, replacement: str) -> None:
        """Apply an edit to the current text and reparse everything."""
        text = self.raw_text
        self.parse_text(text[:start] + replacement + text[start + length:])

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._result.lines

    @property
    def title_page(self) -> Dict[str, List[Line]]:
        return self._result.title_page

    @property
    def raw_text(self) -> str:
        return "\n".join(line.text for line in self._result.lines)

    @property
    def screenplay_for_saving(self) -> str:
        return self.raw_text

    @property
    def scene_headings(self) -> List[Line]:
        return [line for line in self.lines if line.kind == LineKind.HEADING]

    @property
    def character_cues(self) -> List[Line]:
        return [line for line in self.lines if is_character(line.kind)]

    @property
    def character_names(self) -> Set[str]:
        return {line.character_name for line in self.character_cues if line.character_name}

    def character_frequencies(self) -> Counter:
        """Number of cues per normalized character name."""
        counts: Counter = Counter()
        for line in self.character_cues:
            name = line.character_name
            if name:
                counts[name] += 1
        return counts
