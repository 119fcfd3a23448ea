"""
formatting.py

Finds inline emphasis spans in a single line of text.

    **bold**   *italic*   _underline_   [[note]]   /* omitted */

Each category is scanned left to right independently. A recorded range
covers the delimiters themselves. Scanning resumes right after a matched
close, so ranges within one category never overlap. An open delimiter without
a close ends the scan for that category. Kind assignment is not affected.
"""
from __future__ import annotations

from typing import List

from fountain_project.model.line import Formatting, Range


def find_paired_ranges(text: str, open_mark: str, close_mark: str) -> List[Range]:
    ranges: List[Range] = []
    pos = 0
    while pos < len(text):
        start = text.find(open_mark, pos)
        if start == -1:
            break
        close = text.find(close_mark, start + len(open_mark))
        if close == -1:
            break
        end = close + len(close_mark)
        ranges.append(Range(start, end))
        pos = end
    return ranges


def _touches_star(text: str, idx: int) -> bool:
    return (idx + 1 < len(text) and text[idx + 1] == "*") or (idx > 0 and text[idx - 1] == "*")


def find_italic_ranges(text: str) -> List[Range]:
    """
    Single-asterisk spans. Any '*' adjacent to another '*' belongs to a bold
    delimiter and is never used as an italic open or close.
    """
    ranges: List[Range] = []
    pos = 0
    while pos < len(text):
        start = text.find("*", pos)
        if start == -1:
            break
        if start + 1 < len(text) and text[start + 1] == "*":
            pos = start + 2
            continue
        if start > 0 and text[start - 1] == "*":
            pos = start + 1
            continue

        close = text.find("*", start + 1)
        if close == -1:
            break
        if _touches_star(text, close):
            # the open is dropped; scanning resumes past the rejected close
            pos = close + 1
            continue

        ranges.append(Range(start, close + 1))
        pos = close + 1
    return ranges


def extract_formatting(text: str) -> Formatting:
    if not text:
        return Formatting()
    return Formatting(
        bold=tuple(find_paired_ranges(text, "**", "**")),
        italic=tuple(find_italic_ranges(text)),
        underline=tuple(find_paired_ranges(text, "_", "_")),
        note=tuple(find_paired_ranges(text, "[[", "]]")),
        omitted=tuple(find_paired_ranges(text, "/*", "*/")),
    )
