"""
title_page.py

Recognizes the key/value title page block at the very start of a document.

    Title: My Screenplay
    Author: John Doe
    Contact:
        123 Some Street
        Somewhere

Rules
-----
- The first line must be a key line, otherwise the whole document is body.
- A key line opens a new field; an indented line (space or tab) continues
  the open field.
- A blank line is absorbed only if the next non-blank line is another key
  line or an indented continuation; otherwise it ends the title page.
- Any other line ends the title page and is left for the body classifier.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from fountain_project.model.line_kind import LineKind

TITLE_PAGE_KEYS = (
    "title",
    "author",
    "authors",
    "credit",
    "source",
    "contact",
    "draft date",
    "date",
    "notes",
    "copyright",
)

_KIND_BY_KEY: Dict[str, LineKind] = {
    "title": LineKind.TITLE_PAGE_TITLE,
    "author": LineKind.TITLE_PAGE_AUTHOR,
    "authors": LineKind.TITLE_PAGE_AUTHOR,
    "credit": LineKind.TITLE_PAGE_CREDIT,
    "source": LineKind.TITLE_PAGE_SOURCE,
    "contact": LineKind.TITLE_PAGE_CONTACT,
    "draft date": LineKind.TITLE_PAGE_DRAFT_DATE,
    "date": LineKind.TITLE_PAGE_DRAFT_DATE,
}


@dataclass
class TitlePageScan:
    """
    kinds: line index -> title page kind, for key and continuation lines only
    fields: lowercase key -> ordered line indices composing that field
    body_start: index of the first line left to the body classifier
    """
    kinds: Dict[int, LineKind] = field(default_factory=dict)
    fields: Dict[str, List[int]] = field(default_factory=dict)
    body_start: int = 0


def title_page_key(line: str) -> Optional[str]:
    """Return the lowercase key if `line` is a title page key line, else None."""
    if line.startswith((" ", "\t")):
        return None
    trimmed = line.strip()
    colon = trimmed.find(":")
    if colon <= 0:
        return None
    key = trimmed[:colon].strip().lower()
    return key if key in TITLE_PAGE_KEYS else None


def is_title_page_key(line: str) -> bool:
    return title_page_key(line) is not None


def kind_for_key(key: str) -> LineKind:
    return _KIND_BY_KEY.get(key, LineKind.TITLE_PAGE_UNKNOWN)


def _is_continuation(line: str) -> bool:
    return line.startswith((" ", "\t")) and bool(line.strip())


def scan_title_page(texts: Sequence[str]) -> TitlePageScan:
    scan = TitlePageScan()
    if not texts or not is_title_page_key(texts[0]):
        return scan

    current_key: Optional[str] = None
    i = 0
    while i < len(texts):
        line = texts[i]

        if not line.strip():
            nxt = i + 1
            while nxt < len(texts) and not texts[nxt].strip():
                nxt += 1
            if nxt >= len(texts):
                break
            if not is_title_page_key(texts[nxt]) and not _is_continuation(texts[nxt]):
                break
            i += 1
            continue

        key = title_page_key(line)
        if key is not None:
            current_key = key
            scan.kinds[i] = kind_for_key(key)
            scan.fields[key] = [i]
        elif current_key is not None and _is_continuation(line):
            scan.kinds[i] = kind_for_key(current_key)
            scan.fields[current_key].append(i)
        else:
            break
        i += 1

    scan.body_start = i
    return scan
