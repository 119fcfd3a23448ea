from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Segment:
    index: int
    text: str
    offset: int


def segment_text(text: str) -> List[Segment]:
    """
    Split document text into positioned segments on single '\\n'.

    '\\r\\n' is not special-cased: callers normalize line endings first.
    Empty input yields exactly one empty segment at offset 0.
    """
    segments: List[Segment] = []
    offset = 0
    for idx, raw in enumerate(text.split("\n")):
        segments.append(Segment(index=idx, text=raw, offset=offset))
        offset += len(raw) + 1  # newline
    return segments
