"""
classifier.py

Assigns a LineKind to every body line of a Fountain document.

Rules are evaluated in a fixed priority order and the first match wins.
Each decision may look at the kinds already assigned to earlier lines and at
the raw text of the following line, so lines must be classified in order.

Priority
--------
 1. blank                               -> EMPTY
 2. "#..."                              -> SECTION
 3. "=..." but not "==="                -> SYNOPSIS
 4. "===" (three or more '=')           -> PAGE_BREAK
 5. ">...<"                             -> CENTERED
 6. ".X" (X is not '.')                 -> HEADING (forced)
 7. INT./EXT./... prefix                -> HEADING
 8. "@..."                              -> CHARACTER (forced; dual if ends with '^')
 9. ">..." without closing '<'          -> TRANSITION (forced)
10. all-caps ending in TO:/TO BLACK./TO WHITE.  -> TRANSITION
11. "~..."                              -> LYRICS
12. character cue heuristic             -> CHARACTER / DUAL_DIALOGUE_CHARACTER
13. "(...)" inside a dialogue block     -> PARENTHETICAL (dual inherited)
14. any line inside a dialogue block    -> DIALOGUE (dual inherited)
15. otherwise                           -> ACTION

The classifier is total: any string gets a kind, ACTION in the worst case.
"""
from __future__ import annotations

import re
from typing import List, Mapping, Optional, Sequence

from fountain_project.model.line_kind import (
    LineKind,
    is_dialogue_block,
    is_dual,
    is_title_page,
)

SCENE_HEADING_PREFIXES = (
    "INT.",
    "EXT.",
    "INT/EXT.",
    "EXT/INT.",
    "I/E.",
    "E/I.",
    "INT ",
    "EXT ",
    "INT/EXT ",
    "EXT/INT ",
)

TRANSITION_SUFFIXES = ("TO:", "TO BLACK.", "TO WHITE.")

PAGE_BREAK_RE = re.compile(r"^={3,}\s*$")


def is_all_caps(s: str) -> bool:
    """True unless some character with a case distinction is lowercase."""
    for ch in s:
        if ch.upper() != ch.lower() and ch != ch.upper():
            return False
    return True


def has_letters(s: str) -> bool:
    return any(ch.upper() != ch.lower() for ch in s)


def scene_heading_prefix(trimmed: str) -> Optional[str]:
    upper = trimmed.upper()
    for prefix in SCENE_HEADING_PREFIXES:
        if upper.startswith(prefix):
            return prefix
    return None


def _previous_non_empty(kinds: Sequence[LineKind], index: int) -> Optional[LineKind]:
    for j in range(index - 1, -1, -1):
        if kinds[j] != LineKind.EMPTY:
            return kinds[j]
    return None


def _cue_name_part(trimmed: str) -> str:
    s = trimmed
    if s.endswith("^"):
        s = s[:-1].strip()
    paren = s.find("(")
    if paren >= 0:
        s = s[:paren].strip()
    return s


def is_character_cue(texts: Sequence[str], kinds: Sequence[LineKind], index: int) -> bool:
    """
    Character cue heuristic.

    The line directly above (blank lines are NOT skipped) must be EMPTY or a
    title page field, the line directly below must have content, and the cue
    name, without '^' and extension, must be all-caps with at least one letter.
    """
    trimmed = texts[index].strip()
    if not trimmed:
        return False

    if index > 0:
        prev = kinds[index - 1]
        if prev != LineKind.EMPTY and not is_title_page(prev):
            return False

    if index + 1 >= len(texts) or not texts[index + 1].strip():
        return False

    name = _cue_name_part(trimmed)
    return bool(name) and has_letters(name) and is_all_caps(name)


def classify_line(texts: Sequence[str], kinds: Sequence[LineKind], index: int) -> LineKind:
    """
    Classify texts[index]. `kinds` must hold final kinds for every line
    before `index`; entries from `index` on are ignored.
    """
    trimmed = texts[index].strip()

    if not trimmed:
        return LineKind.EMPTY

    if trimmed.startswith("#"):
        return LineKind.SECTION

    if trimmed.startswith("=") and not trimmed.startswith("==="):
        return LineKind.SYNOPSIS

    if PAGE_BREAK_RE.match(trimmed):
        return LineKind.PAGE_BREAK

    if trimmed.startswith(">") and trimmed.endswith("<"):
        return LineKind.CENTERED

    if trimmed.startswith(".") and trimmed[1:2] != ".":
        return LineKind.HEADING

    if scene_heading_prefix(trimmed) is not None:
        return LineKind.HEADING

    if trimmed.startswith("@"):
        if trimmed.endswith("^"):
            return LineKind.DUAL_DIALOGUE_CHARACTER
        return LineKind.CHARACTER

    if trimmed.startswith(">"):
        return LineKind.TRANSITION

    upper = trimmed.upper()
    if upper.endswith(TRANSITION_SUFFIXES) and is_all_caps(trimmed):
        return LineKind.TRANSITION

    if trimmed.startswith("~"):
        return LineKind.LYRICS

    if is_character_cue(texts, kinds, index):
        if trimmed.endswith("^"):
            return LineKind.DUAL_DIALOGUE_CHARACTER
        return LineKind.CHARACTER

    prev = _previous_non_empty(kinds, index)
    if prev is not None and is_dialogue_block(prev):
        dual = is_dual(prev)
        if trimmed.startswith("(") and trimmed.endswith(")"):
            return LineKind.DUAL_DIALOGUE_PARENTHETICAL if dual else LineKind.PARENTHETICAL
        return LineKind.DUAL_DIALOGUE if dual else LineKind.DIALOGUE

    return LineKind.ACTION


def classify_lines(
    texts: Sequence[str],
    preassigned: Optional[Mapping[int, LineKind]] = None,
) -> List[LineKind]:
    """
    Classify every line in order. Indices present in `preassigned` (title
    page fields) keep their kind and are not re-evaluated.
    """
    preassigned = preassigned or {}
    kinds: List[LineKind] = [LineKind.EMPTY] * len(texts)
    for idx in range(len(texts)):
        if idx in preassigned:
            kinds[idx] = preassigned[idx]
        else:
            kinds[idx] = classify_line(texts, kinds, idx)
    return kinds
