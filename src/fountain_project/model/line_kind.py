"""
line_kind.py

The closed set of element kinds a Fountain line can be classified as.

Groups such as "any character cue" or "title page field" are plain functions
over the enum value, not stored state. The two export-only kinds (MORE and
DUAL_MORE) exist for completeness; the live parser never assigns them.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict


class LineKind(Enum):
    EMPTY = "empty"
    SECTION = "section"
    SYNOPSIS = "synopsis"
    TITLE_PAGE_TITLE = "title_page_title"
    TITLE_PAGE_AUTHOR = "title_page_author"
    TITLE_PAGE_CREDIT = "title_page_credit"
    TITLE_PAGE_SOURCE = "title_page_source"
    TITLE_PAGE_CONTACT = "title_page_contact"
    TITLE_PAGE_DRAFT_DATE = "title_page_draft_date"
    TITLE_PAGE_UNKNOWN = "title_page_unknown"
    HEADING = "heading"
    ACTION = "action"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    DIALOGUE = "dialogue"
    DUAL_DIALOGUE_CHARACTER = "dual_dialogue_character"
    DUAL_DIALOGUE_PARENTHETICAL = "dual_dialogue_parenthetical"
    DUAL_DIALOGUE = "dual_dialogue"
    TRANSITION = "transition"
    LYRICS = "lyrics"
    PAGE_BREAK = "page_break"
    CENTERED = "centered"
    SHOT = "shot"
    MORE = "more"  # export only
    DUAL_MORE = "dual_more"  # export only

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


TITLE_PAGE_KINDS = frozenset({
    LineKind.TITLE_PAGE_TITLE,
    LineKind.TITLE_PAGE_AUTHOR,
    LineKind.TITLE_PAGE_CREDIT,
    LineKind.TITLE_PAGE_SOURCE,
    LineKind.TITLE_PAGE_CONTACT,
    LineKind.TITLE_PAGE_DRAFT_DATE,
    LineKind.TITLE_PAGE_UNKNOWN,
})

DUAL_KINDS = frozenset({
    LineKind.DUAL_DIALOGUE_CHARACTER,
    LineKind.DUAL_DIALOGUE_PARENTHETICAL,
    LineKind.DUAL_DIALOGUE,
})

DISPLAY_NAMES: Dict[LineKind, str] = {
    LineKind.EMPTY: "Empty",
    LineKind.SECTION: "Section",
    LineKind.SYNOPSIS: "Synopsis",
    LineKind.TITLE_PAGE_TITLE: "Title",
    LineKind.TITLE_PAGE_AUTHOR: "Author",
    LineKind.TITLE_PAGE_CREDIT: "Credit",
    LineKind.TITLE_PAGE_SOURCE: "Source",
    LineKind.TITLE_PAGE_CONTACT: "Contact",
    LineKind.TITLE_PAGE_DRAFT_DATE: "Draft Date",
    LineKind.TITLE_PAGE_UNKNOWN: "Title Page",
    LineKind.HEADING: "Scene Heading",
    LineKind.ACTION: "Action",
    LineKind.CHARACTER: "Character",
    LineKind.PARENTHETICAL: "Parenthetical",
    LineKind.DIALOGUE: "Dialogue",
    LineKind.DUAL_DIALOGUE_CHARACTER: "Character (Dual)",
    LineKind.DUAL_DIALOGUE_PARENTHETICAL: "Parenthetical (Dual)",
    LineKind.DUAL_DIALOGUE: "Dialogue (Dual)",
    LineKind.TRANSITION: "Transition",
    LineKind.LYRICS: "Lyrics",
    LineKind.PAGE_BREAK: "Page Break",
    LineKind.CENTERED: "Centered",
    LineKind.SHOT: "Shot",
    LineKind.MORE: "More",
    LineKind.DUAL_MORE: "More (Dual)",
}


def is_character(kind: LineKind) -> bool:
    return kind in (LineKind.CHARACTER, LineKind.DUAL_DIALOGUE_CHARACTER)


def is_dialogue(kind: LineKind) -> bool:
    return kind in (LineKind.DIALOGUE, LineKind.DUAL_DIALOGUE)


def is_parenthetical(kind: LineKind) -> bool:
    return kind in (LineKind.PARENTHETICAL, LineKind.DUAL_DIALOGUE_PARENTHETICAL)


def is_dialogue_block(kind: LineKind) -> bool:
    """True for any kind that dialogue or a parenthetical can follow."""
    return is_character(kind) or is_dialogue(kind) or is_parenthetical(kind)


def is_dual(kind: LineKind) -> bool:
    return kind in DUAL_KINDS


def is_title_page(kind: LineKind) -> bool:
    return kind in TITLE_PAGE_KINDS


def is_outline(kind: LineKind) -> bool:
    return kind in (LineKind.HEADING, LineKind.SECTION, LineKind.SYNOPSIS)


def is_non_printing(kind: LineKind) -> bool:
    return kind in (LineKind.SECTION, LineKind.SYNOPSIS, LineKind.EMPTY)


def is_export_only(kind: LineKind) -> bool:
    return kind in (LineKind.MORE, LineKind.DUAL_MORE)
