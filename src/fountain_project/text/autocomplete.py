"""
autocomplete.py

Suggestion lists for an editor's completion popup, computed from the
parser's current lines. Rendering the popup is the host's business.

- Character names: cue names starting with the typed prefix, most frequent first.
- Scene headings: standard INT./EXT. prefixes matching the input, then, once
  the input carries a prefix, locations already used in earlier headings.
- Time of day: a fixed list.
"""
from __future__ import annotations

from typing import Dict, List

from fountain_project.parser.classifier import SCENE_HEADING_PREFIXES
from fountain_project.parser.fountain_parser import FountainParser

STANDARD_SCENE_PREFIXES = (
    "INT. ",
    "EXT. ",
    "INT./EXT. ",
    "EXT./INT. ",
    "I/E. ",
)

# Prefixes that switch location suggestions on.
_TYPED_PREFIXES = ("INT.", "EXT.", "INT./EXT.", "EXT./INT.", "I/E.", "E/I.")

# Longest first, so "INT./EXT. " wins over "INT. ".
_TYPED_PREFIXES_WITH_SPACE = ("INT./EXT. ", "EXT./INT. ", "I/E. ", "E/I. ", "INT. ", "EXT. ")

TIME_OF_DAY_SUGGESTIONS = (
    "DAY",
    "NIGHT",
    "MORNING",
    "EVENING",
    "AFTERNOON",
    "DAWN",
    "DUSK",
    "LATER",
    "CONTINUOUS",
    "MOMENTS LATER",
)


class AutocompleteProvider:
    def __init__(self, parser: FountainParser) -> None:
        self.parser = parser

    def character_suggestions(self, prefix: str = "") -> List[str]:
        """
        Known character names starting with `prefix` (case-insensitive),
        ordered by descending cue count. Equal counts fall back to name order.
        """
        counts = self.parser.character_frequencies()
        wanted = prefix.upper()
        names = [name for name in counts if name.upper().startswith(wanted)]
        names.sort(key=lambda n: (-counts[n], n))
        return names

    def scene_heading_suggestions(self, typed: str) -> List[str]:
        upper = typed.upper()
        suggestions = [p for p in STANDARD_SCENE_PREFIXES if p.startswith(upper)]

        if upper.startswith(_TYPED_PREFIXES):
            prefix_end = _prefix_end(upper)
            head = upper[:prefix_end]
            location_part = upper[prefix_end:].strip()
            for location in self.used_locations():
                if location.upper().startswith(location_part):
                    suggestions.append(f"{head}{location}")
        return suggestions

    def time_of_day_suggestions(self) -> List[str]:
        return list(TIME_OF_DAY_SUGGESTIONS)

    def used_locations(self) -> List[str]:
        """Distinct heading locations in document order, without prefix or ' - TIME'."""
        seen: Dict[str, None] = {}
        for heading in self.parser.scene_headings:
            location = heading_location(heading.text)
            if location:
                seen.setdefault(location, None)
        return list(seen)


def _prefix_end(upper: str) -> int:
    for prefix in _TYPED_PREFIXES_WITH_SPACE:
        if upper.startswith(prefix):
            return len(prefix)
    return 0


def heading_location(text: str) -> str:
    text = text.strip()
    upper = text.upper()
    start = 0
    for prefix in SCENE_HEADING_PREFIXES:
        if upper.startswith(prefix):
            start = len(prefix)
            break
    location = text[start:].strip()
    dash = location.rfind(" - ")
    if dash > 0:
        location = location[:dash].strip()
    return location
