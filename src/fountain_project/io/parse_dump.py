from __future__ import annotations

import json
import os
from dataclasses import fields
from typing import Any, Dict, List

from fountain_project.io.document import ScreenplayDocument
from fountain_project.model.line import Line


def _line_record(idx: int, line: Line) -> Dict[str, Any]:
    formatting = {
        f.name: [[r.start, r.end] for r in getattr(line.formatting, f.name)]
        for f in fields(line.formatting)
        if getattr(line.formatting, f.name)
    }
    return {
        "index": idx,
        "kind": line.kind.value,
        "offset": line.offset,
        "text": line.text,
        "formatting": formatting,
    }


def build_parse_dump(doc: ScreenplayDocument) -> Dict[str, Any]:
    """JSON-ready view of a parsed document for offline inspection."""
    lines: List[Dict[str, Any]] = [_line_record(i, ln) for i, ln in enumerate(doc.lines)]
    return {
        "meta": {
            "name": doc.name,
            "file_path": doc.file_path,
            "line_count": len(lines),
            "page_count": doc.page_count,
            "word_count": doc.word_count,
        },
        "title_page": {
            key: [ln.text for ln in entry] for key, entry in doc.title_page.items()
        },
        "scene_headings": [ln.text.strip() for ln in doc.scene_headings],
        "character_names": sorted(doc.character_names),
        "settings": doc.settings.to_dict(),
        "lines": lines,
    }


def write_parse_dump(path: str, obj: Dict[str, Any]) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
    os.replace(tmp, path)
