"""
document.py

Host-side wrapper around one open screenplay: file access, the settings
trailer, and the parser that holds the current line list.

The parser core never touches the filesystem. This module is where a file
is read, where '\\r\\n' line endings are normalized before parsing, and where
I/O failures become DocumentNotFoundError or DocumentIOError for the host.
"""
from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set

import pdfplumber

from fountain_project.io.document_settings import (
    DocumentSettings,
    compose_document,
    decompose_document,
)
from fountain_project.io.pdf_import import extract_pdf_text, normalize_newlines
from fountain_project.model.line import Line
from fountain_project.model.line_kind import is_non_printing
from fountain_project.parser.fountain_parser import FountainParser

LINES_PER_PAGE = 55

TEMPLATE = """Title: Untitled Screenplay
Author:

===

FADE IN:

"""


class DocumentError(Exception):
    pass


class DocumentNotFoundError(DocumentError):
    pass


class DocumentIOError(DocumentError):
    pass


def _write_text_atomic(path: str, text: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    tmp = path + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp, path)
    except OSError:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


class ScreenplayDocument:
    def __init__(self, text: str = "", settings: Optional[DocumentSettings] = None) -> None:
        self.parser = FountainParser(text)
        self.settings = settings if settings is not None else DocumentSettings()
        self.file_path: Optional[str] = None
        self.name = "Untitled"
        self.is_dirty = False

    @classmethod
    def with_template(cls) -> "ScreenplayDocument":
        return cls(TEMPLATE)

    @classmethod
    def from_file(cls, path: str) -> "ScreenplayDocument":
        doc = cls()
        doc.load_from_file(path)
        return doc

    @classmethod
    def import_pdf(
        cls,
        pdf_path: str,
        *,
        pdf_open: Callable[..., Any] = pdfplumber.open,
    ) -> "ScreenplayDocument":
        """New, unsaved document whose body is the text of a screenplay PDF."""
        if not os.path.exists(pdf_path):
            raise DocumentNotFoundError(f"File not found: {pdf_path}")
        try:
            text = extract_pdf_text(pdf_path, pdf_open=pdf_open)
        except OSError as exc:
            raise DocumentIOError(f"Could not read PDF {pdf_path}: {exc}") from exc
        doc = cls(text)
        doc.name = Path(pdf_path).stem
        doc.is_dirty = True
        return doc

    def load_from_file(self, path: str) -> None:
        if not os.path.exists(path):
            raise DocumentNotFoundError(f"File not found: {path}")
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentIOError(f"Could not read {path}: {exc}") from exc

        body, settings = decompose_document(normalize_newlines(content))
        self.settings = settings
        self.parser.parse_text(body)
        self.file_path = path
        self.name = Path(path).stem
        self.is_dirty = False

    def save(self) -> None:
        if self.file_path is None:
            raise DocumentError("No file path set. Use save_as() instead.")
        self._save_to_path(self.file_path)

    def save_as(self, path: str) -> None:
        self._save_to_path(path)
        self.file_path = path
        self.name = Path(path).stem

    def _save_to_path(self, path: str) -> None:
        content = compose_document(self.parser.screenplay_for_saving, self.settings)
        try:
            _write_text_atomic(path, content)
        except OSError as exc:
            raise DocumentIOError(f"Could not write {path}: {exc}") from exc
        self.is_dirty = False

    def update_text(self, text: str) -> None:
        """Replace the whole body (full reparse) and mark the document dirty."""
        self.parser.parse_text(text)
        self.is_dirty = True

    @property
    def lines(self) -> List[Line]:
        return list(self.parser.lines)

    @property
    def raw_text(self) -> str:
        return self.parser.raw_text

    @property
    def title_page(self) -> Dict[str, List[Line]]:
        return self.parser.title_page

    @property
    def character_names(self) -> Set[str]:
        return self.parser.character_names

    @property
    def scene_headings(self) -> List[Line]:
        return self.parser.scene_headings

    @property
    def word_count(self) -> int:
        return sum(len(line.text.split()) for line in self.parser.lines if not is_non_printing(line.kind))

    @property
    def page_count(self) -> int:
        """Rough estimate: printable lines / LINES_PER_PAGE, at least 1."""
        printable = sum(
            1 for line in self.parser.lines
            if not is_non_printing(line.kind)
        )
        return min(max(math.ceil(printable / LINES_PER_PAGE), 1), 999)
