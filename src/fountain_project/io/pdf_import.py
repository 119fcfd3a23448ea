"""
pdf_import.py

Pulls plain screenplay text out of a PDF so it can be handed to the parser.

Page text is extracted with pdfplumber, line endings are normalized to '\\n'
and pages are joined with a blank line between them. Nothing Fountain-specific
happens here: classification is left entirely to the parser, which is why a
printed script without blank lines around cues may parse as mostly action.
"""
from __future__ import annotations

from typing import Any, Callable, List

import pdfplumber


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def extract_pdf_text(
    pdf_path: str,
    *,
    pdf_open: Callable[..., Any] = pdfplumber.open,
) -> str:
    """
    Return the text of every page in `pdf_path`, pages separated by a blank line.

    Pages with no extractable text contribute an empty string.
    """
    pages: List[str] = []
    with pdf_open(pdf_path) as pdf:
        for p in pdf.pages:
            pages.append(normalize_newlines(p.extract_text() or "").rstrip("\n"))
    return "\n\n".join(pages)
