"""
Turns a PDF into the tokenized form the parsers work on: pages of trimmed,
non-empty lines.
"""
from __future__ import annotations

import logging
from pathlib import Path

import pdfplumber

logger = logging.getLogger(__name__)


def split_lines(text: str | None) -> list[str]:
    """Trims every line and drops the empty ones."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_document(path: Path) -> list[list[str]]:
    """
    Reads every page of a PDF.

    Args:
        path: PDF file.

    Returns:
        list[list[str]]: one list of lines per page, in page order.
    """
    pages = []
    with pdfplumber.open(path) as pdf:
        for i, page in enumerate(pdf.pages):
            lines = split_lines(page.extract_text())
            logger.debug(f"{path.name} page {i + 1}: {len(lines)} lines")
            pages.append(lines)
    return pages


__all__ = ["split_lines", "read_document"]
