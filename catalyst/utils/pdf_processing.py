"""
PDF inspection helpers for exported resumes.

Helper functions:
    page_count: Quick page count without full extraction.
    extract_page_lines: Text lines per page, top-to-bottom.
    find_line: Locate a line of text (normalized exact match) in a PDF.
    normalize_for_matching: Text normalization for fuzzy matching.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except (OSError, PdfReadError):
        return None


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def extract_page_lines(pdf_path: Path, y_tolerance: float = 3.0) -> Dict[int, List[str]]:
    """
    Extract text lines from every page of a PDF.

    Args:
        pdf_path: Path to PDF file
        y_tolerance: Max vertical distance (points) for words on the same line

    Returns:
        Dict mapping page number (1-indexed) to its text lines, top-to-bottom.

    Raises:
        FileNotFoundError: If the PDF does not exist
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    pages: Dict[int, List[str]] = {}
    with pdfplumber.open(pdf_path) as pdf:
        for page_num, page in enumerate(pdf.pages, start=1):
            text = page.extract_text(y_tolerance=y_tolerance) or ""
            pages[page_num] = [line for line in text.splitlines() if line.strip()]
    return pages


def find_line(text: str, pages: Dict[int, List[str]]) -> Optional[Tuple[int, int]]:
    """
    Find first line whose normalized text equals the normalized query.

    Exact matching prevents "Projects" matching "Side Projects".

    Returns:
        (page, line_index) of first match, or None.
    """
    target = normalize_for_matching(text)
    for page_num in sorted(pages):
        for line_idx, line in enumerate(pages[page_num]):
            if normalize_for_matching(line) == target:
                return page_num, line_idx
    return None
