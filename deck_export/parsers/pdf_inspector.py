"""Page-count check for rendered PDF decks using pdfplumber."""

from pathlib import Path


def count_pdf_pages(path: str | Path) -> int:
    """Return the number of pages in a PDF file."""
    import pdfplumber

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"PDF file not found: {path}")

    with pdfplumber.open(str(path)) as pdf:
        return len(pdf.pages)


def compare_page_count(pages: int, expected: int) -> str:
    """Describe how a PDF page count relates to the expected slide count.

    Returns one of 'match', 'missing' (fewer pages than slides) or
    'overflow' (a slide broke across pages).
    """
    if pages == expected:
        return "match"
    if pages < expected:
        return "missing"
    return "overflow"
