from .html_loader import load_html_document, parse_html, read_html_text
from .pdf_inspector import compare_page_count, count_pdf_pages

__all__ = [
    "load_html_document",
    "parse_html",
    "read_html_text",
    "count_pdf_pages",
    "compare_page_count",
]
