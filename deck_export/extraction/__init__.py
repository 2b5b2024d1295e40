"""Slide content extraction from parsed HTML decks."""

from .text import clean_text, first_non_empty
from .fields import (
    extract_content_lines,
    extract_highlights,
    extract_images,
    extract_metrics,
    extract_sections,
    extract_subtitle,
    extract_table_rows,
    extract_tables,
    extract_title,
)
from .slide import classify_slide, extract_slide
from .deck import extract_deck, extract_deck_from_file

__all__ = [
    "clean_text",
    "first_non_empty",
    "extract_title",
    "extract_subtitle",
    "extract_content_lines",
    "extract_metrics",
    "extract_tables",
    "extract_table_rows",
    "extract_sections",
    "extract_highlights",
    "extract_images",
    "classify_slide",
    "extract_slide",
    "extract_deck",
    "extract_deck_from_file",
]
