"""Loader for HTML slide decks using BeautifulSoup with the lxml parser."""

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from deck_export.errors import SourceUnparsable, SourceUnreadable

logger = logging.getLogger(__name__)

HTML_PARSER = "lxml"


def read_html_text(path: str | Path) -> str:
    """Read an HTML file as UTF-8 text.

    Raises:
        SourceUnreadable: The file is missing, is a directory, or cannot be read.
        SourceUnparsable: The bytes are not UTF-8 text.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceUnreadable(path, e.strerror or str(e)) from e

    if b"\x00" in data:
        raise SourceUnparsable(path, "binary content")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SourceUnparsable(path, f"not UTF-8 text at byte {e.start}") from e


def parse_html(html: str, source: str | Path = "<string>") -> BeautifulSoup:
    """Parse HTML text into a queryable document tree."""
    try:
        return BeautifulSoup(html, HTML_PARSER)
    except ParserRejectedMarkup as e:
        raise SourceUnparsable(source, str(e)) from e


def load_html_document(path: str | Path) -> BeautifulSoup:
    """Read and parse an HTML deck.

    Both failure kinds are raised before any extraction so that an
    unreadable source is never mistaken for an empty deck.
    """
    path = Path(path)
    html = read_html_text(path)
    document = parse_html(html, path)
    logger.debug(f"Parsed {path} ({len(html)} chars)")
    return document
