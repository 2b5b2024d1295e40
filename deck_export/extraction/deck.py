"""Whole-deck extraction: one SlideRecord per slide container, in document order."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup

from deck_export.extraction.slide import extract_slide, resolve_base_dir
from deck_export.extraction.text import element_text
from deck_export.parsers.html_loader import load_html_document
from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import DeckRecord, SlideRecord

logger = logging.getLogger(__name__)


def extract_deck(
    document: BeautifulSoup,
    config: Optional[ExportConfig] = None,
    base_dir: Optional[str | Path] = None,
) -> list[SlideRecord]:
    """Extract every slide container of a parsed document.

    With more than one worker configured, slides are extracted on a thread
    pool; results still come back in document order.
    """
    config = config or ExportConfig()
    base = resolve_base_dir(config, base_dir)
    containers = document.select(config.selectors.slide)
    workers = min(config.extraction.workers, max(1, len(containers)))

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            slides = list(pool.map(
                lambda pair: extract_slide(pair[1], pair[0], config, base),
                enumerate(containers),
            ))
    else:
        slides = [
            extract_slide(container, index, config, base)
            for index, container in enumerate(containers)
        ]

    for slide in slides:
        logger.info(f'Slide {slide.slide_number}: "{slide.title}" ({slide.slide_type.value})')
        if slide.subtitle:
            logger.debug(f"  subtitle: {slide.subtitle}")

    if not slides:
        logger.warning(f"No slide containers matched selector '{config.selectors.slide}'")
    return slides


def extract_deck_from_file(
    path: str | Path,
    config: Optional[ExportConfig] = None,
) -> DeckRecord:
    """Load an HTML deck and extract all of its slides.

    Relative image paths resolve against the configured base directory, or
    the HTML file's own directory when none is configured.

    Raises:
        SourceUnreadable, SourceUnparsable: before any extraction begins.
    """
    config = config or ExportConfig()
    path = Path(path)
    document = load_html_document(path)

    base_dir = config.extraction.image_base_dir or path.resolve().parent
    slides = extract_deck(document, config, base_dir)

    deck = DeckRecord(
        source=str(path),
        title=element_text(document.find("title")),
        slides=slides,
    )
    logger.info(f"Extracted {len(slides)} slides from {path.name}")
    return deck
