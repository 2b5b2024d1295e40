"""Per-field extractors for a single slide container.

Each function takes a slide subtree and returns one field of the slide
record. None of them raise on sparse or malformed markup: a field that
cannot be found comes back empty.
"""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from bs4 import Tag

from deck_export.extraction.text import (
    clean_text,
    element_text,
    first_non_empty,
    first_non_empty_text,
    first_text,
    starts_with_any,
)
from deck_export.schemas.export_config import ExtractionRules, ExtractionSelectors
from deck_export.schemas.slide_record import ImageRef, MetricRecord, SectionRecord, TableData

logger = logging.getLogger(__name__)

DEFAULT_SELECTORS = ExtractionSelectors()
DEFAULT_RULES = ExtractionRules()

_REMOTE_SCHEMES = ("http", "https", "ftp")


# ---------------------------------------------------------------------------
# Title / subtitle
# ---------------------------------------------------------------------------

def extract_title(
    slide: Tag,
    index: int,
    selectors: ExtractionSelectors = DEFAULT_SELECTORS,
) -> str:
    """Resolve the slide title.

    Order: classed heading in the header container, first h2, first h1,
    classed title element, then "Slide {index + 1}".
    """
    return first_non_empty(
        lambda: first_text(slide, f"{selectors.header} {selectors.header_heading}"),
        lambda: first_text(slide, "h2"),
        lambda: first_text(slide, "h1"),
        lambda: first_text(slide, selectors.title_class),
        default=f"Slide {index + 1}",
    )


def extract_subtitle(
    slide: Tag,
    selectors: ExtractionSelectors = DEFAULT_SELECTORS,
) -> Optional[str]:
    """First non-empty subtitle, preferring one inside the header container."""
    subtitle = first_non_empty(
        lambda: first_non_empty_text(slide, f"{selectors.header} {selectors.subtitle}"),
        lambda: first_non_empty_text(slide, selectors.subtitle),
        default="",
    )
    return subtitle or None


# ---------------------------------------------------------------------------
# Content lines
# ---------------------------------------------------------------------------

def _list_lines(items: list[Tag], prefix: str, skip_preformatted: bool = False) -> list[str]:
    lines = []
    for li in items:
        raw = li.get_text()
        if skip_preformatted and "•" in raw:
            continue
        text = clean_text(raw)
        if text:
            lines.append(f"{prefix}{text}")
    return lines


def _paragraph_lines(scope: Tag, markers: list[str]) -> list[str]:
    lines = []
    for p in scope.find_all("p"):
        text = element_text(p)
        if text and not starts_with_any(text, markers):
            lines.append(text)
    return lines


def extract_content_lines(
    slide: Tag,
    selectors: ExtractionSelectors = DEFAULT_SELECTORS,
    rules: ExtractionRules = DEFAULT_RULES,
) -> list[str]:
    """Body lines in document order, using the first tier that yields any.

    1. Items of domain-classed lists, bullet-prefixed.
    2. Items of any list, skipping text that already carries a bullet.
    3. Paragraphs, skipping annotation notes, unprefixed.
    """
    prefix = rules.bullet_prefix
    return first_non_empty(
        lambda: _list_lines(slide.select(f"{selectors.domain_list} li"), prefix),
        lambda: _list_lines(slide.find_all("li"), prefix, skip_preformatted=True),
        lambda: _paragraph_lines(slide, rules.annotation_markers),
        default=[],
    )


# ---------------------------------------------------------------------------
# Metrics / highlights
# ---------------------------------------------------------------------------

def extract_metrics(
    slide: Tag,
    selectors: ExtractionSelectors = DEFAULT_SELECTORS,
) -> list[MetricRecord]:
    """Value/label pairs; a metric missing either half is dropped."""
    metrics = []
    for metric in slide.select(selectors.metric):
        value = first_text(metric, selectors.metric_value)
        label = first_text(metric, selectors.metric_label)
        if value and label:
            metrics.append(MetricRecord(value=value, label=label))
    return metrics


def extract_highlights(
    slide: Tag,
    selectors: ExtractionSelectors = DEFAULT_SELECTORS,
) -> list[str]:
    highlights = []
    for element in slide.select(selectors.highlight):
        text = element_text(element)
        if text:
            highlights.append(text)
    return highlights


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def extract_table_rows(table: Tag) -> list[list[str]]:
    """Rows of cleaned cell text, header row first.

    The header row is the first row inside <thead> when present, otherwise
    the table's first row. Rows of nested tables are not included, and rows
    without cells are skipped. Cell counts are kept as found.
    """
    rows = [tr for tr in table.find_all("tr") if tr.find_parent("table") is table]
    if not rows:
        return []

    header = None
    thead = table.find("thead")
    if thead is not None and thead.find_parent("table") is table:
        header = thead.find("tr")
    if header is None:
        header = rows[0]

    ordered = [header] + [tr for tr in rows if tr is not header]
    result = []
    for tr in ordered:
        cells = [element_text(cell) for cell in tr.find_all(["th", "td"], recursive=False)]
        if cells:
            result.append(cells)
    return result


def _table_caption(
    slide: Tag,
    selectors: ExtractionSelectors,
    keywords: list[str],
) -> str:
    for heading in slide.select(selectors.table_caption):
        text = element_text(heading)
        lowered = text.lower()
        if any(keyword.lower() in lowered for keyword in keywords if keyword):
            return text
    return ""


def extract_tables(
    slide: Tag,
    selectors: ExtractionSelectors = DEFAULT_SELECTORS,
    rules: ExtractionRules = DEFAULT_RULES,
) -> list[TableData]:
    """Every table with at least one extracted row."""
    tables = []
    caption = None
    for table in slide.find_all("table"):
        rows = extract_table_rows(table)
        if not rows:
            continue
        if caption is None:
            caption = _table_caption(slide, selectors, rules.table_caption_keywords)
        tables.append(TableData(rows=rows, title=caption))
    return tables


# ---------------------------------------------------------------------------
# Card / grid sections
# ---------------------------------------------------------------------------

def _section_items(container: Tag, markers: list[str]) -> list[str]:
    items = [text for text in (element_text(li) for li in container.find_all("li")) if text]
    if not items:
        items = _paragraph_lines(container, markers)
    return items


def extract_sections(
    slide: Tag,
    selectors: ExtractionSelectors = DEFAULT_SELECTORS,
    rules: ExtractionRules = DEFAULT_RULES,
) -> list[SectionRecord]:
    """Titled clusters of items from cards and grid items.

    Grid items that are themselves cards are only counted once. When the
    slide has no card or grid content, its list items form one untitled
    section.
    """
    markers = rules.annotation_markers
    sections = []

    cards = slide.select(selectors.card)
    for card in cards:
        title = first_text(card, selectors.card_heading)
        items = _section_items(card, markers)
        if title or items:
            sections.append(SectionRecord(title=title, items=items, kind="card"))

    card_ids = {id(card) for card in cards}
    for item in slide.select(selectors.grid_item):
        if id(item) in card_ids:
            continue
        title = first_text(item, selectors.grid_heading)
        items = _section_items(item, markers)
        if title or items:
            sections.append(SectionRecord(title=title, items=items, kind="grid"))

    if not sections:
        items = [text for text in (element_text(li) for li in slide.find_all("li")) if text]
        if items:
            sections.append(SectionRecord(title="", items=items, kind="list"))

    return sections


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------

def _is_local_reference(src: str) -> bool:
    if src.startswith("data:") or src.startswith("//"):
        return False
    parsed = urlparse(src)
    return parsed.scheme.lower() not in _REMOTE_SCHEMES


def extract_images(
    slide: Tag,
    base_dir: Path,
    rules: ExtractionRules = DEFAULT_RULES,
) -> list[ImageRef]:
    """Local images that exist on disk, resolved against base_dir.

    Inline data URIs and remote URLs are skipped. Root-relative sources
    ("/img/a.png") resolve under base_dir as well. A file missing at check
    time is left out; there is no retry.
    """
    images = []
    for img in slide.find_all("img"):
        src = (img.get("src") or "").strip()
        if not src or not _is_local_reference(src):
            continue

        relative = unquote(src.split("#", 1)[0].split("?", 1)[0]).lstrip("/")
        if not relative:
            continue
        try:
            resolved = (Path(base_dir) / relative).resolve()
            found = resolved.exists()
        except (OSError, ValueError) as e:
            logger.debug(f"Unusable image path, skipping: {src!r} ({e})")
            continue
        if not found:
            logger.debug(f"Image not found, skipping: {resolved}")
            continue

        alt = clean_text(img.get("alt")) or rules.default_alt_text
        images.append(ImageRef(path=str(resolved), alt_text=alt))
    return images
