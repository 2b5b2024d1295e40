"""Build a SlideRecord from one slide container and classify its layout."""

from pathlib import Path
from typing import Optional

from bs4 import Tag

from deck_export.extraction.fields import (
    extract_content_lines,
    extract_highlights,
    extract_images,
    extract_metrics,
    extract_sections,
    extract_subtitle,
    extract_tables,
    extract_title,
)
from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import (
    MetricRecord,
    SectionRecord,
    SlideRecord,
    SlideType,
    TableData,
)

METRICS_THRESHOLD = 3
SECTIONS_THRESHOLD = 3
DETAILED_LIST_THRESHOLD = 8


def classify_slide(
    tables: list[TableData],
    metrics: list[MetricRecord],
    sections: list[SectionRecord],
) -> SlideType:
    """Pick the layout strategy for a slide.

    Checks run in a fixed order and the first match wins; reordering them
    changes the result for slides that satisfy more than one.
    """
    if tables:
        return SlideType.TABLE
    if len(metrics) > METRICS_THRESHOLD:
        return SlideType.METRICS
    if len(sections) > SECTIONS_THRESHOLD:
        return SlideType.MULTI_SECTION
    if len(sections) == 1 and len(sections[0].items) > DETAILED_LIST_THRESHOLD:
        return SlideType.DETAILED_LIST
    return SlideType.STANDARD


def resolve_base_dir(config: ExportConfig, base_dir: Optional[str | Path] = None) -> Path:
    """Directory that relative image paths resolve against."""
    if base_dir is not None:
        return Path(base_dir)
    if config.extraction.image_base_dir:
        return Path(config.extraction.image_base_dir)
    return Path.cwd()


def extract_slide(
    element: Tag,
    slide_index: int,
    config: Optional[ExportConfig] = None,
    base_dir: Optional[str | Path] = None,
) -> SlideRecord:
    """Extract the structured content of one slide container.

    The input tree is only read, never modified.
    """
    config = config or ExportConfig()
    selectors = config.selectors
    rules = config.extraction

    tables = extract_tables(element, selectors, rules)
    metrics = extract_metrics(element, selectors)
    sections = extract_sections(element, selectors, rules)

    return SlideRecord(
        index=slide_index,
        title=extract_title(element, slide_index, selectors),
        subtitle=extract_subtitle(element, selectors),
        content_lines=extract_content_lines(element, selectors, rules),
        metrics=metrics,
        tables=tables,
        sections=sections,
        highlights=extract_highlights(element, selectors),
        images=extract_images(element, resolve_base_dir(config, base_dir), rules),
        slide_type=classify_slide(tables, metrics, sections),
    )
