"""Presentation and slide creation using python-pptx."""

import logging
from pathlib import Path

from pptx import Presentation
from pptx.util import Inches

from deck_export.schemas.export_config import DeckMetadata

logger = logging.getLogger(__name__)

# Index of the "Blank" layout in python-pptx's default template
BLANK_LAYOUT_INDEX = 6


def create_presentation(
    width_inches: float = 13.333,
    height_inches: float = 7.5,
) -> Presentation:
    """Create a new blank presentation (16:9 widescreen by default)."""
    prs = Presentation()
    prs.slide_width = Inches(width_inches)
    prs.slide_height = Inches(height_inches)
    return prs


def add_blank_slide(prs: Presentation) -> object:
    """Add a slide with no placeholders."""
    layouts = prs.slide_layouts
    idx = BLANK_LAYOUT_INDEX if BLANK_LAYOUT_INDEX < len(layouts) else len(layouts) - 1
    return prs.slides.add_slide(layouts[idx])


def set_core_properties(prs: Presentation, metadata: DeckMetadata, fallback_title: str = "") -> None:
    """Write title, author, subject and keywords into the package properties."""
    props = prs.core_properties
    title = metadata.title or fallback_title
    if title:
        props.title = title
    if metadata.author:
        props.author = metadata.author
    if metadata.subject:
        props.subject = metadata.subject
    if metadata.keywords:
        props.keywords = metadata.keywords


def save_presentation(prs: Presentation, output_path: str | Path) -> Path:
    """Save to disk, creating the parent directory if needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    prs.save(str(output_path))
    logger.info(f"Saved: {output_path} ({len(prs.slides)} slides)")
    return output_path
