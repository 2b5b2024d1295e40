"""Presentation Builder: lays extracted slide records onto a PPTX deck.

Runs after the whole extraction pass: every record becomes one blank
slide, composed by the layout strategy its slide type selects.
"""

import logging
from pathlib import Path
from typing import Optional

from pptx import Presentation

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import DeckRecord, SlideRecord
from deck_export.pptx_engine.composers import get_composer
from deck_export.pptx_engine.slide_operations import (
    add_blank_slide,
    create_presentation,
    save_presentation,
    set_core_properties,
)

logger = logging.getLogger(__name__)


class PresentationBuilder:
    """Build a .pptx from a DeckRecord.

    A slide whose layout fails part-way is kept with whatever was drawn
    and the failure is logged; the rest of the deck still builds.
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def build_presentation(self, deck: DeckRecord) -> Presentation:
        theme = self.config.theme
        prs = create_presentation(theme.slide_width, theme.slide_height)
        set_core_properties(prs, self.config.metadata, fallback_title=deck.title)

        failed = 0
        for record in deck.slides:
            if not self._build_slide(prs, record):
                failed += 1

        if failed:
            logger.warning(f"{failed} of {len(deck.slides)} slides were only partly built")
        return prs

    def build(self, deck: DeckRecord, output_path: str | Path) -> Path:
        prs = self.build_presentation(deck)
        output_path = save_presentation(prs, output_path)
        counts = ", ".join(f"{n} {kind}" for kind, n in sorted(deck.count_by_type().items()))
        logger.info(f"Built {len(deck.slides)} slides ({counts or 'none'})")
        return output_path

    # ------------------------------------------------------------------

    def _build_slide(self, prs: Presentation, record: SlideRecord) -> bool:
        slide = add_blank_slide(prs)
        composer = get_composer(record.slide_type)
        logger.debug(
            f"Slide {record.slide_number}: {record.slide_type.value} via "
            f"{type(composer).__name__}"
        )
        try:
            composer.compose(slide, record, self.config)
        except Exception as e:
            logger.warning(f"Slide {record.slide_number} ({record.title!r}): layout failed: {e}")
            return False
        return True


def build_presentation(
    deck: DeckRecord,
    output_path: str | Path,
    config: Optional[ExportConfig] = None,
) -> Path:
    """Build and save a PPTX for deck; returns the output path."""
    return PresentationBuilder(config).build(deck, output_path)
