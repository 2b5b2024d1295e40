"""Slide composer registry.

Maps SlideType values to their composer. Use get_composer() to look up
the layout strategy for an extracted slide.
"""

import logging

from deck_export.schemas.slide_record import SlideType

from .base import BaseComposer
from .standard import StandardComposer
from .table import TableComposer
from .metrics import MetricsComposer
from .multi_section import MultiSectionComposer
from .detailed_list import DetailedListComposer

logger = logging.getLogger(__name__)

# Composers hold no state, so one instance each is shared.
_standard = StandardComposer()

COMPOSERS: dict[SlideType, BaseComposer] = {
    SlideType.TABLE: TableComposer(),
    SlideType.METRICS: MetricsComposer(),
    SlideType.MULTI_SECTION: MultiSectionComposer(),
    SlideType.DETAILED_LIST: DetailedListComposer(),
    SlideType.STANDARD: _standard,
}


def get_composer(slide_type: SlideType) -> BaseComposer:
    """Look up the composer for a slide type, falling back to StandardComposer."""
    composer = COMPOSERS.get(slide_type)
    if composer is None:
        logger.debug(f"No composer for {slide_type}, using StandardComposer")
        return _standard
    return composer


__all__ = [
    "BaseComposer",
    "StandardComposer",
    "TableComposer",
    "MetricsComposer",
    "MultiSectionComposer",
    "DetailedListComposer",
    "get_composer",
    "COMPOSERS",
]
