"""Detailed list slide composer: one long section split over two columns."""

import math

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import SlideRecord
from deck_export.pptx_engine.composers.base import COLUMN_GAP, BaseComposer


def split_columns(items: list[str]) -> tuple[list[str], list[str]]:
    """Split items in two, the left column taking the larger half."""
    mid = math.ceil(len(items) / 2)
    return items[:mid], items[mid:]


class DetailedListComposer(BaseComposer):
    """Compose a two-column list slide."""

    def compose_body(self, slide, record: SlideRecord, config: ExportConfig, top: float) -> None:
        if not record.sections:
            return
        _, h = self.get_dims(slide)
        left, width = self.content_span(slide, config)
        col_width = (width - COLUMN_GAP) / 2
        height = max(0.5, h - 0.9 - top)

        left_items, right_items = split_columns(record.sections[0].items)
        self.add_items(slide, left_items, config, left=left, top=top, width=col_width, height=height)
        self.add_items(
            slide,
            right_items,
            config,
            left=left + col_width + COLUMN_GAP,
            top=top,
            width=col_width,
            height=height,
        )
