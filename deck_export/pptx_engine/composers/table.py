"""Table slide composer.

Places the slide's tables as native PowerPoint tables, stacked top to
bottom while they still fit on the slide.
"""

import logging

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import SlideRecord
from deck_export.pptx_engine.composers.base import BaseComposer
from deck_export.pptx_engine.table_operations import add_table

logger = logging.getLogger(__name__)

ROW_HEIGHT = 0.4
TABLE_GAP = 0.3


class TableComposer(BaseComposer):
    """Compose a table slide."""

    def compose_body(self, slide, record: SlideRecord, config: ExportConfig, top: float) -> None:
        _, h = self.get_dims(slide)
        left, width = self.content_span(slide, config)
        theme = config.theme
        bottom = h - 0.8
        y = top

        for i, table in enumerate(record.tables):
            needed = ROW_HEIGHT * len(table.rows)
            # The first table is always placed; later ones only if they fit.
            if i > 0 and y + needed > bottom:
                logger.info(
                    f"Slide {record.slide_number}: {len(record.tables) - i} "
                    f"table(s) left off (no room)"
                )
                break

            if i == 0 and table.title:
                y = self.add_heading(slide, table.title, config, left, y, width)

            add_table(
                slide,
                table.rows,
                left=left,
                top=y,
                width=width,
                row_height=ROW_HEIGHT,
                font_name=theme.fonts.face,
                font_size=theme.fonts.table_size,
                font_color=theme.colors.text,
                fill_color=theme.colors.white,
                header_fill=theme.colors.light,
            )
            y += needed + TABLE_GAP
