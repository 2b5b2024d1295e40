"""Multi-section slide composer.

Lays the first few card/grid sections out as side-by-side columns, each
drawn as a bordered panel with its heading and a truncated item list.
"""

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import SlideRecord
from deck_export.pptx_engine.composers.base import COLUMN_GAP, BaseComposer
from deck_export.pptx_engine.shape_operations import add_rectangle

PANEL_PADDING = 0.15


class MultiSectionComposer(BaseComposer):
    """Compose a slide of section columns."""

    def compose_body(self, slide, record: SlideRecord, config: ExportConfig, top: float) -> None:
        _, h = self.get_dims(slide)
        left, width = self.content_span(slide, config)
        theme = config.theme
        if record.metrics:
            width = self.width_beside_panel(slide, config)

        sections = record.sections[: config.limits.multi_section_columns]
        if sections:
            col_width = width / len(sections)
            panel_height = max(0.5, h - 0.9 - top)
            for i, section in enumerate(sections):
                x = left + i * col_width
                add_rectangle(
                    slide,
                    x,
                    top,
                    col_width - COLUMN_GAP,
                    panel_height,
                    fill_color=theme.colors.white,
                    border_color=theme.colors.border,
                    corner_radius=0.1 if section.kind == "card" else None,
                )

                inner_x = x + PANEL_PADDING
                inner_width = col_width - COLUMN_GAP - 2 * PANEL_PADDING
                y = top + PANEL_PADDING
                if section.title:
                    y = self.add_heading(slide, section.title, config, inner_x, y, inner_width)
                self.add_items(
                    slide,
                    section.items[: config.limits.multi_section_items],
                    config,
                    left=inner_x,
                    top=y,
                    width=inner_width,
                    height=max(0.5, top + panel_height - PANEL_PADDING - y),
                )

        if record.metrics:
            self.add_metrics_panel(slide, record.metrics, config, top)
