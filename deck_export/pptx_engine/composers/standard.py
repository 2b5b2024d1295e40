"""Standard slide composer.

Builds the default layout: the first section (or the slide's content lines)
on the left, a metrics panel or the first image on the right, and
highlight callouts along the bottom.
"""

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import SlideRecord
from deck_export.pptx_engine.composers.base import BaseComposer
from deck_export.pptx_engine.image_operations import add_image_fitted
from deck_export.pptx_engine.text_operations import add_textbox


class StandardComposer(BaseComposer):
    """Compose a standard content slide."""

    def compose_body(self, slide, record: SlideRecord, config: ExportConfig, top: float) -> None:
        w, h = self.get_dims(slide)
        left, width = self.content_span(slide, config)
        theme = config.theme

        show_image = bool(record.images) and not record.metrics
        if record.metrics or show_image:
            width = self.width_beside_panel(slide, config)

        body_height = (h - 2.2 if record.highlights else h - 0.9) - top
        y = top

        if record.sections:
            section = record.sections[0]
            if section.title:
                y = self.add_heading(slide, section.title, config, left, y, width)
            self.add_items(
                slide,
                section.items[: config.limits.standard_items],
                config,
                left=left,
                top=y,
                width=width,
                height=max(0.5, body_height - (y - top)),
            )
        elif record.content_lines:
            add_textbox(
                slide,
                "\n".join(record.content_lines[: config.limits.standard_items]),
                left=left,
                top=y,
                width=width,
                height=max(0.5, body_height),
                font_name=theme.fonts.face,
                font_size=theme.fonts.body_size,
                font_color=theme.colors.text,
                paragraph_gap=theme.fonts.body_size * 0.4,
            )

        if record.metrics:
            self.add_metrics_panel(slide, record.metrics, config, top)
        elif show_image:
            image = record.images[0]
            panel_left = left + width + 0.3
            add_image_fitted(
                slide,
                image.path,
                left=panel_left,
                top=top,
                max_width=w - theme.margin - panel_left,
                max_height=max(0.5, body_height),
            )

        self.add_highlights(slide, record.highlights, config)
