"""Base composer providing the shared slide frame and reusable blocks.

All layout composers inherit from BaseComposer and implement
compose_body() to lay out their slide type below the header.
"""

import logging
from abc import ABC, abstractmethod

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import MetricRecord, SlideRecord
from deck_export.pptx_engine.shape_operations import add_divider
from deck_export.pptx_engine.text_operations import (
    add_bullet_list,
    add_label,
    add_textbox,
)

logger = logging.getLogger(__name__)

TITLE_TOP = 0.3
TITLE_HEIGHT = 1.0
SUBTITLE_HEIGHT = 0.6
HEADING_HEIGHT = 0.5
DIVIDER_GAP = 0.2
METRICS_PANEL_WIDTH = 4.3
COLUMN_GAP = 0.3


class BaseComposer(ABC):
    """Abstract base for all slide composers.

    compose() draws the frame every slide shares (slide number, title,
    subtitle) and hands the remaining area to compose_body().
    """

    def compose(self, slide, record: SlideRecord, config: ExportConfig) -> None:
        """Build the full slide.

        Args:
            slide: A blank slide (already added to the presentation).
            record: The extracted slide content.
            config: Exporter configuration (theme and layout limits).
        """
        self.add_slide_number(slide, record, config)
        top = self.add_header(slide, record, config)
        self.compose_body(slide, record, config, top)

    @abstractmethod
    def compose_body(self, slide, record: SlideRecord, config: ExportConfig, top: float) -> None:
        """Lay out the slide-type specific content starting at top (inches)."""
        ...

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def add_slide_number(self, slide, record: SlideRecord, config: ExportConfig) -> None:
        w, h = self.get_dims(slide)
        theme = config.theme
        add_label(
            slide,
            str(record.slide_number),
            left=w - 0.83,
            top=h - 0.7,
            width=0.5,
            height=0.3,
            font_name=theme.fonts.face,
            font_size=theme.fonts.caption_size,
            font_color=theme.colors.secondary,
            alignment="right",
        )

    def add_header(self, slide, record: SlideRecord, config: ExportConfig) -> float:
        """Add title and subtitle; return the top of the free area below them."""
        theme = config.theme
        left, width = self.content_span(slide, config)
        top = TITLE_TOP

        if record.title:
            add_textbox(
                slide,
                record.title,
                left=left,
                top=top,
                width=width,
                height=TITLE_HEIGHT,
                font_name=theme.fonts.face,
                font_size=theme.fonts.title_size,
                font_color=theme.colors.primary,
                bold=True,
            )
            top += TITLE_HEIGHT + 0.1

        if record.subtitle:
            add_textbox(
                slide,
                record.subtitle,
                left=left,
                top=top,
                width=width,
                height=SUBTITLE_HEIGHT,
                font_name=theme.fonts.face,
                font_size=theme.fonts.subtitle_size,
                font_color=theme.colors.secondary,
            )
            top += SUBTITLE_HEIGHT + 0.1

        add_divider(slide, left, top, width, color=theme.colors.border)
        return top + DIVIDER_GAP

    # ------------------------------------------------------------------
    # Content blocks
    # ------------------------------------------------------------------

    def add_heading(self, slide, text: str, config: ExportConfig, left: float, top: float, width: float) -> float:
        """Add a section heading; return the top below it."""
        theme = config.theme
        add_textbox(
            slide,
            text,
            left=left,
            top=top,
            width=width,
            height=HEADING_HEIGHT,
            font_name=theme.fonts.face,
            font_size=theme.fonts.heading_size,
            font_color=theme.colors.primary,
            bold=True,
        )
        return top + HEADING_HEIGHT + 0.1

    def add_items(
        self,
        slide,
        items: list[str],
        config: ExportConfig,
        left: float,
        top: float,
        width: float,
        height: float,
    ) -> None:
        if not items:
            return
        theme = config.theme
        add_bullet_list(
            slide,
            items,
            left=left,
            top=top,
            width=width,
            height=height,
            font_name=theme.fonts.face,
            font_size=theme.fonts.body_size,
            font_color=theme.colors.text,
            bullet_color=theme.colors.accent,
        )

    def add_metrics_panel(
        self,
        slide,
        metrics: list[MetricRecord],
        config: ExportConfig,
        top: float,
        height: float = 4.0,
    ) -> None:
        """Shaded panel on the right listing the first metrics, value over label."""
        shown = metrics[: config.limits.metrics_panel_items]
        if not shown:
            return
        w, _ = self.get_dims(slide)
        theme = config.theme
        try:
            add_textbox(
                slide,
                "\n\n".join(m.combined for m in shown),
                left=w - config.theme.margin - METRICS_PANEL_WIDTH,
                top=top,
                width=METRICS_PANEL_WIDTH,
                height=height,
                font_name=theme.fonts.face,
                font_size=theme.fonts.metric_size,
                font_color=theme.colors.accent,
                bold=True,
                alignment="center",
                fill_color=theme.colors.light,
            )
        except Exception as e:
            logger.warning(f"Could not add metrics panel: {e}")

    def add_highlights(self, slide, highlights: list[str], config: ExportConfig) -> None:
        """Callout block along the bottom of the slide."""
        if not highlights:
            return
        w, h = self.get_dims(slide)
        left, width = self.content_span(slide, config)
        theme = config.theme
        add_textbox(
            slide,
            "\n\n".join(highlights),
            left=left,
            top=h - 2.0,
            width=width,
            height=1.0,
            font_name=theme.fonts.face,
            font_size=theme.fonts.highlight_size,
            font_color=theme.colors.accent,
            italic=True,
            fill_color=theme.colors.light,
        )

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @staticmethod
    def get_dims(slide) -> tuple[float, float]:
        """Return (width, height) in inches for the slide's presentation."""
        try:
            prs = slide.part.package.presentation_part.presentation
            return (prs.slide_width.inches, prs.slide_height.inches)
        except Exception:
            return (13.333, 7.5)

    def content_span(self, slide, config: ExportConfig) -> tuple[float, float]:
        """(left, width) of the content area between the side margins."""
        w, _ = self.get_dims(slide)
        margin = config.theme.margin
        return margin, w - 2 * margin

    def width_beside_panel(self, slide, config: ExportConfig) -> float:
        """Content width left of the metrics panel."""
        _, width = self.content_span(slide, config)
        return width - METRICS_PANEL_WIDTH - COLUMN_GAP
