"""Metrics slide composer: first section's items left, metrics panel right."""

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import SlideRecord
from deck_export.pptx_engine.composers.base import BaseComposer


class MetricsComposer(BaseComposer):
    """Compose a slide led by key metrics."""

    def compose_body(self, slide, record: SlideRecord, config: ExportConfig, top: float) -> None:
        left, _ = self.content_span(slide, config)

        if record.sections:
            self.add_items(
                slide,
                record.sections[0].items[: config.limits.metrics_slide_items],
                config,
                left=left,
                top=top,
                width=self.width_beside_panel(slide, config),
                height=4.5,
            )

        self.add_metrics_panel(slide, record.metrics, config, top)
