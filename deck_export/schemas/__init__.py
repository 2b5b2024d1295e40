from .slide_record import (
    SlideType, MetricRecord, TableData, SectionRecord, ImageRef,
    SlideRecord, DeckRecord,
)
from .export_config import (
    ExtractionSelectors, ExtractionRules, LayoutLimits,
    ThemeColors, ThemeFonts, ThemeConfig, DeckMetadata, ExportConfig,
)

__all__ = [
    "SlideType",
    "MetricRecord",
    "TableData",
    "SectionRecord",
    "ImageRef",
    "SlideRecord",
    "DeckRecord",
    "ExtractionSelectors",
    "ExtractionRules",
    "LayoutLimits",
    "ThemeColors",
    "ThemeFonts",
    "ThemeConfig",
    "DeckMetadata",
    "ExportConfig",
]
