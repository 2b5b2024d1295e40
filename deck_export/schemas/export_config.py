"""Pydantic models for exporter configuration.

The ExportConfig captures everything the exporter needs beyond the HTML
source itself: which CSS selectors carry each semantic role, the text rules
applied during extraction, per-layout truncation limits, and the visual
theme of the generated deck.
"""

import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

_HEX_COLOR = re.compile(r"[0-9A-Fa-f]{6}")


# ---------------------------------------------------------------------------
# Extraction selectors
# ---------------------------------------------------------------------------

class ExtractionSelectors(BaseModel):
    """CSS selectors for each semantic role in the hand-authored deck.

    The source decks use several class names for the same role, so most
    selectors are comma-separated groups.
    """

    slide: str = Field(
        default="section:not(section section)",
        description="Top-level slide container; nested sections belong to their slide",
    )
    header: str = Field(default=".korean-section-header", description="Slide header container")
    header_heading: str = Field(default="h2", description="Title heading inside the header")
    title_class: str = Field(default=".korean-title", description="Classed title element")
    subtitle: str = Field(default=".subtitle", description="Subtitle-classed text")
    domain_list: str = Field(default=".korean-list", description="List carrying the deck's list class")
    metric: str = Field(default=".korean-metric, .mckinsey-metric")
    metric_value: str = Field(default=".korean-metric-value, .mckinsey-metric-value")
    metric_label: str = Field(default=".korean-metric-label, .mckinsey-metric-label")
    card: str = Field(default=".korean-card")
    card_heading: str = Field(default="h3", description="Section title inside a card")
    grid_item: str = Field(default=".korean-grid > div")
    grid_heading: str = Field(default="h3, h4", description="Section title inside a grid item")
    highlight: str = Field(default=".korean-highlight, .highlight")
    table_caption: str = Field(default="h4, h3", description="Headings that may caption a table")


# ---------------------------------------------------------------------------
# Extraction rules
# ---------------------------------------------------------------------------

class ExtractionRules(BaseModel):
    """Text rules applied while extracting slide content."""

    annotation_markers: list[str] = Field(
        default_factory=lambda: ["주목:", "※"],
        description="Paragraphs starting with any of these are annotations, not content",
    )
    bullet_prefix: str = Field(default="• ", description="Prefix for list-sourced content lines")
    table_caption_keywords: list[str] = Field(
        default_factory=lambda: ["table", "표"],
        description="A heading mentioning one of these captions the slide's tables",
    )
    default_alt_text: str = "Image"
    image_base_dir: Optional[str] = Field(
        default=None,
        description="Directory relative image paths resolve against. Falls back to the HTML file's directory.",
    )
    workers: int = Field(
        default=1,
        ge=1,
        description="Threads used to extract slides. Output order always follows the document.",
    )


# ---------------------------------------------------------------------------
# Layout limits
# ---------------------------------------------------------------------------

class LayoutLimits(BaseModel):
    """How much extracted content each layout strategy places on a slide."""

    multi_section_columns: int = Field(default=3, ge=1)
    multi_section_items: int = Field(default=6, ge=1)
    metrics_slide_items: int = Field(default=8, ge=1, description="Items beside the metrics panel")
    standard_items: int = Field(default=10, ge=1)
    metrics_panel_items: int = Field(default=4, ge=1)


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

class ThemeColors(BaseModel):
    """Color palette for generated slides (hex RGB).

    Shorthand values ("#FFF") are expanded to six digits on load.
    """

    primary: str = "#2C3E50"
    secondary: str = "#505050"
    accent: str = "#4A90E2"
    success: str = "#27AE60"
    warning: str = "#F39C12"
    light: str = "#F8F9FA"
    white: str = "#FFFFFF"
    text: str = "#1A1A1A"
    border: str = "#E1E5E9"

    @field_validator("*", mode="before")
    @classmethod
    def normalize_hex(cls, value):
        if not isinstance(value, str):
            raise ValueError("color must be a hex string such as '#2C3E50'")
        digits = value.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if not _HEX_COLOR.fullmatch(digits):
            raise ValueError(f"not a hex color: {value!r}")
        return f"#{digits.upper()}"


class ThemeFonts(BaseModel):
    """Font face and sizes (points) for generated slides."""

    face: str = "Arial"
    title_size: int = 28
    subtitle_size: int = 16
    heading_size: int = 18
    body_size: int = 12
    caption_size: int = 10
    table_size: int = 11
    metric_size: int = 14
    highlight_size: int = 11


class ThemeConfig(BaseModel):
    colors: ThemeColors = Field(default_factory=ThemeColors)
    fonts: ThemeFonts = Field(default_factory=ThemeFonts)
    slide_width: float = Field(default=13.333, gt=0, description="Slide width in inches")
    slide_height: float = Field(default=7.5, gt=0, description="Slide height in inches")
    margin: float = Field(default=0.5, ge=0, description="Left/right content margin in inches")


class DeckMetadata(BaseModel):
    """Core properties written into the generated presentation."""

    title: Optional[str] = Field(
        default=None,
        description="Presentation title. Falls back to the HTML <title>.",
    )
    author: str = ""
    subject: str = ""
    keywords: str = ""


# ---------------------------------------------------------------------------
# Complete configuration
# ---------------------------------------------------------------------------

class ExportConfig(BaseModel):
    """Complete exporter configuration."""

    name: str = "Default"
    selectors: ExtractionSelectors = Field(default_factory=ExtractionSelectors)
    extraction: ExtractionRules = Field(default_factory=ExtractionRules)
    limits: LayoutLimits = Field(default_factory=LayoutLimits)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    metadata: DeckMetadata = Field(default_factory=DeckMetadata)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ExportConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        data = self.model_dump(exclude_none=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
