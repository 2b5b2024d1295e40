"""Pydantic models for slide content extracted from an HTML deck.

One SlideRecord is built per top-level slide container, in document order.
Records are rebuilt from the HTML source on every run; nothing is cached
between extraction passes.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


class SlideType(str, Enum):
    """Layout strategy selected for a slide from its extracted content."""

    TABLE = "table"
    METRICS = "metrics"
    MULTI_SECTION = "multiSection"
    DETAILED_LIST = "detailedList"
    STANDARD = "standard"


class MetricRecord(BaseModel):
    """A value/label pair, e.g. ("42%", "market share")."""

    value: str
    label: str

    @property
    def combined(self) -> str:
        """Value over label, as shown in metric panels."""
        return f"{self.value}\n{self.label}"


class TableData(BaseModel):
    """Rows of cell text, header row first when one could be told apart.

    Rows may have different cell counts; ragged input is kept as-is.
    """

    rows: list[list[str]] = Field(default_factory=list)
    title: str = Field(
        default="",
        description="Caption heading found near the table (empty when none)",
    )

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)


class SectionRecord(BaseModel):
    """Grouped sub-content from a card or grid item (or a slide's bare lists)."""

    title: str = ""
    items: list[str] = Field(default_factory=list)
    kind: Literal["card", "grid", "list"] = "card"


class ImageRef(BaseModel):
    """A local image reference resolved to an existing file."""

    path: str = Field(description="Resolved filesystem path")
    alt_text: str = "Image"


class SlideRecord(BaseModel):
    """Structured content of one slide container."""

    index: int = Field(ge=0, description="Zero-based position in the deck")
    title: str
    subtitle: Optional[str] = None
    content_lines: list[str] = Field(default_factory=list)
    metrics: list[MetricRecord] = Field(default_factory=list)
    tables: list[TableData] = Field(default_factory=list)
    sections: list[SectionRecord] = Field(default_factory=list)
    highlights: list[str] = Field(default_factory=list)
    images: list[ImageRef] = Field(default_factory=list)
    slide_type: SlideType = SlideType.STANDARD

    @property
    def slide_number(self) -> int:
        return self.index + 1


class DeckRecord(BaseModel):
    """All slide records extracted from one HTML document."""

    source: str = Field(description="Path of the HTML file the deck was read from")
    title: str = ""
    slides: list[SlideRecord] = Field(default_factory=list)

    def count_by_type(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for slide in self.slides:
            counts[slide.slide_type.value] = counts.get(slide.slide_type.value, 0) + 1
        return counts
