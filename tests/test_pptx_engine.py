"""Tests for the PPTX engine operations and composers."""


import pytest
from pptx.enum.shapes import MSO_SHAPE_TYPE
from pptx.util import Inches

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import (
    ImageRef,
    MetricRecord,
    SectionRecord,
    SlideRecord,
    SlideType,
    TableData,
)


def _slide_texts(slide) -> list[str]:
    return [shape.text_frame.text for shape in slide.shapes if shape.has_text_frame]


def _new_slide():
    from deck_export.pptx_engine.slide_operations import add_blank_slide, create_presentation

    prs = create_presentation()
    return prs, add_blank_slide(prs)


class TestSlideOperations:
    def test_create_presentation(self):
        from deck_export.pptx_engine.slide_operations import create_presentation

        prs = create_presentation()
        assert prs.slide_width == Inches(13.333)
        assert prs.slide_height == Inches(7.5)

    def test_add_blank_slide(self):
        prs, slide = _new_slide()
        assert len(prs.slides) == 1
        assert len(slide.placeholders) == 0

    def test_core_properties(self):
        from deck_export.pptx_engine.slide_operations import set_core_properties
        from deck_export.schemas.export_config import DeckMetadata

        prs, _ = _new_slide()
        set_core_properties(prs, DeckMetadata(author="Research Team"), fallback_title="Deck")
        assert prs.core_properties.title == "Deck"
        assert prs.core_properties.author == "Research Team"


class TestShapeOperations:
    def test_hex_to_rgb(self):
        from pptx.dml.color import RGBColor

        from deck_export.pptx_engine.shape_operations import hex_to_rgb

        assert hex_to_rgb("#4A90E2") == RGBColor(0x4A, 0x90, 0xE2)
        assert hex_to_rgb("#fff") == RGBColor(0xFF, 0xFF, 0xFF)

    def test_shorthand_theme_color_composes(self):
        from deck_export.pptx_engine.composers import get_composer

        config = ExportConfig()
        config.theme.colors.border = "#ccc"
        _, slide = _new_slide()
        record = SlideRecord(index=0, title="Short colors")
        get_composer(record.slide_type).compose(slide, record, config)
        assert "Short colors" in _slide_texts(slide)


class TestTextOperations:
    def test_add_textbox_splits_paragraphs(self):
        from deck_export.pptx_engine.text_operations import add_textbox

        _, slide = _new_slide()
        txBox = add_textbox(
            slide, "Line one\nLine two",
            left=1.0, top=1.0, width=8.0, height=1.0,
            fill_color="#F8F9FA", bold=True,
        )
        paragraphs = txBox.text_frame.paragraphs
        assert [p.text for p in paragraphs] == ["Line one", "Line two"]
        assert paragraphs[0].runs[0].font.bold is True

    def test_add_bullet_list(self):
        from deck_export.pptx_engine.text_operations import add_bullet_list

        _, slide = _new_slide()
        txBox = add_bullet_list(
            slide, ["Item 1", "Item 2", "Item 3"],
            left=1.0, top=2.0, width=10.0, height=4.0,
        )
        tf = txBox.text_frame
        assert len(tf.paragraphs) == 3
        assert tf.paragraphs[2].text == "Item 3"
        pPr = tf.paragraphs[0]._p.pPr
        assert pPr.find("{http://schemas.openxmlformats.org/drawingml/2006/main}buChar") is not None


class TestTableOperations:
    def test_pad_rows(self):
        from deck_export.pptx_engine.table_operations import pad_rows

        assert pad_rows([["a", "b", "c"], ["d"]]) == [["a", "b", "c"], ["d", "", ""]]
        assert pad_rows([]) == []

    def test_add_ragged_table(self):
        from deck_export.pptx_engine.table_operations import add_table

        _, slide = _new_slide()
        frame = add_table(slide, [["H1", "H2", "H3"], ["x"]], left=0.5, top=1.0, width=12.0)
        table = frame.table
        assert len(table.rows) == 2
        assert len(table.columns) == 3
        assert table.cell(0, 1).text == "H2"
        assert table.cell(1, 0).text == "x"
        assert table.cell(1, 2).text == ""

    def test_empty_table_not_added(self):
        from deck_export.pptx_engine.table_operations import add_table

        _, slide = _new_slide()
        assert add_table(slide, [], left=0.5, top=1.0, width=12.0) is None
        assert len(slide.shapes) == 0


class TestImageOperations:
    def test_fit_within(self):
        from deck_export.pptx_engine.image_operations import fit_within

        assert fit_within(200, 100, 4.0, 4.0) == (4.0, 2.0)
        assert fit_within(100, 200, 4.0, 4.0) == (2.0, 4.0)

    def test_add_image_fitted(self, tmp_path):
        from PIL import Image

        from deck_export.pptx_engine.image_operations import add_image_fitted

        path = tmp_path / "chart.png"
        Image.new("RGB", (200, 100), "blue").save(path)
        _, slide = _new_slide()
        picture = add_image_fitted(slide, path, left=1.0, top=1.0, max_width=4.0, max_height=4.0)
        assert picture is not None
        assert picture.width == Inches(4.0)
        assert picture.height == Inches(2.0)

    def test_missing_image(self, tmp_path):
        from deck_export.pptx_engine.image_operations import add_image_fitted

        _, slide = _new_slide()
        assert add_image_fitted(slide, tmp_path / "nope.png", 1.0, 1.0, 4.0, 4.0) is None


class TestComposers:
    def _compose(self, record: SlideRecord, config: ExportConfig | None = None):
        from deck_export.pptx_engine.composers import get_composer

        _, slide = _new_slide()
        get_composer(record.slide_type).compose(slide, record, config or ExportConfig())
        return slide

    def test_registry_covers_every_slide_type(self):
        from deck_export.pptx_engine.composers import COMPOSERS

        assert set(COMPOSERS) == set(SlideType)

    def test_standard_with_metrics_and_highlights(self):
        record = SlideRecord(
            index=0,
            title="Overview",
            subtitle="2024 review",
            sections=[SectionRecord(title="Drivers", items=[f"item {i}" for i in range(12)])],
            metrics=[MetricRecord(value="42%", label="share")],
            highlights=["Watch supply"],
        )
        texts = _slide_texts(self._compose(record))
        assert "Overview" in texts
        assert "2024 review" in texts
        assert "Drivers" in texts
        assert "42%\nshare" in texts
        assert "Watch supply" in texts
        assert "1" in texts
        bullets = next(t for t in texts if t.startswith("item 0"))
        assert len(bullets.split("\n")) == 10

    def test_standard_content_lines_fallback(self):
        record = SlideRecord(index=1, title="Plain", content_lines=["First", "Second"])
        texts = _slide_texts(self._compose(record))
        assert "First\nSecond" in texts

    def test_standard_places_image(self, tmp_path):
        from PIL import Image

        path = tmp_path / "photo.png"
        Image.new("RGB", (300, 200), "green").save(path)
        record = SlideRecord(
            index=0, title="Photo", images=[ImageRef(path=str(path), alt_text="Photo")]
        )
        slide = self._compose(record)
        assert any(shape.shape_type == MSO_SHAPE_TYPE.PICTURE for shape in slide.shapes)

    def test_table_slide(self):
        record = SlideRecord(
            index=0,
            title="Prices",
            tables=[TableData(rows=[["Year", "Price"], ["2024", "10"]], title="Price table")],
            slide_type=SlideType.TABLE,
        )
        slide = self._compose(record)
        tables = [shape.table for shape in slide.shapes if shape.has_table]
        assert len(tables) == 1
        assert tables[0].cell(1, 1).text == "10"
        assert "Price table" in _slide_texts(slide)

    def test_metrics_slide_limits_panel(self):
        record = SlideRecord(
            index=0,
            title="KPIs",
            metrics=[MetricRecord(value=str(i), label=f"m{i}") for i in range(6)],
            sections=[SectionRecord(items=["a", "b"], kind="list")],
            slide_type=SlideType.METRICS,
        )
        texts = _slide_texts(self._compose(record))
        panel = next(t for t in texts if t.startswith("0\nm0"))
        assert "m3" in panel
        assert "m4" not in panel
        assert "a\nb" in texts

    def test_multi_section_columns(self):
        config = ExportConfig()
        config.limits.multi_section_columns = 2
        record = SlideRecord(
            index=0,
            title="Cards",
            sections=[SectionRecord(title=f"Card {i}", items=["x"]) for i in range(4)],
            slide_type=SlideType.MULTI_SECTION,
        )
        texts = _slide_texts(self._compose(record, config))
        assert "Card 0" in texts
        assert "Card 1" in texts
        assert "Card 2" not in texts

    def test_detailed_list_split(self):
        from deck_export.pptx_engine.composers.detailed_list import split_columns

        assert split_columns(["a", "b", "c"]) == (["a", "b"], ["c"])
        record = SlideRecord(
            index=0,
            title="Long list",
            sections=[SectionRecord(items=[f"i{n}" for n in range(9)], kind="list")],
            slide_type=SlideType.DETAILED_LIST,
        )
        texts = _slide_texts(self._compose(record))
        assert "i0\ni1\ni2\ni3\ni4" in texts
        assert "i5\ni6\ni7\ni8" in texts


@pytest.mark.parametrize("slide_type", list(SlideType))
def test_composers_tolerate_empty_records(slide_type):
    from deck_export.pptx_engine.composers import get_composer

    _, slide = _new_slide()
    record = SlideRecord(index=0, title="Empty", slide_type=slide_type)
    get_composer(slide_type).compose(slide, record, ExportConfig())
    assert "Empty" in _slide_texts(slide)
