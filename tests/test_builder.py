"""End-to-end tests: HTML deck in, PPTX out."""

import json

import pytest
from pptx import Presentation

from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import DeckRecord, SlideRecord, SlideType


DECK_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Market Study</title></head>
<body>
<section>
  <div class="korean-section-header"><h2>Overview</h2><p class="subtitle">Key findings</p></div>
  <ul class="korean-list"><li>Demand is rising</li><li>Supply is flat</li></ul>
  <div class="korean-highlight">Prices will follow</div>
</section>
<section>
  <h2>Prices</h2>
  <h4>Price table</h4>
  <table>
    <tr><th>Year</th><th>Price</th><th>Change</th></tr>
    <tr><td>2023</td><td>9</td></tr>
    <tr><td>2024</td><td>10</td><td>+11%</td></tr>
  </table>
</section>
<section>
  <h2>KPIs</h2>
  <div class="korean-metric"><div class="korean-metric-value">42%</div><div class="korean-metric-label">share</div></div>
  <div class="korean-metric"><div class="korean-metric-value">3.1x</div><div class="korean-metric-label">growth</div></div>
  <div class="korean-metric"><div class="korean-metric-value">12</div><div class="korean-metric-label">markets</div></div>
  <div class="korean-metric"><div class="korean-metric-value">$4B</div><div class="korean-metric-label">revenue</div></div>
</section>
</body>
</html>
"""


def _texts(slide) -> list[str]:
    return [shape.text_frame.text for shape in slide.shapes if shape.has_text_frame]


@pytest.fixture
def deck_file(tmp_path):
    f = tmp_path / "study.html"
    f.write_text(DECK_HTML, encoding="utf-8")
    return f


class TestPresentationBuilder:
    def test_build_from_html(self, deck_file, tmp_path):
        from deck_export.builders.presentation_builder import build_presentation
        from deck_export.extraction import extract_deck_from_file

        deck = extract_deck_from_file(deck_file)
        assert [s.slide_type for s in deck.slides] == [
            SlideType.STANDARD, SlideType.TABLE, SlideType.METRICS,
        ]

        output = build_presentation(deck, tmp_path / "out" / "study.pptx")
        assert output.exists()

        prs = Presentation(str(output))
        assert len(prs.slides) == 3
        assert prs.core_properties.title == "Market Study"

        first = _texts(prs.slides[0])
        assert "Overview" in first
        assert "Key findings" in first
        assert "Prices will follow" in first

        tables = [shape.table for shape in prs.slides[1].shapes if shape.has_table]
        assert len(tables) == 1
        assert len(tables[0].columns) == 3
        assert tables[0].cell(1, 2).text == ""
        assert tables[0].cell(2, 2).text == "+11%"

        assert any(t.startswith("42%\nshare") for t in _texts(prs.slides[2]))

    def test_configured_metadata_wins(self, tmp_path):
        from deck_export.builders.presentation_builder import PresentationBuilder

        config = ExportConfig()
        config.metadata.title = "Board Pack"
        config.metadata.author = "Strategy"
        deck = DeckRecord(source="x.html", title="Ignored", slides=[SlideRecord(index=0, title="A")])
        prs = PresentationBuilder(config).build_presentation(deck)
        assert prs.core_properties.title == "Board Pack"
        assert prs.core_properties.author == "Strategy"

    def test_custom_slide_size(self):
        from pptx.util import Inches

        from deck_export.builders.presentation_builder import PresentationBuilder

        config = ExportConfig()
        config.theme.slide_width = 10.0
        config.theme.slide_height = 5.625
        prs = PresentationBuilder(config).build_presentation(DeckRecord(source="x.html"))
        assert prs.slide_width == Inches(10.0)
        assert len(prs.slides) == 0

    def test_failed_layout_keeps_slide(self, monkeypatch):
        from deck_export.builders.presentation_builder import PresentationBuilder
        from deck_export.pptx_engine.composers.standard import StandardComposer

        def broken(self, slide, record, config, top):
            raise RuntimeError("boom")

        monkeypatch.setattr(StandardComposer, "compose_body", broken)
        deck = DeckRecord(
            source="x.html",
            slides=[SlideRecord(index=0, title="A"), SlideRecord(index=1, title="B")],
        )
        prs = PresentationBuilder().build_presentation(deck)
        assert len(prs.slides) == 2
        assert "B" in _texts(prs.slides[1])

    def test_build_from_saved_json(self, deck_file, tmp_path):
        from deck_export.builders.presentation_builder import build_presentation
        from deck_export.extraction import extract_deck_from_file
        from deck_export.utils.file_utils import load_json, save_json

        deck = extract_deck_from_file(deck_file)
        json_path = tmp_path / "study_slides.json"
        save_json(deck.model_dump(mode="json"), json_path)
        assert "multiSection" not in json_path.read_text(encoding="utf-8")
        assert json.loads(json_path.read_text(encoding="utf-8"))["title"] == "Market Study"

        reloaded = DeckRecord.model_validate(load_json(json_path))
        assert reloaded == deck
        output = build_presentation(reloaded, tmp_path / "study.pptx")
        assert len(Presentation(str(output)).slides) == 3
