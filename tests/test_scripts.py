"""Command-line behaviour of the scripts in scripts/."""

import subprocess
import sys
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"

DECK_HTML = "<html><body><section><h2>Only slide</h2><p>Text</p></section></body></html>"


def _run_script(name: str, *args: str) -> subprocess.CompletedProcess:
    """Run a script in a subprocess and capture output."""
    return subprocess.run(
        [sys.executable, str(SCRIPTS_DIR / name), *args],
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.fixture
def deck_file(tmp_path):
    f = tmp_path / "deck.html"
    f.write_text(DECK_HTML, encoding="utf-8")
    return f


@pytest.fixture
def invalid_config(tmp_path):
    f = tmp_path / "invalid.yaml"
    f.write_text("limits:\n  standard_items: 0\n", encoding="utf-8")
    return f


@pytest.fixture
def malformed_config(tmp_path):
    f = tmp_path / "malformed.yaml"
    f.write_text("selectors: [unclosed\n", encoding="utf-8")
    return f


class TestConfigErrors:
    @pytest.mark.parametrize("script", ["extract_slides.py", "build_pptx.py"])
    def test_invalid_field(self, script, deck_file, invalid_config):
        result = _run_script(script, str(deck_file), "--config", str(invalid_config))
        assert result.returncode == 1
        assert "Error:" in result.stderr
        assert "Traceback" not in result.stderr

    @pytest.mark.parametrize("script", ["extract_slides.py", "build_pptx.py"])
    def test_malformed_yaml(self, script, deck_file, malformed_config):
        result = _run_script(script, str(deck_file), "--config", str(malformed_config))
        assert result.returncode == 1
        assert "Error:" in result.stderr
        assert "Traceback" not in result.stderr

    def test_check_pdf_pages_invalid_config(self, deck_file, invalid_config, tmp_path):
        result = _run_script(
            "check_pdf_pages.py", str(tmp_path / "deck.pdf"),
            "--html", str(deck_file), "--config", str(invalid_config),
        )
        assert result.returncode == 1
        assert "Error:" in result.stderr
        assert "Traceback" not in result.stderr


class TestExtractSlidesScript:
    def test_writes_json(self, deck_file):
        result = _run_script("extract_slides.py", str(deck_file))
        assert result.returncode == 0
        assert "Slides extracted: 1" in result.stdout
        assert (deck_file.parent / "deck_slides.json").exists()

    def test_missing_source(self, tmp_path):
        result = _run_script("extract_slides.py", str(tmp_path / "nope.html"))
        assert result.returncode == 1
        assert "Cannot read HTML source" in result.stderr
