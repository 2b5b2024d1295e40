#!/usr/bin/env python3
"""Build a PowerPoint presentation from an HTML slide deck.

The source can be the HTML deck itself (extracted on the fly) or a JSON
file written by extract_slides.py.

Usage:
    python scripts/build_pptx.py deck.html -o output/deck.pptx
    python scripts/build_pptx.py workspace/deck_slides.json -o output/deck.pptx \
        --config config/default.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import yaml
from pydantic import ValidationError

from deck_export.builders.presentation_builder import build_presentation
from deck_export.errors import DeckSourceError
from deck_export.extraction import extract_deck_from_file
from deck_export.schemas.export_config import ExportConfig
from deck_export.schemas.slide_record import DeckRecord
from deck_export.utils.file_utils import default_output_path, load_json

logger = logging.getLogger(__name__)


def load_deck(source: Path, config: ExportConfig) -> DeckRecord:
    """Extract from HTML, or load previously extracted records from JSON."""
    if source.suffix.lower() == ".json":
        return DeckRecord.model_validate(load_json(source))
    return extract_deck_from_file(source, config)


def main():
    parser = argparse.ArgumentParser(description="Build PPTX from an HTML slide deck")
    parser.add_argument("source", type=Path, help="HTML deck or extracted slides JSON")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output PPTX path (default: source name with .pptx)")
    parser.add_argument("--config", type=Path, default=None,
                        help="Exporter config YAML (default: built-in settings)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = ExportConfig.from_yaml(args.config) if args.config else ExportConfig()
        deck = load_deck(args.source, config)
    except (DeckSourceError, FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not deck.slides:
        print(f"Error: no slides found in {args.source}", file=sys.stderr)
        sys.exit(1)

    output = args.output or default_output_path(args.source, ".pptx")
    result_path = build_presentation(deck, output, config)

    size_mb = result_path.stat().st_size / (1024 * 1024)
    print(f"Presentation generated: {result_path}")
    print(f"Slides: {len(deck.slides)}")
    print(f"File size: {size_mb:.2f} MB")


if __name__ == "__main__":
    main()
