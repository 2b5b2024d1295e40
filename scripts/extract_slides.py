#!/usr/bin/env python3
"""Extract structured slide records from an HTML slide deck.

Every top-level slide container becomes one record (title, subtitle,
content lines, metrics, tables, sections, highlights, images, slide type),
written as JSON for inspection or for a later build_pptx.py run.

Usage:
    python scripts/extract_slides.py deck.html -o workspace/deck_slides.json
    python scripts/extract_slides.py deck.html --config config/default.yaml --workers 4
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import yaml
from pydantic import ValidationError

from deck_export.errors import DeckSourceError
from deck_export.extraction import extract_deck_from_file
from deck_export.schemas.export_config import ExportConfig
from deck_export.utils.file_utils import save_json

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Extract slide records from an HTML deck")
    parser.add_argument("html", type=Path, help="HTML slide deck")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output JSON path (default: <html stem>_slides.json next to the input)")
    parser.add_argument("--config", type=Path, default=None,
                        help="Exporter config YAML (default: built-in settings)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Threads used for per-slide extraction")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = ExportConfig.from_yaml(args.config) if args.config else ExportConfig()
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if args.workers:
        config.extraction.workers = max(1, args.workers)

    try:
        deck = extract_deck_from_file(args.html, config)
    except DeckSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output = args.output or args.html.with_name(f"{args.html.stem}_slides.json")
    save_json(deck.model_dump(mode="json"), output)

    print(f"Slides extracted: {len(deck.slides)}")
    for kind, n in sorted(deck.count_by_type().items()):
        print(f"  {kind}: {n}")
    print(f"Output: {output}")


if __name__ == "__main__":
    main()
