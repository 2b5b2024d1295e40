#!/usr/bin/env python3
"""Check that a rendered PDF has one page per slide.

The expected count comes from the source HTML deck (number of slide
containers) or from --expected.

Usage:
    python scripts/check_pdf_pages.py deck.pdf --html deck.html
    python scripts/check_pdf_pages.py deck.pdf --expected 21
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
from deck_export.parsers import compare_page_count, count_pdf_pages, load_html_document
from deck_export.schemas.export_config import ExportConfig

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def count_slides(html_path: Path, config: ExportConfig) -> int:
    document = load_html_document(html_path)
    return len(document.select(config.selectors.slide))


def main():
    parser = argparse.ArgumentParser(description="Compare PDF page count with slide count")
    parser.add_argument("pdf", type=Path, help="Rendered PDF")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--html", type=Path, help="Source HTML deck")
    source.add_argument("--expected", type=int, help="Expected page count")
    parser.add_argument("--config", type=Path, default=None,
                        help="Exporter config YAML (for the slide selector)")
    args = parser.parse_args()

    try:
        config = ExportConfig.from_yaml(args.config) if args.config else ExportConfig()
        expected = args.expected if args.html is None else count_slides(args.html, config)
        pages = count_pdf_pages(args.pdf)
    except (DeckSourceError, FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    status = compare_page_count(pages, expected)
    print(f"PDF: {args.pdf}")
    print(f"Pages found: {pages} (expected {expected})")
    if status == "match":
        print("All slides exported, one page each.")
        return
    if status == "missing":
        print(f"Warning: {expected - pages} slide(s) missing from the PDF")
    else:
        print(f"Warning: {pages - expected} extra page(s); some slides broke across pages")
    sys.exit(2)


if __name__ == "__main__":
    main()
