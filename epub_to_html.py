#!/usr/bin/env python3
"""
EPUB to HTML

Converts an EPUB into a single HTML file. Chapters are concatenated in
reading order and separated by <hr />; images are embedded as base64
data URIs. Scripts, styles, SVG and class attributes are dropped.

Usage:
    python epub_to_html.py <input.epub> [output.html] [--config <file>]

Examples:
    # Write output.html in the current directory
    python epub_to_html.py book.epub

    # Choose the output file and a YAML config
    python epub_to_html.py book.epub book.html --config epub2html.yaml

    # Print package metadata without converting
    python epub_to_html.py book.epub --metadata
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from epubhtml_core import EpubError, EpubHtmlAdapter
from epubhtml_core.config import get_default_config, load_config

logger = logging.getLogger("epub_to_html")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert an EPUB into a single HTML file with inlined images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.epub
  %(prog)s book.epub book.html
  %(prog)s book.epub --config epub2html.yaml --log-level DEBUG
        """
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Path to the input EPUB file"
    )

    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Output HTML path (default: output.html)"
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="JSON or YAML configuration file"
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (overrides the config file)"
    )

    parser.add_argument(
        "--metadata",
        action="store_true",
        help="Print package metadata as JSON and exit"
    )

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
    except (OSError, ValueError, TypeError) as e:
        print(f"✗ Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    adapter = EpubHtmlAdapter(config)
    if not adapter.supports_format(args.input):
        logger.warning(f"{args.input} does not have an .epub extension; trying anyway")

    try:
        if args.metadata:
            print(json.dumps(adapter.extract_metadata(args.input), indent=2))
            return 0

        result = adapter.convert(args.input, args.output)
    except EpubError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"✗ Failed to write output: {e}", file=sys.stderr)
        return 1

    print(result.summary())
    print(f"\n✓ Done! Output: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
