"""Command line interface for converting catalogue exports."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .app import ShelfListApp
from .config import FORMAT_VERSIONS, LABELS, ShelfListConfig
from .docx_writer import load_docx_paragraphs
from .exporters import to_json, to_text
from .report import render_summary


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a sorted shelf list from a catalogue export")
    parser.add_argument("input", help="Path to the BibTeX-like catalogue export")
    parser.add_argument(
        "--docx-output",
        type=Path,
        help="Write the shelf list as a DOCX document",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write the formatted citation records as JSON",
    )
    parser.add_argument(
        "--text-output",
        type=Path,
        help="Write the shelf list as plain text",
    )
    parser.add_argument(
        "--language",
        default="bg",
        choices=sorted(LABELS),
        help="Language of headers and fixed labels",
    )
    parser.add_argument(
        "--format-version",
        default="current",
        choices=sorted(FORMAT_VERSIONS),
        help="Punctuation variant of the output (legacy reproduces older exports)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Read the generated DOCX back and verify it matches the assembled shelf list",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log classification decisions",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Input file not found: {input_path}", file=sys.stderr)
        return 1

    app = ShelfListApp(
        ShelfListConfig(language=args.language, format_version=args.format_version)
    )
    shelf_list = app.process_file(input_path)

    print(render_summary(shelf_list))

    if args.check:
        expected = app.build_document(shelf_list).paragraph_texts()
        actual = load_docx_paragraphs(app.build_docx(shelf_list))
        if actual != expected:
            print(
                f"DOCX round trip mismatch: expected {len(expected)} paragraphs, read {len(actual)}",
                file=sys.stderr,
            )
            return 1

    if args.docx_output:
        args.docx_output.write_bytes(app.build_docx(shelf_list))

    if args.json_output:
        args.json_output.write_text(to_json(shelf_list), encoding="utf-8")

    if args.text_output:
        args.text_output.write_text(to_text(app.build_document(shelf_list)), encoding="utf-8")

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
