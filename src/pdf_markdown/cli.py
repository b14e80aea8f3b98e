"""
Command line interface.

Usage:
    pdf-markdown input.pdf
    pdf-markdown input.pdf -o output.md
    pdf-markdown input.pdf --transformers line-joiner,heading-classifier
"""

import argparse
import logging
import sys
from pathlib import Path

from .converter import PDFConverter
from .exceptions import ConversionError
from .logging import configure_logging
from .options import ConversionOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-markdown",
        description="PDF -> Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdf-markdown report.pdf
  pdf-markdown report.pdf -o report.md
  pdf-markdown report.pdf --tolerance 1.5 --page-separator '\\n\\n---\\n\\n'
        """,
    )
    parser.add_argument("pdf_file")
    parser.add_argument("-o", "--output", default=None, help="write markdown here instead of stdout")
    parser.add_argument("--tolerance", type=float, default=None, help="line join tolerance in points")
    parser.add_argument("--transformers", default=None, help="comma-separated transformer identifiers")
    parser.add_argument("--page-separator", default=None, help="text inserted between pages")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    pdf_path = Path(args.pdf_file)
    if not pdf_path.exists() or pdf_path.suffix.lower() != ".pdf":
        print(f"Invalid PDF path: {pdf_path}", file=sys.stderr)
        return 1

    try:
        options = ConversionOptions.from_env(
            line_join_tolerance=args.tolerance,
            transformers=[t.strip() for t in args.transformers.split(",") if t.strip()] if args.transformers else None,
            page_separator=args.page_separator.replace("\\n", "\n") if args.page_separator else None,
        )
        converter = PDFConverter(options)

        if args.output:
            converter.save(pdf_path, args.output)
        else:
            sys.stdout.write(converter.convert_file(pdf_path))
            sys.stdout.write("\n")
        return 0

    except ConversionError as e:
        print(f"Conversion failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
