"""Command-line entry point: `plainkit-converter [input] [-o OUTPUT] ...`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import ConversionConfig
from .converter import Converter
from .errors import ConversionError
from .fragment import is_full_page
from .parser import parse_document, parse_fragment
from .serialize import to_test_format

EPILOG = """\
Examples:
  # Convert HTML from stdin
  echo '<div class="container">Hello</div>' | plainkit-converter

  # Convert HTML file
  plainkit-converter index.html

  # Convert with htmx and Alpine.js support
  plainkit-converter --htmx --alpine index.html

  # Save to file
  plainkit-converter index.html -o component.go
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plainkit-converter",
        description="Convert HTML to Plain Go code. Supports standard HTML, htmx attributes and Alpine.js directives.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="HTML file to convert (default: stdin)")
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--htmx", action="store_true", help="Enable htmx attribute conversion")
    parser.add_argument("--alpine", action="store_true", help="Enable Alpine.js attribute conversion")
    parser.add_argument("--package", default="main", metavar="NAME", help="Go package name (default: main)")
    parser.add_argument(
        "--fragment-context",
        default="div",
        metavar="TAG",
        help="Context element used when parsing fragments (default: div)",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on the first HTML parse error")
    parser.add_argument("--tree", action="store_true", help="Print the parsed tree instead of Go code")
    parser.add_argument("--debug", action="store_true", help="Trace the conversion on stderr")
    parser.add_argument("--version", "-v", action="store_true", help="Show version")
    return parser


def read_input(path: str | None) -> tuple[str, str]:
    """Return (input name, markup) from a file or piped stdin."""
    if path:
        try:
            return path, Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"failed to open input file: {exc}"
            raise ConversionError(msg) from exc
    if sys.stdin.isatty():
        raise ConversionError("no input provided. Use a file argument or pipe HTML to stdin")
    return "stdin", sys.stdin.read()


def dump_tree(html: str, config: ConversionConfig) -> str:
    html = html.strip()
    if is_full_page(html):
        root = parse_document(html, strict=config.strict)
    else:
        root = parse_fragment(html, container=config.fragment_container, strict=config.strict)
    return to_test_format(root) + "\n"


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"Plain Converter v{__version__}")
        return 0

    try:
        config = ConversionConfig(
            htmx=args.htmx,
            alpine=args.alpine,
            package=args.package,
            fragment_container=args.fragment_context,
            strict=args.strict,
        )
        input_name, html = read_input(args.input)
        if args.tree:
            result = dump_tree(html, config)
        else:
            result = Converter(config, debug=args.debug).convert(html)
    except (ConversionError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError as exc:
            print(f"Error: failed to write output file: {exc}", file=sys.stderr)
            return 1
        print(f"✓ Converted {input_name} → {args.output}")
    else:
        sys.stdout.write(result)
    return 0
