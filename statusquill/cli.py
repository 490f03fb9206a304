"""
Command-line interface for StatusQuill.

Usage:
    statusquill render lines.json --output report.pdf
    statusquill render notes.txt --package-id PKG-001
    statusquill check report.pdf
    statusquill version
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .exceptions import StatusQuillError
from .models import StyledLine


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="statusquill",
        description="StatusQuill - PDF reports for package status exports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  statusquill render lines.json --output report.pdf
  statusquill render notes.txt --package-id PKG-001
  statusquill check report.pdf
  statusquill version
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render styled lines to PDF")
    render_parser.add_argument("input", help="JSON array of line objects, or plain text")
    render_parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: input name with .pdf extension)"
    )
    render_parser.add_argument(
        "--package-id",
        help="Name the output package-<id>.pdf when --output is not given"
    )
    render_parser.add_argument(
        "-c", "--config",
        help="JSON file with report options"
    )
    render_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log layout details"
    )

    check_parser = subparsers.add_parser("check", help="Verify the xref offsets of a PDF")
    check_parser.add_argument("input", help="PDF file")

    subparsers.add_parser("version", help="Show version information")

    return parser


def load_lines(path: Path) -> List[StyledLine]:
    """Read styled lines from a ``.json`` array or a plain-text file.

    Any other suffix is plain text: one line per input line, styled with the
    report defaults.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("JSON input must be an array of lines")
        lines = []
        for item in data:
            if isinstance(item, str):
                lines.append(StyledLine(item))
            elif isinstance(item, dict):
                lines.append(StyledLine.from_dict(item))
            else:
                raise ValueError(f"Unsupported line entry: {item!r}")
        return lines
    return [StyledLine(raw) for raw in text.splitlines()]


def cmd_render(args) -> int:
    """Handle render command."""
    from .config import ReportOptions
    from .pdfcompiler.compiler import PDFCompiler
    from .report import report_filename
    from .utils.logger import configure_logging

    configure_logging("DEBUG" if args.verbose else "WARNING")

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    elif args.package_id:
        output_path = Path(report_filename(args.package_id))
    else:
        output_path = input_path.with_suffix(".pdf")

    try:
        options = ReportOptions.from_file(args.config) if args.config else ReportOptions()
        lines = load_lines(input_path)
    except (StatusQuillError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    compiler = PDFCompiler(options)
    pages = compiler.layout(lines)
    data = compiler.assemble(pages)
    if data is None:
        print("Nothing to render: no printable lines", file=sys.stderr)
        return 1

    output_path.write_bytes(data)
    print(f"✅ Saved: {output_path}")
    print(f"   Pages: {len(pages)}")
    print(f"   Size: {len(data):,} bytes")
    return 0


def cmd_check(args) -> int:
    """Handle check command."""
    from .pdfcompiler.writer import read_xref_offsets, verify_xref

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    data = input_path.read_bytes()
    try:
        offsets = read_xref_offsets(data)
        mismatched = verify_xref(data)
    except StatusQuillError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if mismatched:
        print(f"❌ {len(mismatched)} of {len(offsets)} xref offsets are wrong: "
              f"{', '.join(map(str, mismatched))}")
        return 1
    print(f"✅ {len(offsets)} xref offsets verified")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"StatusQuill v{__version__}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    commands = {
        "render": cmd_render,
        "check": cmd_check,
        "version": cmd_version,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
