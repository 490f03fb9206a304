"""
Report builder for package status exports.

Collects styled lines the way the dashboard's export assembles them (title,
sections, ``Label: value`` fields, muted notes) and hands them to the PDF
compiler. What goes into the report stays the caller's business.

Usage:
    builder = ReportBuilder()
    builder.add_title("Package Status Report")
    builder.add_section("Product")
    builder.add_field("Name", product_name, weight=FontWeight.BOLD)
    data = builder.build()
    if data is not None:
        Path(report_filename(package_id)).write_bytes(data)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .config import ReportOptions
from .engine.layout_validator import LayoutValidator
from .engine.line_breaker import LineBreaker
from .engine.pagination_manager import PaginationManager
from .models import Color, FontWeight, LayoutPage, StyledLine, WrappedLine
from .pdfcompiler.compiler import PDFCompiler

logger = logging.getLogger(__name__)

PRIMARY = Color(0.14, 0.32, 0.63)
SECONDARY = Color(0.25, 0.55, 0.38)
MUTED = Color(0.38, 0.42, 0.48)

PDF_MIME_TYPE = "application/pdf"
MISSING_VALUE = "N/A"


def report_filename(package_id: Optional[str] = None) -> str:
    """Download filename for a package report."""
    if package_id:
        return f"package-{package_id}.pdf"
    return "package-status.pdf"


class ReportBuilder:
    """Accumulates wrapped report lines and compiles them to PDF."""

    def __init__(self, options: Optional[ReportOptions] = None):
        self.options = options or ReportOptions()
        self._breaker = LineBreaker(options=self.options)
        self._lines: List[WrappedLine] = []

    @property
    def lines(self) -> List[WrappedLine]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def add(
        self,
        text: str,
        *,
        color: Union[Color, str, None] = None,
        weight: Union[FontWeight, str] = FontWeight.REGULAR,
        size: Optional[float] = None,
        gap_before: float = 0.0,
    ) -> "ReportBuilder":
        """Wrap ``text`` and append its fragments. Blank text adds nothing."""
        line = StyledLine(
            text=text,
            color=color,
            weight=weight,
            size=size,
            gap_before=gap_before,
        )
        return self.add_line(line)

    def add_line(self, line: StyledLine) -> "ReportBuilder":
        self._lines.extend(self._breaker.break_line(line))
        return self

    def add_title(self, text: str) -> "ReportBuilder":
        return self.add(text, weight=FontWeight.BOLD, size=18, color=PRIMARY)

    def add_section(self, title: str) -> "ReportBuilder":
        return self.add(title, weight=FontWeight.BOLD, size=14, color=PRIMARY, gap_before=12)

    def add_field(self, label: str, value: Any, **style: Any) -> "ReportBuilder":
        shown = MISSING_VALUE if value is None or value == "" else value
        return self.add(f"{label}: {shown}", **style)

    def add_note(self, text: str, **style: Any) -> "ReportBuilder":
        style.setdefault("color", MUTED)
        return self.add(text, **style)

    def pages(self) -> List[LayoutPage]:
        return PaginationManager(options=self.options).paginate(self._lines)

    def build(self, validate: bool = True) -> Optional[bytes]:
        """Compile the report; None when no printable line was added."""
        pages = self.pages()
        if validate and pages:
            LayoutValidator(pages, self.options).raise_for_errors()
        return PDFCompiler(self.options).assemble(pages)

    def save(self, path: Union[str, Path]) -> Optional[Path]:
        """Write the report to ``path``; returns None and writes nothing when empty."""
        data = self.build()
        if data is None:
            logger.info("Report is empty; %s not written", path)
            return None
        path = Path(path)
        path.write_bytes(data)
        logger.info("Wrote %d bytes to %s", len(data), path)
        return path
