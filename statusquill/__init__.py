"""
StatusQuill - PDF reports for package status exports.

Turns a sequence of styled text lines into a byte-exact PDF 1.4 document
without a PDF-writing library: lines are sanitized to printable ASCII,
word-wrapped, paginated by estimated height and serialized with a
single-pass xref writer.

Quick Start:
    from statusquill import StyledLine, FontWeight, render_pdf

    data = render_pdf([
        StyledLine("Package Status Report", weight=FontWeight.BOLD, size=18),
        StyledLine("Status: IN_TRANSIT"),
    ])
    if data is not None:
        Path("package-status.pdf").write_bytes(data)
"""

from .version import __version__, __version_info__

from .exceptions import (
    CompilationError,
    ConfigurationError,
    LayoutError,
    StatusQuillError,
    StyleError,
)
from .config import ReportOptions
from .models import (
    BLACK,
    DEFAULT_COLOR,
    Color,
    FontWeight,
    LayoutPage,
    StyledLine,
    WrappedLine,
)
from .engine import (
    LayoutValidator,
    LineBreaker,
    PaginationManager,
    TextMetricsEngine,
    paginate,
    sanitize,
    wrap_line,
)
from .pdfcompiler import PDFCompiler, PdfWriter, read_xref_offsets, render_pdf, verify_xref
from .report import MUTED, PDF_MIME_TYPE, PRIMARY, SECONDARY, ReportBuilder, report_filename

__all__ = [
    "__version__",
    "__version_info__",
    "BLACK",
    "Color",
    "CompilationError",
    "ConfigurationError",
    "DEFAULT_COLOR",
    "FontWeight",
    "LayoutError",
    "LayoutPage",
    "LayoutValidator",
    "LineBreaker",
    "MUTED",
    "PDFCompiler",
    "PDF_MIME_TYPE",
    "PRIMARY",
    "PaginationManager",
    "PdfWriter",
    "ReportBuilder",
    "ReportOptions",
    "SECONDARY",
    "StatusQuillError",
    "StyleError",
    "StyledLine",
    "TextMetricsEngine",
    "WrappedLine",
    "paginate",
    "read_xref_offsets",
    "render_pdf",
    "report_filename",
    "sanitize",
    "verify_xref",
    "wrap_line",
]
