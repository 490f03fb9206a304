"""PDF Compiler - writes report pages as PDF without a PDF library."""

from .compiler import PDFCompiler, render_pdf
from .objects import PdfObject, PdfStream
from .resources import PdfFont, PdfFontRegistry
from .text_renderer import PdfTextRenderer, render_page_stream
from .writer import PdfWriter, read_xref_offsets, verify_xref

__all__ = [
    "PDFCompiler",
    "PdfFont",
    "PdfFontRegistry",
    "PdfObject",
    "PdfStream",
    "PdfTextRenderer",
    "PdfWriter",
    "read_xref_offsets",
    "render_page_stream",
    "render_pdf",
    "verify_xref",
]
