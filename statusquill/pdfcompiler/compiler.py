"""Main PDF compiler - converts paginated report lines to PDF bytes."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from ..config import ReportOptions
from ..engine.line_breaker import LineBreaker
from ..engine.pagination_manager import PaginationManager
from ..exceptions import CompilationError
from ..models import LayoutPage, StyledLine
from .objects import PdfObject
from .resources import PdfFontRegistry
from .text_renderer import PdfTextRenderer
from .utils import format_pdf_array, format_pdf_dict, format_pdf_number, pdf_ref
from .writer import PdfWriter, verify_xref

logger = logging.getLogger(__name__)

CATALOG_OBJ = 1
PAGES_OBJ = 2
REGULAR_FONT_OBJ = 3
BOLD_FONT_OBJ = 4
FIRST_PAGE_OBJ = 5


def page_object_num(index: int) -> int:
    return FIRST_PAGE_OBJ + index


def content_object_num(index: int, page_count: int) -> int:
    return FIRST_PAGE_OBJ + page_count + index


class PDFCompiler:
    """Main compiler that converts layout pages to a PDF 1.4 byte buffer.

    Object numbers are fixed: 1 catalog, 2 page tree, 3 and 4 the regular and
    bold fonts, then every page object followed by every content stream,
    paired index for index.
    """

    def __init__(self, options: Optional[ReportOptions] = None):
        self.options = options or ReportOptions()
        self.line_breaker = LineBreaker(options=self.options)
        self.pagination = PaginationManager(options=self.options)

    def layout(self, lines: Iterable[StyledLine]) -> List[LayoutPage]:
        """Wrap and paginate ``lines``."""
        return self.pagination.paginate(self.line_breaker.break_lines(lines))

    def compile_lines(self, lines: Iterable[StyledLine]) -> Optional[bytes]:
        return self.assemble(self.layout(lines))

    def assemble(self, pages: Sequence[LayoutPage]) -> Optional[bytes]:
        """Serialize ``pages`` into a complete PDF document.

        Args:
            pages: Paginated lines, in output order

        Returns:
            PDF bytes, or None when there are no pages

        Raises:
            CompilationError: If the assembled xref fails the self-check
        """
        if not pages:
            logger.info("No pages to assemble; no document produced")
            return None

        page_count = len(pages)
        fonts = PdfFontRegistry(self.options, first_object_num=REGULAR_FONT_OBJ)
        renderer = PdfTextRenderer(fonts, self.options)
        writer = PdfWriter()

        writer.write_header()
        writer.write_object(PdfObject(
            CATALOG_OBJ,
            format_pdf_dict({"Type": "/Catalog", "Pages": pdf_ref(PAGES_OBJ)}),
        ))
        kids = [pdf_ref(page_object_num(index)) for index in range(page_count)]
        writer.write_object(PdfObject(
            PAGES_OBJ,
            format_pdf_dict({"Type": "/Pages", "Kids": format_pdf_array(kids), "Count": str(page_count)}),
        ))
        for font in fonts.fonts():
            writer.write_object(font.to_object())

        media_box = format_pdf_array(format_pdf_number(value) for value in self.options.media_box)
        resources = fonts.get_resources_dict()
        for index in range(page_count):
            writer.write_object(PdfObject(
                page_object_num(index),
                format_pdf_dict({
                    "Type": "/Page",
                    "Parent": pdf_ref(PAGES_OBJ),
                    "MediaBox": media_box,
                    "Contents": pdf_ref(content_object_num(index, page_count)),
                    "Resources": resources,
                }),
            ))

        for index, page in enumerate(pages):
            stream = renderer.render_page(page)
            writer.write_object(PdfObject.from_stream(content_object_num(index, page_count), stream))

        writer.write_xref_and_trailer(root=CATALOG_OBJ)
        data = writer.getvalue()

        if self.options.verify_output:
            mismatched = verify_xref(data)
            if mismatched:
                raise CompilationError("Xref offsets do not match objects", ", ".join(map(str, mismatched)))

        logger.debug("Assembled %d pages into %d bytes", page_count, len(data))
        return data


def render_pdf(lines: Iterable[StyledLine], options: Optional[ReportOptions] = None) -> Optional[bytes]:
    """Wrap, paginate and assemble ``lines``; None when nothing is printable."""
    return PDFCompiler(options).compile_lines(lines)
