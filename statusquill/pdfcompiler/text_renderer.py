"""Text renderer for PDF - turns one page of lines into content-stream operators."""

from __future__ import annotations

from typing import Optional

from ..config import ReportOptions
from ..engine.sanitizer import sanitize
from ..exceptions import ConfigurationError
from ..models import BLACK, LayoutPage, WrappedLine
from .objects import PdfStream
from .resources import PdfFontRegistry
from .utils import escape_pdf_string, format_pdf_number, format_rgb


class PdfTextRenderer:
    """Renders wrapped lines top to bottom inside a single ``BT``/``ET`` block."""

    def __init__(self, font_registry: Optional[PdfFontRegistry] = None, options: Optional[ReportOptions] = None):
        """Initialize text renderer.

        Args:
            font_registry: Registry providing the ``/F1`` and ``/F2`` aliases
            options: Page geometry and defaults
        """
        self.options = options or ReportOptions()
        self.font_registry = font_registry or PdfFontRegistry(self.options)

    def start_y(self, top_padding_lines: Optional[int] = None) -> float:
        if top_padding_lines is None:
            return self.options.start_y
        if top_padding_lines < 0:
            raise ConfigurationError("top_padding_lines must not be negative", repr(top_padding_lines))
        return self.options.page_height - self.options.top_offset - top_padding_lines * self.options.padding_line_height

    def render_page(self, page: LayoutPage, top_padding_lines: Optional[int] = None) -> PdfStream:
        """Render all lines of ``page``.

        Args:
            page: Page to render
            top_padding_lines: Blank lines reserved above the first baseline
                (defaults to ``options.top_padding_lines``)

        Returns:
            Content stream with the page's text operators
        """
        options = self.options
        stream = PdfStream()
        stream.add("BT")
        stream.add(f"{self.font_registry.regular.alias} {format_pdf_number(options.default_size)} Tf")
        stream.add(format_rgb(BLACK.as_tuple()))
        stream.add(f"{format_pdf_number(options.left_margin)} {format_pdf_number(self.start_y(top_padding_lines))} Td")

        previous: Optional[WrappedLine] = None
        for line in page.lines:
            if previous is None:
                stream.add("0 0 Td")
            else:
                move = previous.size + options.line_leading + line.gap_before
                stream.add(f"0 {format_pdf_number(-move)} Td")
            self.render_line(stream, line)
            previous = line

        stream.add("ET")
        return stream

    def render_line(self, stream: PdfStream, line: WrappedLine) -> None:
        font = self.font_registry.font_for(line.weight)
        stream.add(format_rgb(line.color.as_tuple()))
        stream.add(f"{font.alias} {format_pdf_number(line.size)} Tf")
        stream.add(f"({escape_pdf_string(sanitize(line.text))}) Tj")


def render_page_stream(
    page: LayoutPage,
    top_padding_lines: Optional[int] = None,
    options: Optional[ReportOptions] = None,
) -> bytes:
    """Content-stream bytes for ``page``."""
    return PdfTextRenderer(options=options).render_page(page, top_padding_lines).to_bytes()
