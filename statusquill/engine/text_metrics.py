"""

TextMetricsEngine - measuring rendered line width.

Uses ReportLab's AFM metrics for the standard Helvetica faces. Only the
metrics are used; the PDF itself is written by :mod:`statusquill.pdfcompiler`.

"""

from __future__ import annotations

from typing import Dict, Optional

from reportlab.pdfbase import pdfmetrics

from ..config import ReportOptions
from ..models import FontWeight, WrappedLine


class TextMetricsEngine:
    """Engine for calculating text widths in points."""

    def __init__(self, options: Optional[ReportOptions] = None):
        self.options = options or ReportOptions()
        self._fonts: Dict[FontWeight, str] = {
            FontWeight.REGULAR: self.options.regular_font,
            FontWeight.BOLD: self.options.bold_font,
        }

    def font_name(self, weight: FontWeight) -> str:
        return self._fonts[weight]

    def measure_text(self, text: str, weight: FontWeight = FontWeight.REGULAR, size: float = 11.0) -> float:
        """Width of ``text`` set in the font for ``weight`` at ``size`` points."""
        if not text:
            return 0.0
        return float(pdfmetrics.stringWidth(text, self.font_name(weight), size))

    def measure_line(self, line: WrappedLine) -> float:
        return self.measure_text(line.text, line.weight, line.size)

    @property
    def available_width(self) -> float:
        """Horizontal room between the left margin and the page edge."""
        return self.options.page_width - self.options.left_margin
