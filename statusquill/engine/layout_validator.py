"""

Layout Validator - paginated report validation.

Checks:
- whether pages exist and none of them is empty
- whether pages stay within the height budget
- whether a single line is taller than the whole page
- whether measured line widths run past the right page edge

"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..config import ReportOptions
from ..exceptions import LayoutError
from ..models import LayoutPage
from .pagination_manager import line_height
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)


class LayoutValidator:
    """Layout validator - checks paginated pages against report options."""

    def __init__(
        self,
        pages: Sequence[LayoutPage],
        options: Optional[ReportOptions] = None,
        metrics: Optional[TextMetricsEngine] = None,
    ):
        self.pages = list(pages)
        self.options = options or ReportOptions()
        self.metrics = metrics or TextMetricsEngine(self.options)
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate(self) -> Tuple[bool, List[str], List[str]]:
        """

        Performs full layout validation.

        Returns:
        Tuple (is_valid, errors, warnings)

        """
        self.errors.clear()
        self.warnings.clear()

        self._validate_pages_exist()
        self._validate_page_numbers()
        self._validate_page_heights()
        self._validate_line_widths()

        for warning in self.warnings:
            logger.warning(warning)
        return not self.errors, self.errors.copy(), self.warnings.copy()

    def raise_for_errors(self) -> None:
        is_valid, errors, _ = self.validate()
        if not is_valid:
            raise LayoutError("Layout validation failed", "; ".join(errors))

    def _validate_pages_exist(self) -> None:
        if not self.pages:
            self.warnings.append("Layout contains no pages")
        for page in self.pages:
            if not page.lines:
                self.errors.append(f"Page {page.number} contains no lines")

    def _validate_page_numbers(self) -> None:
        for expected, page in enumerate(self.pages, start=1):
            if page.number != expected:
                self.errors.append(f"Page {page.number} found at position {expected}")

    def _validate_page_heights(self) -> None:
        budget = self.options.max_page_height
        leading = self.options.line_leading
        for page in self.pages:
            heights = [line_height(line, leading) for line in page.lines]
            total = sum(heights)
            if total <= budget:
                continue
            if len(heights) == 1:
                self.warnings.append(
                    f"Page {page.number}: single line of height {total:.1f}pt exceeds budget {budget:.1f}pt"
                )
            else:
                self.errors.append(
                    f"Page {page.number}: content height {total:.1f}pt exceeds budget {budget:.1f}pt"
                )

    def _validate_line_widths(self) -> None:
        available = self.metrics.available_width
        for page in self.pages:
            for index, line in enumerate(page.lines, start=1):
                width = self.metrics.measure_line(line)
                if width > available:
                    self.warnings.append(
                        f"Page {page.number}, line {index}: width {width:.1f}pt overflows "
                        f"available {available:.1f}pt"
                    )
