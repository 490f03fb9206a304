"""

Pagination Manager for wrapped report lines.

Handles:
- estimating the height each line occupies
- greedy grouping of lines into fixed-height pages
- placing a line taller than the whole budget alone on its own page

"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..config import ReportOptions
from ..exceptions import ConfigurationError
from ..models import LayoutPage, WrappedLine

logger = logging.getLogger(__name__)


def line_height(line: WrappedLine, leading: float = 3.0) -> float:
    """Estimated vertical space of ``line``: size, leading and its gap."""
    return line.size + leading + line.gap_before


class PaginationManager:
    """Greedily fills pages until the next line would overflow the budget."""

    def __init__(self, max_height: Optional[float] = None, *, options: Optional[ReportOptions] = None) -> None:
        self.options = options or ReportOptions()
        self.max_height = self.options.max_page_height if max_height is None else float(max_height)
        if self.max_height <= 0:
            raise ConfigurationError("max_height must be positive", repr(self.max_height))

    def height_of(self, line: WrappedLine) -> float:
        return line_height(line, self.options.line_leading)

    def paginate(self, lines: Sequence[WrappedLine]) -> List[LayoutPage]:
        pages: List[LayoutPage] = []
        current: List[WrappedLine] = []
        current_height = 0.0

        for line in lines:
            height = self.height_of(line)
            if current_height + height > self.max_height and current:
                pages.append(LayoutPage(number=len(pages) + 1, lines=tuple(current)))
                current = []
                current_height = 0.0
            if height > self.max_height:
                logger.warning(
                    "Line of height %.1fpt exceeds page budget %.1fpt; placing it on its own page",
                    height,
                    self.max_height,
                )
            current.append(line)
            current_height += height

        if current:
            pages.append(LayoutPage(number=len(pages) + 1, lines=tuple(current)))

        logger.debug("Paginated %d lines into %d pages", len(lines), len(pages))
        return pages


def paginate(lines: Sequence[WrappedLine], max_height: float = 740.0) -> List[LayoutPage]:
    """Group ``lines`` into pages whose estimated height fits ``max_height``."""
    return PaginationManager(max_height).paginate(lines)
