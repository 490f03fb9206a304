"""Greedy word wrapping of styled report lines."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..config import ReportOptions
from ..exceptions import ConfigurationError
from ..models import StyledLine, WrappedLine
from .sanitizer import sanitize

logger = logging.getLogger(__name__)


class LineBreaker:
    """Splits a logical line into fragments bounded by a character budget.

    Tokens are never split: a single token longer than the budget becomes its
    own over-length fragment.
    """

    def __init__(self, limit: Optional[int] = None, *, options: Optional[ReportOptions] = None) -> None:
        self.options = options or ReportOptions()
        self.limit = self.options.wrap_limit if limit is None else limit
        if self.limit <= 0:
            raise ConfigurationError("limit must be positive", repr(self.limit))

    def break_line(self, line: StyledLine) -> List[WrappedLine]:
        safe = sanitize(line.text)
        if not safe:
            return []

        fragments: List[WrappedLine] = []
        gap = line.gap_before
        current = ""

        for word in safe.split():
            candidate = f"{current} {word}" if current else word
            if len(candidate) > self.limit and current:
                fragments.append(self._fragment(line, current, gap))
                gap = 0.0
                current = word
            else:
                current = candidate

        if current:
            fragments.append(self._fragment(line, current, gap))

        if len(fragments) > 1:
            logger.debug("Wrapped %d chars into %d fragments (limit=%d)", len(safe), len(fragments), self.limit)
        return fragments

    def _fragment(self, line: StyledLine, text: str, gap: float) -> WrappedLine:
        return WrappedLine.from_styled(
            line,
            text,
            gap,
            default_color=self.options.default_color,
            default_size=self.options.default_size,
        )

    def break_lines(self, lines: Iterable[StyledLine]) -> List[WrappedLine]:
        wrapped: List[WrappedLine] = []
        for line in lines:
            wrapped.extend(self.break_line(line))
        return wrapped


def wrap_line(line: StyledLine, limit: int = 86) -> List[WrappedLine]:
    """Wrap one line with the given character budget."""
    return LineBreaker(limit).break_line(line)
