"""Layout engine: sanitizing, wrapping, paginating and validating report lines."""

from .layout_validator import LayoutValidator
from .line_breaker import LineBreaker, wrap_line
from .pagination_manager import PaginationManager, line_height, paginate
from .sanitizer import sanitize
from .text_metrics import TextMetricsEngine

__all__ = [
    "LayoutValidator",
    "LineBreaker",
    "PaginationManager",
    "TextMetricsEngine",
    "line_height",
    "paginate",
    "sanitize",
    "wrap_line",
]
