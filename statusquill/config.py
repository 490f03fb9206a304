"""Report options.

The defaults are tuned for 11pt Helvetica on a US-Letter canvas:

- ``wrap_limit``: character budget per physical line
- ``max_page_height``: estimated content height allowed per page
- ``top_padding_lines``: blank lines reserved above the first baseline
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

from reportlab.pdfbase.pdfmetrics import standardFonts

from .exceptions import ConfigurationError, StyleError
from .models import Color, DEFAULT_COLOR, MIN_FONT_SIZE


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """Immutable layout and output options."""

    wrap_limit: int = 86
    max_page_height: float = 740.0
    top_padding_lines: int = 2
    padding_line_height: float = 14.0
    line_leading: float = 3.0
    page_width: float = 612.0
    page_height: float = 792.0
    left_margin: float = 50.0
    top_offset: float = 5.0
    default_size: float = 11.0
    default_color: Color = DEFAULT_COLOR
    regular_font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    verify_output: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.wrap_limit, int) or self.wrap_limit <= 0:
            raise ConfigurationError("wrap_limit must be a positive integer", repr(self.wrap_limit))
        if not isinstance(self.top_padding_lines, int) or self.top_padding_lines < 0:
            raise ConfigurationError(
                "top_padding_lines must be a non-negative integer", repr(self.top_padding_lines)
            )
        for name in ("max_page_height", "padding_line_height", "page_width", "page_height", "default_size"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ConfigurationError(f"{name} must be positive", repr(value))
        for name in ("line_leading", "left_margin", "top_offset"):
            value = getattr(self, name)
            if not _is_number(value) or value < 0:
                raise ConfigurationError(f"{name} must not be negative", repr(value))
        if not isinstance(self.default_color, Color):
            raise ConfigurationError("default_color must be a Color", repr(self.default_color))
        if self.default_size < MIN_FONT_SIZE:
            raise ConfigurationError(f"default_size below {MIN_FONT_SIZE}pt", repr(self.default_size))
        for name in ("regular_font", "bold_font"):
            value = getattr(self, name)
            if value not in standardFonts:
                raise ConfigurationError(f"{name} must be one of the standard 14 PDF fonts", repr(value))

    @property
    def start_y(self) -> float:
        """Baseline of the first line on every page."""
        return self.page_height - self.top_offset - self.top_padding_lines * self.padding_line_height

    @property
    def media_box(self) -> Tuple[float, float, float, float]:
        return (0.0, 0.0, self.page_width, self.page_height)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["default_color"] = list(self.default_color.as_tuple())
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReportOptions":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError("Unknown report options", ", ".join(unknown))
        kwargs = dict(data)
        if "default_color" in kwargs:
            try:
                kwargs["default_color"] = Color.from_value(kwargs["default_color"])
            except StyleError as exc:
                raise ConfigurationError("Invalid default_color", str(exc)) from exc
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ReportOptions":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Cannot read options file {path}", str(exc)) from exc
        if not isinstance(data, dict):
            raise ConfigurationError("Options file must contain a JSON object", str(path))
        return cls.from_dict(data)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
