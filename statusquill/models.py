"""Value types shared by the layout engine and the PDF compiler."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import StyleError


class FontWeight(str, Enum):
    """Font weights available to report lines."""

    REGULAR = "regular"
    BOLD = "bold"

    @classmethod
    def from_value(cls, value: Union["FontWeight", str, None]) -> "FontWeight":
        if value is None:
            return cls.REGULAR
        if isinstance(value, FontWeight):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise StyleError("Unknown font weight", repr(value)) from None


def _require_finite(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise StyleError(f"{name} must be a number", repr(value)) from None
    if not math.isfinite(number):
        raise StyleError(f"{name} must be finite", repr(value))
    return number


@dataclass(frozen=True, slots=True)
class Color:
    """RGB fill color with every component in the closed range [0, 1]."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = _require_finite(f"color.{name}", getattr(self, name))
            if not 0.0 <= value <= 1.0:
                raise StyleError(f"color.{name} outside [0, 1]", repr(value))
            object.__setattr__(self, name, value)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """Build a color from ``#RRGGBB`` (or ``#RGB``) notation."""
        digits = hex_color.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            raise StyleError("Invalid hex color", repr(hex_color))
        try:
            r, g, b = (int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
        except ValueError:
            raise StyleError("Invalid hex color", repr(hex_color)) from None
        return cls(round(r, 4), round(g, 4), round(b, 4))

    @classmethod
    def from_value(cls, value: Union["Color", str, Sequence[float], None]) -> "Color":
        if value is None:
            return DEFAULT_COLOR
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return cls(*value)
        raise StyleError("Color must be an (r, g, b) triple or hex string", repr(value))


BLACK = Color(0.0, 0.0, 0.0)
DEFAULT_COLOR = Color(0.15, 0.15, 0.18)

# Smallest size that survives three-decimal number formatting.
MIN_FONT_SIZE = 0.001


def check_font_size(value: Any) -> float:
    size = _require_finite("size", value)
    if size <= 0:
        raise StyleError("size must be positive", repr(value))
    if size < MIN_FONT_SIZE:
        raise StyleError(f"size below {MIN_FONT_SIZE}pt", repr(value))
    return size


@dataclass(frozen=True, slots=True)
class StyledLine:
    """A logical report line before word wrapping.

    ``color`` and ``size`` left as None take the report's
    ``default_color`` and ``default_size`` when the line is wrapped.
    """

    text: str
    color: Optional[Color] = None
    weight: FontWeight = FontWeight.REGULAR
    size: Optional[float] = None
    gap_before: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", "" if self.text is None else str(self.text))
        if self.color is not None:
            object.__setattr__(self, "color", Color.from_value(self.color))
        object.__setattr__(self, "weight", FontWeight.from_value(self.weight))
        if self.size is not None:
            object.__setattr__(self, "size", check_font_size(self.size))
        gap = _require_finite("gap_before", self.gap_before)
        if gap < 0:
            raise StyleError("gap_before must not be negative", repr(self.gap_before))
        object.__setattr__(self, "gap_before", gap)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StyledLine":
        """Build a line from JSON-style data.

        Accepts ``font`` as an alias of ``weight`` and ``gapBefore`` as an
        alias of ``gap_before``. Unknown keys are rejected.
        """
        aliases = {"font": "weight", "gapBefore": "gap_before"}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name not in cls.__dataclass_fields__:
                raise StyleError("Unknown line field", repr(key))
            if value is not None:
                kwargs[name] = value
        if "text" not in kwargs:
            raise StyleError("Line is missing 'text'")
        return cls(**kwargs)


@dataclass(frozen=True, slots=True)
class WrappedLine:
    """A fragment of a :class:`StyledLine` that is never split further."""

    text: str
    color: Color = DEFAULT_COLOR
    weight: FontWeight = FontWeight.REGULAR
    size: float = 11.0
    gap_before: float = 0.0

    @classmethod
    def from_styled(
        cls,
        line: StyledLine,
        text: str,
        gap_before: float,
        *,
        default_color: Color = DEFAULT_COLOR,
        default_size: float = 11.0,
    ) -> "WrappedLine":
        return cls(
            text=text,
            color=default_color if line.color is None else line.color,
            weight=line.weight,
            size=default_size if line.size is None else line.size,
            gap_before=gap_before,
        )

    @property
    def is_bold(self) -> bool:
        return self.weight is FontWeight.BOLD


@dataclass(frozen=True, slots=True)
class LayoutPage:
    """One output page: a non-empty run of wrapped lines."""

    number: int
    lines: Tuple[WrappedLine, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[WrappedLine]:
        return iter(self.lines)
