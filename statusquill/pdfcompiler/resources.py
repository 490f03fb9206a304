"""Font resources for the report PDF."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config import ReportOptions
from ..models import FontWeight
from .objects import PdfObject
from .utils import format_pdf_dict, pdf_ref


@dataclass(frozen=True)
class PdfFont:
    """Represents a standard Type1 font resource."""

    name: str  # BaseFont, e.g. "Helvetica-Bold"
    alias: str  # Resource name, e.g. "/F2"
    weight: FontWeight
    object_num: int

    def to_object(self) -> PdfObject:
        return PdfObject(
            number=self.object_num,
            dictionary=format_pdf_dict({"Type": "/Font", "Subtype": "/Type1", "BaseFont": f"/{self.name}"}),
        )


class PdfFontRegistry:
    """Registry of the two report fonts.

    The regular face is always ``/F1`` and the bold face ``/F2``; they occupy
    consecutive object numbers starting at ``first_object_num``.
    """

    def __init__(self, options: Optional[ReportOptions] = None, first_object_num: int = 3):
        options = options or ReportOptions()
        self._fonts: Dict[FontWeight, PdfFont] = {
            FontWeight.REGULAR: PdfFont(options.regular_font, "/F1", FontWeight.REGULAR, first_object_num),
            FontWeight.BOLD: PdfFont(options.bold_font, "/F2", FontWeight.BOLD, first_object_num + 1),
        }

    def font_for(self, weight: FontWeight) -> PdfFont:
        return self._fonts[weight]

    @property
    def regular(self) -> PdfFont:
        return self._fonts[FontWeight.REGULAR]

    def fonts(self) -> List[PdfFont]:
        """Fonts in ascending object-number order."""
        return sorted(self._fonts.values(), key=lambda font: font.object_num)

    def get_resources_dict(self) -> str:
        """``/Resources`` dictionary shared by every page."""
        font_dict = format_pdf_dict({font.alias[1:]: pdf_ref(font.object_num) for font in self.fonts()})
        return format_pdf_dict({"Font": font_dict})
