"""Utility functions for PDF generation."""

from typing import Mapping, Tuple


def escape_pdf_string(text: str) -> str:
    """Escape special characters in PDF strings.

    Args:
        text: Input string (will be converted to str if not already)

    Returns:
        Escaped string for PDF
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    # Backslash first so the escapes added below are not doubled.
    replacements = {
        "\\": "\\\\",
        "(": "\\(",
        ")": "\\)",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }

    result = text
    for char, escaped in replacements.items():
        result = result.replace(char, escaped)

    return result


def format_pdf_number(value: float) -> str:
    """Format number for PDF (limit decimal places).

    Args:
        value: Numeric value

    Returns:
        Formatted string
    """
    result = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if result == "-0" else result


def format_rgb(color: Tuple[float, float, float], operator: str = "rg") -> str:
    """Format an RGB triple followed by a color operator."""
    r, g, b = color
    return f"{format_pdf_number(r)} {format_pdf_number(g)} {format_pdf_number(b)} {operator}"


def pdf_ref(object_num: int) -> str:
    """Indirect reference to generation 0 of ``object_num``."""
    return f"{object_num} 0 R"


def format_pdf_dict(entries: Mapping[str, str]) -> str:
    """Serialize ``entries`` as a PDF dictionary, keeping insertion order."""
    body = " ".join(f"/{key} {value}" for key, value in entries.items())
    return f"<< {body} >>"


def format_pdf_array(items) -> str:
    return "[" + " ".join(str(item) for item in items) + "]"
