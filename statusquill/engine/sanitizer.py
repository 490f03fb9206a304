"""Lossy normalization of report text to the printable ASCII range."""

import re

_UNPRINTABLE = re.compile(r"[^\x20-\x7E]")


def sanitize(text: str) -> str:
    """Return ``text`` reduced to single-byte printable characters.

    Carriage returns are dropped, tabs become a single space and every other
    character outside ``0x20-0x7E`` becomes ``?``. Surrounding whitespace is
    trimmed.
    """
    if not text:
        return ""
    text = text.replace("\r", "").replace("\t", " ")
    return _UNPRINTABLE.sub("?", text).strip()
