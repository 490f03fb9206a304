"""Single-pass PDF file writer with xref bookkeeping."""

from __future__ import annotations

import logging
from typing import Dict, List

from ..exceptions import CompilationError
from .objects import PdfObject

logger = logging.getLogger(__name__)

PDF_HEADER = b"%PDF-1.4\n"
FREE_ENTRY = b"0000000000 65535 f \n"


class PdfWriter:
    """Appends objects to one growing buffer, recording where each begins.

    Offsets are taken from the buffer length at the moment an object starts,
    so the xref table never needs a second scan of the output.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._offsets: Dict[int, int] = {}
        self._finished = False

    def tell(self) -> int:
        return len(self._buffer)

    @property
    def offsets(self) -> Dict[int, int]:
        return dict(self._offsets)

    def write_header(self) -> None:
        if self._buffer:
            raise CompilationError("PDF header must be written first")
        self._buffer.extend(PDF_HEADER)

    def write_object(self, obj: PdfObject) -> int:
        """Append ``obj`` and return the offset it was written at."""
        if self._finished:
            raise CompilationError("Cannot write objects after the trailer")
        if not self._buffer:
            raise CompilationError("PDF header has not been written")
        if obj.number in self._offsets:
            raise CompilationError("Object written twice", str(obj.number))
        offset = self.tell()
        self._offsets[obj.number] = offset
        self._buffer.extend(obj.to_bytes())
        logger.debug("Object %d at offset %d", obj.number, offset)
        return offset

    def write_xref_and_trailer(self, root: int) -> int:
        """Write the xref table and trailer; return the ``startxref`` offset."""
        if self._finished:
            raise CompilationError("Trailer already written")
        size = len(self._offsets) + 1
        missing = [num for num in range(1, size) if num not in self._offsets]
        if missing:
            raise CompilationError("Object numbers are not contiguous", ", ".join(map(str, missing)))
        if root not in self._offsets:
            raise CompilationError("Root object was never written", str(root))

        xref_start = self.tell()
        self._buffer.extend(f"xref\n0 {size}\n".encode("ascii"))
        self._buffer.extend(FREE_ENTRY)
        for num in range(1, size):
            self._buffer.extend(f"{self._offsets[num]:010d} 00000 n \n".encode("ascii"))
        self._buffer.extend(
            f"trailer\n<< /Size {size} /Root {root} 0 R >>\nstartxref\n{xref_start}\n%%EOF".encode("ascii")
        )
        self._finished = True
        return xref_start

    def getvalue(self) -> bytes:
        if not self._finished:
            raise CompilationError("PDF is incomplete; write the trailer first")
        return bytes(self._buffer)


def read_xref_offsets(data: bytes) -> Dict[int, int]:
    """Return ``{object number: offset}`` for in-use entries of the xref table."""
    marker = data.rfind(b"startxref")
    if marker < 0:
        raise CompilationError("Missing startxref")
    tail = data[marker + len(b"startxref"):].split()
    try:
        xref_start = int(tail[0])
    except (IndexError, ValueError):
        raise CompilationError("Malformed startxref") from None
    if data[xref_start:xref_start + 4] != b"xref":
        raise CompilationError("startxref does not point at an xref table", str(xref_start))

    lines = data[xref_start:marker].splitlines()[1:]
    offsets: Dict[int, int] = {}
    index = 0
    while index < len(lines):
        header = lines[index].split()
        if not header:
            index += 1
            continue
        if header[0] == b"trailer":
            break
        try:
            first, count = int(header[0]), int(header[1])
            for entry_num in range(count):
                offset, _generation, flag = lines[index + 1 + entry_num].split()
                if flag == b"n":
                    offsets[first + entry_num] = int(offset)
        except (IndexError, ValueError):
            raise CompilationError("Malformed xref table", repr(lines[index])) from None
        index += 1 + count
    return offsets


def verify_xref(data: bytes) -> List[int]:
    """Object numbers whose recorded offset does not start with ``N 0 obj``."""
    mismatched = []
    for num, offset in sorted(read_xref_offsets(data).items()):
        if not data.startswith(f"{num} 0 obj".encode("ascii"), offset):
            mismatched.append(num)
    return mismatched
