"""In-memory PDF objects prior to serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

OBJECT_ENCODING = "latin-1"


@dataclass
class PdfStream:
    """Accumulates content-stream operators, one per line."""

    commands: List[str] = field(default_factory=list)

    def add(self, command: str) -> None:
        self.commands.append(command)

    def to_bytes(self) -> bytes:
        return "\n".join(self.commands).encode(OBJECT_ENCODING)


@dataclass
class PdfObject:
    """A numbered ``N 0 obj ... endobj`` unit, optionally carrying a stream."""

    number: int
    dictionary: str
    stream: Optional[bytes] = None

    @classmethod
    def from_stream(cls, number: int, stream: PdfStream) -> "PdfObject":
        data = stream.to_bytes()
        return cls(number=number, dictionary=f"<< /Length {len(data)} >>", stream=data)

    def to_bytes(self) -> bytes:
        parts = [f"{self.number} 0 obj\n{self.dictionary}\n".encode(OBJECT_ENCODING)]
        if self.stream is not None:
            parts.append(b"stream\n")
            parts.append(self.stream)
            parts.append(b"\nendstream\n")
        parts.append(b"endobj\n")
        return b"".join(parts)
