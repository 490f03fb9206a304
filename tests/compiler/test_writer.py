"""Tests for the single-pass PDF writer and xref inspection."""

import pytest

from statusquill.exceptions import CompilationError
from statusquill.pdfcompiler.objects import PdfObject, PdfStream
from statusquill.pdfcompiler.writer import PdfWriter, read_xref_offsets, verify_xref


def _write(objects, root=1):
    writer = PdfWriter()
    writer.write_header()
    for obj in objects:
        writer.write_object(obj)
    writer.write_xref_and_trailer(root=root)
    return writer


class TestPdfObject:
    """Test suite for PdfObject serialization."""

    def test_dictionary_object(self):
        obj = PdfObject(1, "<< /Type /Catalog /Pages 2 0 R >>")
        assert obj.to_bytes() == b"1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n"

    def test_stream_object_length(self):
        stream = PdfStream(["BT", "(Hi) Tj", "ET"])
        obj = PdfObject.from_stream(6, stream)
        assert obj.dictionary == "<< /Length 13 >>"
        assert obj.to_bytes() == b"6 0 obj\n<< /Length 13 >>\nstream\nBT\n(Hi) Tj\nET\nendstream\nendobj\n"


class TestPdfWriter:
    """Test suite for PdfWriter."""

    def test_offsets_recorded_when_objects_start(self):
        first = PdfObject(1, "<< /Type /Catalog /Pages 2 0 R >>")
        second = PdfObject(2, "<< /Type /Pages /Kids [] /Count 0 >>")
        writer = _write([first, second])
        assert writer.offsets == {1: 9, 2: 9 + len(first.to_bytes())}

    def test_xref_layout(self):
        writer = _write([PdfObject(1, "<< /Type /Catalog >>")])
        data = writer.getvalue()
        xref_start = data.index(b"xref\n")
        assert data[xref_start:] == (
            b"xref\n0 2\n"
            b"0000000000 65535 f \n"
            b"0000000009 00000 n \n"
            b"trailer\n<< /Size 2 /Root 1 0 R >>\nstartxref\n"
            + str(xref_start).encode()
            + b"\n%%EOF"
        )

    def test_xref_entries_are_twenty_bytes(self):
        data = _write([PdfObject(n, "<< >>") for n in (1, 2, 3)]).getvalue()
        table = data[data.index(b"xref\n"):data.index(b"trailer")]
        entries = table.split(b"\n", 2)[2]
        assert len(entries) == 4 * 20

    def test_header_must_come_first(self):
        writer = PdfWriter()
        with pytest.raises(CompilationError):
            writer.write_object(PdfObject(1, "<< >>"))

    def test_duplicate_object_rejected(self):
        writer = PdfWriter()
        writer.write_header()
        writer.write_object(PdfObject(1, "<< >>"))
        with pytest.raises(CompilationError, match="twice"):
            writer.write_object(PdfObject(1, "<< >>"))

    def test_gaps_in_numbering_rejected(self):
        writer = PdfWriter()
        writer.write_header()
        writer.write_object(PdfObject(1, "<< >>"))
        writer.write_object(PdfObject(3, "<< >>"))
        with pytest.raises(CompilationError, match="contiguous"):
            writer.write_xref_and_trailer(root=1)

    def test_incomplete_document_has_no_value(self):
        writer = PdfWriter()
        writer.write_header()
        with pytest.raises(CompilationError):
            writer.getvalue()

    def test_no_writes_after_trailer(self):
        writer = _write([PdfObject(1, "<< >>")])
        with pytest.raises(CompilationError):
            writer.write_object(PdfObject(2, "<< >>"))


class TestXrefInspection:
    """Test suite for read_xref_offsets() and verify_xref()."""

    def test_round_trip_offsets(self):
        writer = _write([PdfObject(n, f"<< /N {n} >>") for n in range(1, 13)])
        assert read_xref_offsets(writer.getvalue()) == writer.offsets
        assert verify_xref(writer.getvalue()) == []

    def test_detects_shifted_offsets(self):
        writer = _write([PdfObject(1, "<< >>"), PdfObject(2, "<< >>")])
        data = writer.getvalue()
        offset = writer.offsets[2]
        good = f"{offset:010d} 00000 n \n".encode()
        bad = f"{offset + 1:010d} 00000 n \n".encode()
        assert verify_xref(data.replace(good, bad)) == [2]

    def test_object_eleven_not_mistaken_for_one(self):
        data = _write([PdfObject(n, "<< >>") for n in range(1, 12)]).getvalue()
        offsets = read_xref_offsets(data)
        assert not data.startswith(b"1 0 obj", offsets[11])

    def test_missing_startxref(self):
        with pytest.raises(CompilationError, match="startxref"):
            read_xref_offsets(b"%PDF-1.4\n1 0 obj\n<< >>\nendobj\n")

    def test_startxref_not_pointing_at_xref(self):
        with pytest.raises(CompilationError):
            read_xref_offsets(b"%PDF-1.4\nstartxref\n3\n%%EOF")
