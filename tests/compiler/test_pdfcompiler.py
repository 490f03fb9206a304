"""Tests for PDF document assembly."""

import io
import re

import pytest
from pypdf import PdfReader

from statusquill import render_pdf
from statusquill.config import ReportOptions
from statusquill.models import Color, FontWeight, LayoutPage, StyledLine, WrappedLine
from statusquill.pdfcompiler.compiler import PDFCompiler, content_object_num, page_object_num
from statusquill.pdfcompiler.writer import read_xref_offsets, verify_xref

HELLO_STREAM = (
    b"BT\n/F1 11 Tf\n0 0 0 rg\n50 759 Td\n0 0 Td\n0.15 0.15 0.18 rg\n/F1 11 Tf\n(Hello) Tj\nET"
)


def _pages(*counts):
    return [
        LayoutPage(number, tuple(WrappedLine(f"page {number} line {i}") for i in range(count)))
        for number, count in enumerate(counts, start=1)
    ]


class TestAssemble:
    """Test suite for PDFCompiler.assemble()."""

    def test_empty_input_is_absent(self):
        assert PDFCompiler().assemble([]) is None
        assert render_pdf([]) is None

    def test_only_blank_lines_is_absent(self):
        assert render_pdf([StyledLine("   "), StyledLine("\t\r")]) is None

    def test_hello_document_is_byte_exact(self):
        objects = [
            b"1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n",
            b"2 0 obj\n<< /Type /Pages /Kids [5 0 R] /Count 1 >>\nendobj\n",
            b"3 0 obj\n<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>\nendobj\n",
            b"4 0 obj\n<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica-Bold >>\nendobj\n",
            b"5 0 obj\n<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 6 0 R "
            b"/Resources << /Font << /F1 3 0 R /F2 4 0 R >> >> >>\nendobj\n",
            b"6 0 obj\n<< /Length " + str(len(HELLO_STREAM)).encode() + b" >>\nstream\n"
            + HELLO_STREAM + b"\nendstream\nendobj\n",
        ]
        expected = bytearray(b"%PDF-1.4\n")
        offsets = []
        for obj in objects:
            offsets.append(len(expected))
            expected.extend(obj)
        xref_start = len(expected)
        expected.extend(b"xref\n0 7\n0000000000 65535 f \n")
        for offset in offsets:
            expected.extend(b"%010d 00000 n \n" % offset)
        expected.extend(b"trailer\n<< /Size 7 /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF" % xref_start)

        assert render_pdf([StyledLine("Hello", size=11)]) == bytes(expected)

    def test_well_formed_envelope(self):
        data = render_pdf([StyledLine("Package Status Report", weight=FontWeight.BOLD, size=18)])
        assert data.startswith(b"%PDF-1.4")
        assert data.endswith(b"%%EOF")

    def test_single_page_has_one_content_stream(self):
        data = render_pdf([StyledLine("Hello", size=11)])
        assert data.count(b"stream\n") - data.count(b"endstream\n") == 1
        assert data.count(b"(Hello) Tj") == 1

    @pytest.mark.parametrize("counts", [(1,), (3, 1), (52, 52, 10), tuple([5] * 12)])
    def test_every_xref_offset_points_at_its_object(self, counts):
        data = PDFCompiler().assemble(_pages(*counts))
        offsets = read_xref_offsets(data)
        assert sorted(offsets) == list(range(1, 5 + 2 * len(counts)))
        for num, offset in offsets.items():
            assert data[offset:].startswith(f"{num} 0 obj".encode())
        assert verify_xref(data) == []

    def test_object_numbering(self):
        pages = _pages(2, 2, 2)
        data = PDFCompiler().assemble(pages)
        assert b"/Kids [5 0 R 6 0 R 7 0 R] /Count 3" in data
        for index in range(3):
            page_num = page_object_num(index)
            content_num = content_object_num(index, 3)
            assert content_num == 8 + index
            page_obj = re.search(rb"%d 0 obj\n(.*?)\nendobj" % page_num, data, re.S).group(1)
            assert b"/Contents %d 0 R" % content_num in page_obj
            assert b"/Parent 2 0 R" in page_obj

    def test_objects_written_in_ascending_order(self):
        data = PDFCompiler().assemble(_pages(1, 1, 1, 1))
        offsets = read_xref_offsets(data)
        ordered = [offsets[num] for num in sorted(offsets)]
        assert ordered == sorted(ordered)

    def test_startxref_points_at_xref_keyword(self):
        data = render_pdf([StyledLine("Hello")])
        start = int(data.rsplit(b"startxref\n", 1)[1].split(b"\n")[0])
        assert data[start:start + 5] == b"xref\n"

    def test_stream_length_matches_data(self):
        data = PDFCompiler().assemble(_pages(7))
        match = re.search(rb"<< /Length (\d+) >>\nstream\n", data)
        length = int(match.group(1))
        body = data[match.end():match.end() + length]
        assert body.endswith(b"ET")
        assert data[match.end() + length:].startswith(b"\nendstream")

    def test_deterministic(self):
        lines = [StyledLine(f"Shipment {i}: IN_TRANSIT", gap_before=i % 3) for i in range(150)]
        assert render_pdf(lines) == render_pdf(lines)

    def test_page_count_follows_pagination(self):
        lines = [StyledLine(f"row {i}") for i in range(200)]
        data = render_pdf(lines)
        assert b"/Count 4" in data

    def test_options_change_geometry(self):
        options = ReportOptions(page_width=595.28, page_height=841.89)
        data = PDFCompiler(options).assemble(_pages(1))
        assert b"/MediaBox [0 0 595.28 841.89]" in data


class TestCompileLines:
    """Test suite for PDFCompiler.layout() and compile_lines()."""

    def test_layout_wraps_then_paginates(self):
        compiler = PDFCompiler(ReportOptions(wrap_limit=10, max_page_height=28))
        pages = compiler.layout([StyledLine("aaaa bbbb cccc dddd eeee")])
        assert [[line.text for line in page] for page in pages] == [["aaaa bbbb", "cccc dddd"], ["eeee"]]

    def test_unstyled_lines_use_option_defaults(self):
        options = ReportOptions(default_color=Color(1, 0, 0), default_size=20)
        data = render_pdf([StyledLine("Status: OK")], options)
        assert b"BT\n/F1 20 Tf\n0 0 0 rg\n" in data
        assert b"1 0 0 rg\n/F1 20 Tf\n(Status: OK) Tj" in data

    def test_compile_lines_matches_render_pdf(self):
        lines = [StyledLine("Product", weight=FontWeight.BOLD, size=14, gap_before=12), StyledLine("Name: Vaccine")]
        assert PDFCompiler().compile_lines(lines) == render_pdf(lines)


class TestThirdPartyReader:
    """Generated documents open in an independent PDF reader."""

    def test_pypdf_reads_pages_and_text(self):
        lines = [StyledLine("Package Status Report", weight=FontWeight.BOLD, size=18)]
        lines += [StyledLine(f"Checkpoint {i}: OK") for i in range(120)]
        reader = PdfReader(io.BytesIO(render_pdf(lines)))
        assert len(reader.pages) == 3
        first_page = reader.pages[0]
        assert [float(value) for value in first_page.mediabox] == [0, 0, 612, 792]
        assert "Package Status Report" in first_page.extract_text()
        assert "Checkpoint 119: OK" in reader.pages[2].extract_text()

    @pytest.mark.integration
    def test_status_report_round_trip(self, report_lines):
        reader = PdfReader(io.BytesIO(render_pdf(report_lines)))
        assert len(reader.pages) == 1
        text = reader.pages[0].extract_text()
        assert "Name: Insulin Pens" in text
        assert "Temperature: 2 to 8" in text
