"""
End-to-end scenarios for parse() / summarize()

Each test feeds complete interchange text through the public API and
checks the properties the presentation layer relies on: ordering, status
consistency, envelope checks, and classification independent of
structural validation.
"""

import pytest

from src.edi import (
    DocumentStatus,
    EdiIngestionPipeline,
    PipelineConfig,
    Severity,
    parse,
    summarize,
    tokenize,
)

pytestmark = pytest.mark.integration


SAMPLE_INPUTS = [
    "",
    "ST~850~0001",
    "ISA*00\nGS*PO\nST*810*1\nDTM*097*2024-01-01\nSE*3*1\nGE*1*1\nIEA*1*1",
    "DTM**20240101\n\n  \nREF|PO|123|\n~~~\n",
    "garbage line one\nanother one * with | stars ~",
]


class TestValidInterchange:

    def test_complete_850_validates(self, valid_850_text):
        doc = parse(valid_850_text, "po_850.edi")
        assert doc.status is DocumentStatus.VALIDATED
        assert doc.error_count == 0
        assert doc.transaction_type == "Purchase Order"
        assert [s.tag for s in doc.segments] == [
            "ISA", "GS", "ST", "BEG", "DTM", "PO1", "CTT", "SE", "GE", "IEA",
        ]
        assert all(s.is_valid for s in doc.segments)

    def test_descriptions_attached(self, valid_850_text):
        doc = parse(valid_850_text, "po_850.edi")
        assert doc.segments[0].description == "Interchange Control Header"
        assert doc.segments[-1].description == "Interchange Control Trailer"

    def test_isa_has_sixteen_elements(self, valid_850_text):
        isa = parse(valid_850_text, "po_850.edi").segments[0]
        assert len(isa.elements) == 16
        assert isa.elements[1] == " " * 10

    def test_summary(self, valid_850_text):
        doc = parse(valid_850_text, "po_850.edi")
        report = summarize(doc)
        assert report.splitlines()[:6] == [
            "EDI File Summary:",
            "- Transaction Type: Purchase Order",
            "- Total Segments: 10",
            "- Validation Status: validated",
            "- Errors: 0",
            "- Warnings: 0",
        ]
        assert report.splitlines()[6] == f"- File Size: {doc.file_size_bytes / 1024:.2f} KB"


class TestClassificationIndependentOfStructure:

    def test_headerless_purchase_order(self, headerless_850_text):
        doc = parse(headerless_850_text, "st_only.edi")
        assert doc.transaction_type == "Purchase Order"
        assert doc.status is DocumentStatus.ERROR
        messages = [d.message for d in doc.diagnostics]
        assert "Missing ISA (Interchange Control Header) segment" in messages
        assert "Missing GS (Functional Group Header) segment" in messages
        assert not any("Missing ST" in m for m in messages)


class TestSegmentFindings:

    def test_short_isa(self, valid_850_text, valid_isa_line):
        text = valid_850_text.replace(valid_isa_line, "ISA*00*          *00~")
        doc = parse(text, "short_isa.edi")
        assert doc.status is DocumentStatus.ERROR
        isa = doc.segments[0]
        assert not isa.is_valid
        assert isa.errors == ("ISA segment must contain 16 elements",)

    def test_dashed_date_warns_but_validates(self, valid_850_text):
        text = valid_850_text.replace("DTM*002*20240115", "DTM*097*2024-01-01")
        doc = parse(text, "dashed.edi")
        assert doc.status is DocumentStatus.VALIDATED
        (warning,) = doc.diagnostics
        assert warning.severity is Severity.WARNING
        assert warning.element_index == 2
        assert warning.segment_id == doc.segments[4].id
        assert doc.segments[4].is_valid
        assert doc.segments[4].errors == ("Date format should be YYYYMMDD",)

    def test_all_findings_accumulated(self):
        doc = parse("ISA\nDTM*097*2024-01-01\nGS", "many.edi")
        messages = [d.message for d in doc.diagnostics]
        assert messages == [
            "ISA segment is missing required elements",
            "ISA segment must contain 16 elements",
            "Date format should be YYYYMMDD",
            "GS segment is missing required elements",
            "Missing ST (Transaction Set Header) segment",
        ]


class TestProperties:

    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_idempotent(self, text):
        first, second = parse(text, "a.edi"), parse(text, "a.edi")
        assert first.segments == second.segments
        assert first.transaction_type == second.transaction_type
        assert first.status == second.status
        assert [d.model_dump(exclude={"id"}) for d in first.diagnostics] == \
               [d.model_dump(exclude={"id"}) for d in second.diagnostics]

    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_order_preserved(self, text):
        doc = parse(text, "a.edi")
        raw = tokenize(text)
        assert [(s.tag, s.elements) for s in doc.segments] == [(s.tag, s.elements) for s in raw]

    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_status_invariant(self, text):
        doc = parse(text, "a.edi")
        has_error = any(d.severity is Severity.ERROR for d in doc.diagnostics)
        assert (doc.status is DocumentStatus.ERROR) == has_error

    @pytest.mark.parametrize("strict_envelope", [False, True])
    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_segment_validity_invariant(self, text, strict_envelope):
        pipeline = EdiIngestionPipeline(PipelineConfig(strict_envelope=strict_envelope))
        doc = pipeline.parse(text, "a.edi")
        for segment in doc.segments:
            own_errors = [d for d in doc.diagnostics_for(segment.id) if d.severity is Severity.ERROR]
            assert segment.is_valid == (not own_errors)

    def test_interior_blank(self):
        (segment,) = parse("DTM**20240101", "a.edi").segments
        assert segment.elements == ("", "20240101")

    def test_missing_isa_with_many_segments(self):
        text = "\n".join(["GS*PO*S*R", "ST*850*1"] + ["REF*PO*1"] * 200)
        doc = parse(text, "no_isa.edi")
        assert any("Missing ISA" in d.message and d.segment_tag == "FILE" for d in doc.diagnostics)
