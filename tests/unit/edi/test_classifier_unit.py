"""Unit tests for src/edi/classifier.py"""

import pytest

from src.edi.classifier import classify, label_for_code


class TestLabelForCode:

    @pytest.mark.parametrize("code,expected", [
        ("850", "Purchase Order"),
        ("856", "Ship Notice/Manifest"),
        ("810", "Invoice"),
        ("997", "Functional Acknowledgment"),
    ])
    def test_known_codes(self, code, expected):
        assert label_for_code(code) == expected

    def test_unknown_code(self):
        assert label_for_code("204") == "Transaction 204"

    def test_custom_table(self):
        assert label_for_code("204", {"204": "Motor Carrier Load Tender"}) == "Motor Carrier Load Tender"


class TestClassify:

    def test_no_st_is_unknown(self, segments_factory):
        assert classify(segments_factory(("ISA", "00"), ("GS", "PO"))) == "Unknown"

    def test_empty_sequence_is_unknown(self):
        assert classify([]) == "Unknown"

    def test_first_st_wins(self, segments_factory):
        segments = segments_factory(("ST", "810", "1"), ("SE", "2", "1"), ("ST", "850", "2"))
        assert classify(segments) == "Invoice"

    def test_st_without_code_skipped(self, segments_factory):
        segments = segments_factory(("ST",), ("ST", "856", "0001"))
        assert classify(segments) == "Ship Notice/Manifest"

    def test_independent_of_envelope(self, segments_factory):
        """Classification does not require ISA or GS."""
        assert classify(segments_factory(("ST", "850", "0001"))) == "Purchase Order"
