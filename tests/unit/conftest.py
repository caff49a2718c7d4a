"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use synthetic segments that run in <1 second.
"""

import pytest

from src.edi.models import RawSegment


def make_segment(tag: str, *elements: str, position: int = 0) -> RawSegment:
    """Build a RawSegment directly, bypassing the tokenizer."""
    return RawSegment(
        id=f"seg_{position}",
        position=position,
        tag=tag,
        elements=tuple(elements),
    )


def make_segments(*specs) -> list:
    """Build an ordered segment list from (tag, *elements) tuples."""
    return [make_segment(spec[0], *spec[1:], position=i) for i, spec in enumerate(specs)]


# =============================================================================
# Factory Fixtures
# =============================================================================

@pytest.fixture
def segment_factory():
    """Return make_segment for building single segments in tests."""
    return make_segment


@pytest.fixture
def segments_factory():
    """Return make_segments for building ordered sequences in tests."""
    return make_segments


# =============================================================================
# Segment Fixtures
# =============================================================================

@pytest.fixture
def isa_segment() -> RawSegment:
    """ISA with exactly 16 elements."""
    return make_segment(
        "ISA", "00", " " * 10, "00", " " * 10, "ZZ", "SENDERID", "ZZ", "RECEIVERID",
        "240101", "1253", "U", "00401", "000000001", "0", "P", ">",
    )


@pytest.fixture
def short_isa_segment() -> RawSegment:
    """ISA truncated to 5 elements."""
    return make_segment("ISA", "00", " " * 10, "00", " " * 10, "ZZ")


@pytest.fixture
def envelope_segments() -> list:
    """Well-formed ISA/GS/ST/.../SE/GE/IEA sequence with SE01 = 4."""
    return make_segments(
        ("ISA", *["X"] * 16),
        ("GS", "PO", "S", "R", "20240101", "1253", "1", "X", "004010"),
        ("ST", "850", "0001"),
        ("BEG", "00", "SA", "PO1"),
        ("CTT", "1"),
        ("SE", "4", "0001"),
        ("GE", "1", "1"),
        ("IEA", "1", "000000001"),
    )


# =============================================================================
# Text Fixtures
# =============================================================================

@pytest.fixture
def mixed_delimiter_text() -> str:
    """Same shape of line written with each tolerated separator."""
    return "N1*ST*ACME CORP~\nN1|BT|ACME BILLING|\nN1~RE~ACME REMIT~"


@pytest.fixture
def blank_lines_text() -> str:
    """Segments separated by empty and whitespace-only lines."""
    return "\n\nST*850*0001~\n   \n\t\nSE*2*0001~\n\n"
