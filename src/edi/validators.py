"""
Segment-level and document-level validation rules

Both validators are pure functions returning diagnostics; neither raises
for document content. Every applicable rule fires, so a single pass
surfaces the complete defect list.

Segment rules (validate_segment), in evaluation order:
    1. ISA / GS / ST with zero elements             -> error
    2. ISA with fewer than 16 elements              -> error
    3. DTM whose 2nd element is not YYYYMMDD        -> warning (element 2)

Document rules (validate_structure):
    - ISA, GS and ST must each appear at least once -> error on FILE
    - strict_envelope=True additionally checks header/trailer balance,
      nesting order and the SE01 segment count
"""

import re
from typing import Dict, List, Sequence

from .constants import (
    DTM,
    ENVELOPE_PAIRS,
    FILE_SEGMENT_TAG,
    GS,
    ISA,
    MANDATORY_ENVELOPE_TAGS,
    SE,
    ST,
)
from .models import Diagnostic, RawSegment, Severity

DEFAULT_ISA_ELEMENT_COUNT = 16
DEFAULT_DATE_PATTERN = r'^\d{8}$'

_MISSING_HEADER_RULES = (
    (ISA, "Missing ISA (Interchange Control Header) segment",
     "Add ISA segment at the beginning of the file"),
    (GS, "Missing GS (Functional Group Header) segment",
     "Add GS segment after ISA segment"),
    (ST, "Missing ST (Transaction Set Header) segment",
     "Add ST segment to identify transaction type"),
)

# nesting depth of each envelope header / trailer
_HEADER_LEVEL: Dict[str, int] = {hdr: lvl for lvl, hdr in enumerate(ENVELOPE_PAIRS)}
_TRAILER_LEVEL: Dict[str, int] = {trl: lvl for lvl, trl in enumerate(ENVELOPE_PAIRS.values())}
_HEADERS = tuple(ENVELOPE_PAIRS)


def _segment_diagnostic(
    segment: RawSegment,
    severity: Severity,
    message: str,
    suggestion: str | None = None,
    element_index: int | None = None,
) -> Diagnostic:
    return Diagnostic(
        severity=severity,
        segment_tag=segment.tag,
        segment_id=segment.id,
        element_index=element_index,
        message=message,
        suggestion=suggestion,
    )


def _file_error(message: str, suggestion: str) -> Diagnostic:
    return Diagnostic(
        severity=Severity.ERROR,
        segment_tag=FILE_SEGMENT_TAG,
        message=message,
        suggestion=suggestion,
    )


# ===========================
# Segment Rules
# ===========================

def validate_segment(
    segment: RawSegment,
    isa_element_count: int = DEFAULT_ISA_ELEMENT_COUNT,
    date_pattern: str | re.Pattern = DEFAULT_DATE_PATTERN,
) -> List[Diagnostic]:
    """
    Apply per-segment rules to one segment

    Unknown tags produce no diagnostics: the dictionary is illustrative,
    not exhaustive.

    Args:
        segment: Tokenized segment
        isa_element_count: Fixed arity of the ISA segment
        date_pattern: Pattern a DTM date element must fully match

    Returns:
        List[Diagnostic]: Findings in rule order (possibly empty)
    """
    results: List[Diagnostic] = []
    tag = segment.tag

    if tag in MANDATORY_ENVELOPE_TAGS and len(segment.elements) == 0:
        results.append(_segment_diagnostic(
            segment, Severity.ERROR,
            f"{tag} segment is missing required elements",
            "Ensure all required elements are present",
        ))

    if tag == ISA and len(segment.elements) < isa_element_count:
        results.append(_segment_diagnostic(
            segment, Severity.ERROR,
            f"ISA segment must contain {isa_element_count} elements",
            "Check ISA segment format and ensure all elements are present",
        ))

    if tag == DTM and len(segment.elements) >= 2:
        date_value = segment.elements[1]
        if isinstance(date_pattern, str):
            date_pattern = re.compile(date_pattern)
        # an empty date element is absent, not malformed
        if date_value and not date_pattern.match(date_value):
            results.append(_segment_diagnostic(
                segment, Severity.WARNING,
                "Date format should be YYYYMMDD",
                "Use YYYYMMDD format for dates",
                element_index=2,
            ))

    return results


# ===========================
# Document Rules
# ===========================

def validate_structure(
    segments: Sequence[RawSegment],
    strict_envelope: bool = False,
) -> List[Diagnostic]:
    """
    Apply document-level rules to the whole segment sequence

    Args:
        segments: Tokenized segments in input order
        strict_envelope: Also check trailer balance, nesting and SE01 counts

    Returns:
        List[Diagnostic]: Presence errors first, then strict findings
    """
    present = {segment.tag for segment in segments}
    results = [
        _file_error(message, suggestion)
        for tag, message, suggestion in _MISSING_HEADER_RULES
        if tag not in present
    ]

    if strict_envelope:
        results.extend(_check_envelope_balance(segments))
        results.extend(_check_envelope_nesting(segments))
        results.extend(_check_transaction_counts(segments))

    return results


def _check_envelope_balance(segments: Sequence[RawSegment]) -> List[Diagnostic]:
    """Every header needs exactly as many trailers"""
    results = []
    for header, trailer in ENVELOPE_PAIRS.items():
        n_headers = sum(1 for s in segments if s.tag == header)
        n_trailers = sum(1 for s in segments if s.tag == trailer)
        if n_headers != n_trailers:
            results.append(_file_error(
                f"Unbalanced {header}/{trailer} envelope: "
                f"{n_headers} header(s), {n_trailers} trailer(s)",
                f"Close every {header} segment with a matching {trailer} segment",
            ))
    return results


def _check_envelope_nesting(segments: Sequence[RawSegment]) -> List[Diagnostic]:
    """
    Walk the envelope with a stack of open headers.

    ISA wraps GS, GS wraps ST. A header must open at the depth its level
    expects and a trailer must close the innermost open header.
    """
    results = []
    open_stack: List[RawSegment] = []

    for segment in segments:
        tag = segment.tag

        if tag in _HEADER_LEVEL:
            level = _HEADER_LEVEL[tag]
            while len(open_stack) > level:
                unclosed = open_stack.pop()
                results.append(_segment_diagnostic(
                    segment, Severity.ERROR,
                    f"{tag} segment opened before {unclosed.tag} was closed",
                    f"Add {ENVELOPE_PAIRS[unclosed.tag]} before {tag}",
                ))
            if level > 0 and (not open_stack or open_stack[-1].tag != _HEADERS[level - 1]):
                parent = _HEADERS[level - 1]
                results.append(_segment_diagnostic(
                    segment, Severity.ERROR,
                    f"{tag} segment appears outside an open {parent} envelope",
                    f"Place {tag} after its {parent} segment",
                ))
            open_stack.append(segment)

        elif tag in _TRAILER_LEVEL:
            level = _TRAILER_LEVEL[tag]
            header = _HEADERS[level]
            if not any(s.tag == header for s in open_stack):
                results.append(_segment_diagnostic(
                    segment, Severity.ERROR,
                    f"{tag} segment has no open {header} envelope",
                    f"Remove {tag} or add the missing {header} segment",
                ))
                continue
            while open_stack[-1].tag != header:
                unclosed = open_stack.pop()
                results.append(_segment_diagnostic(
                    segment, Severity.ERROR,
                    f"{tag} segment closes {header} while {unclosed.tag} is still open",
                    f"Add {ENVELOPE_PAIRS[unclosed.tag]} before {tag}",
                ))
            open_stack.pop()

    for unclosed in reversed(open_stack):
        trailer = ENVELOPE_PAIRS[unclosed.tag]
        results.append(_segment_diagnostic(
            unclosed, Severity.ERROR,
            f"{unclosed.tag} envelope is never closed by {trailer}",
            f"Add a {trailer} segment at the end of the {unclosed.tag} envelope",
        ))

    return results


def _check_transaction_counts(segments: Sequence[RawSegment]) -> List[Diagnostic]:
    """SE01 must equal the number of segments from ST through SE inclusive"""
    results = []
    st_position = None

    for segment in segments:
        if segment.tag == ST:
            st_position = segment.position
        elif segment.tag == SE and st_position is not None:
            declared = segment.element(1)
            actual = segment.position - st_position + 1
            if declared is not None and declared.strip().isdigit() and int(declared) != actual:
                results.append(_segment_diagnostic(
                    segment, Severity.WARNING,
                    f"SE segment count {int(declared)} does not match actual count {actual}",
                    f"Set SE01 to {actual}",
                    element_index=1,
                ))
            st_position = None

    return results
