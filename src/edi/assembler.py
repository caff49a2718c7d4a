"""
Document assembly

Combines tokenized segments, their diagnostics, document-level findings
and the transaction label into one immutable ParsedDocument. Performs no
I/O and never raises for document content.
"""

from collections import defaultdict
from typing import Dict, List, Mapping, Optional, Sequence

from .dictionary import DEFAULT_DICTIONARY, SegmentDictionary
from .models import (
    Diagnostic,
    ParsedDocument,
    RawSegment,
    Severity,
    ValidatedSegment,
    status_for,
)


def validated_segment(
    segment: RawSegment,
    diagnostics: Sequence[Diagnostic],
    dictionary: SegmentDictionary = DEFAULT_DICTIONARY,
) -> ValidatedSegment:
    """Attach description and validation outcome to one segment"""
    return ValidatedSegment(
        id=segment.id,
        position=segment.position,
        tag=segment.tag,
        elements=segment.elements,
        description=dictionary.describe(segment.tag),
        is_valid=not any(d.severity is Severity.ERROR for d in diagnostics),
        errors=tuple(d.message for d in diagnostics),
    )


def assemble(
    file_name: str,
    file_size_bytes: int,
    raw_segments: Sequence[RawSegment],
    segment_diagnostics: Mapping[str, Sequence[Diagnostic]],
    structural_diagnostics: Sequence[Diagnostic],
    transaction_type: str,
    dictionary: Optional[SegmentDictionary] = None,
) -> ParsedDocument:
    """
    Build the ParsedDocument

    Args:
        file_name: Display name
        file_size_bytes: Input size in bytes
        raw_segments: Tokenized segments in input order
        segment_diagnostics: Segment id -> that segment's diagnostics
        structural_diagnostics: Document-level diagnostics; those carrying a
            segment_id also mark that segment invalid on error
        transaction_type: Classifier output
        dictionary: Segment dictionary (default: built-in table)

    Returns:
        ParsedDocument: Segment diagnostics in segment order, then document diagnostics
    """
    dictionary = dictionary or DEFAULT_DICTIONARY

    # Envelope findings that point at a segment count against that segment too
    anchored: Dict[str, List[Diagnostic]] = defaultdict(list)
    for diagnostic in structural_diagnostics:
        if diagnostic.segment_id is not None:
            anchored[diagnostic.segment_id].append(diagnostic)

    segments: List[ValidatedSegment] = []
    diagnostics: List[Diagnostic] = []

    for segment in raw_segments:
        own = list(segment_diagnostics.get(segment.id, ()))
        attached = own + anchored.get(segment.id, [])
        segments.append(validated_segment(segment, attached, dictionary))
        diagnostics.extend(own)

    diagnostics.extend(structural_diagnostics)

    return ParsedDocument(
        file_name=file_name,
        file_size_bytes=file_size_bytes,
        transaction_type=transaction_type,
        segments=tuple(segments),
        diagnostics=tuple(diagnostics),
        status=status_for(diagnostics),
    )
