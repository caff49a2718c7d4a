"""
Pydantic data models for the EDI ingestion pipeline.

Organized by stage:
- segments: RawSegment, ValidatedSegment
- diagnostics: Diagnostic, Severity
- document: ParsedDocument, DocumentStatus
"""
from .segments import RawSegment, ValidatedSegment
from .diagnostics import Diagnostic, Severity
from .document import ParsedDocument, DocumentStatus, status_for

__all__ = [
    'RawSegment',
    'ValidatedSegment',
    'Diagnostic',
    'Severity',
    'ParsedDocument',
    'DocumentStatus',
    'status_for',
]
