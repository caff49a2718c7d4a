"""EDI X12 ingestion: tokenization, validation and classification

Pipeline Flow:
    1. Tokenize  -> tokenize() -> RawSegment
    2. Validate  -> validate_segment(), validate_structure() -> Diagnostic
    3. Classify  -> classify() -> transaction label
    4. Assemble  -> assemble() -> ParsedDocument
    5. Report    -> summarize(), format_diagnostics()

Quick Start:
    >>> from src.edi import parse, summarize
    >>> doc = parse(open("po_850.edi").read(), "po_850.edi")
    >>> print(summarize(doc))
"""

from .models import (
    RawSegment,
    ValidatedSegment,
    Diagnostic,
    Severity,
    ParsedDocument,
    DocumentStatus,
)
from .dictionary import SegmentDictionary, DEFAULT_DICTIONARY
from .tokenizer import DelimiterConfig, tokenize
from .validators import validate_segment, validate_structure
from .classifier import classify
from .assembler import assemble
from .summary import summarize, format_diagnostics
from .pipeline import (
    EdiIngestionPipeline,
    PipelineConfig,
    BatchItemResult,
    parse,
    parse_file,
)

__all__ = [
    # Models
    'RawSegment',
    'ValidatedSegment',
    'Diagnostic',
    'Severity',
    'ParsedDocument',
    'DocumentStatus',
    # Dictionary
    'SegmentDictionary',
    'DEFAULT_DICTIONARY',
    # Stages
    'DelimiterConfig',
    'tokenize',
    'validate_segment',
    'validate_structure',
    'classify',
    'assemble',
    # Reporting
    'summarize',
    'format_diagnostics',
    # Pipeline
    'EdiIngestionPipeline',
    'PipelineConfig',
    'BatchItemResult',
    'parse',
    'parse_file',
]
