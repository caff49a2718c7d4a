"""
EDI Ingestion Pipeline

Orchestrates the complete flow over already-materialized text:
1. Tokenize  - raw text -> RawSegment sequence
2. Validate  - per-segment rules
3. Classify  - transaction set label from the first ST
4. Structure - document-level envelope rules
5. Assemble  - immutable ParsedDocument

Each parse is an independent single pass with no shared mutable state, so
separate files can be parsed concurrently (see parse_batch).

Quick Start:
    >>> from src.edi import parse, summarize
    >>> doc = parse("ST*850*0001", "po.edi")
    >>> doc.transaction_type, doc.status.value
    ('Purchase Order', 'error')
    >>> print(summarize(doc))
"""

import logging
import re
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from src.config import settings

from .assembler import assemble
from .classifier import classify
from .dictionary import DEFAULT_DICTIONARY, SegmentDictionary
from .models import Diagnostic, ParsedDocument
from .tokenizer import DelimiterConfig, tokenize
from .validators import validate_segment, validate_structure

logger = logging.getLogger(__name__)


class PipelineConfig(BaseModel):
    """
    Configuration for the ingestion pipeline (Pydantic V2)

    Attributes:
        separators: Delimiter candidates (None = use settings.tokenizer.separators)
        isa_element_count: ISA arity (None = use settings.validation.isa_element_count)
        date_pattern: DTM date pattern (None = use settings.validation.date_pattern)
        strict_envelope: Enable envelope balance/nesting/count rules
            (None = use settings.validation.strict_envelope)
        check_extension: Reject files whose extension is not configured in parse_file
    """
    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',  # Raise error on unknown fields
    )

    separators: Optional[List[str]] = Field(
        default=None,
        description="Delimiter candidates (None = use default from settings)"
    )
    isa_element_count: Optional[int] = Field(
        default=None,
        ge=1,
        description="Required ISA element count (None = use default from settings)"
    )
    date_pattern: Optional[str] = Field(
        default=None,
        description="DTM date element pattern (None = use default from settings)"
    )
    strict_envelope: Optional[bool] = Field(
        default=None,
        description="Check trailer balance, nesting and SE01 counts"
    )
    check_extension: bool = Field(
        default=True,
        description="Reject files with unconfigured extensions in parse_file"
    )


class BatchItemResult(BaseModel):
    """Outcome of one file in a batch run"""
    model_config = ConfigDict(frozen=True)

    file: str
    status: Literal['parsed', 'failed']
    document: Optional[ParsedDocument] = None
    error: Optional[str] = None
    elapsed_time: float = 0.0


class EdiIngestionPipeline:
    """
    Complete ingestion pipeline for EDI X12 text

    Flow: Tokenize -> Validate segments -> Classify -> Validate structure -> Assemble

    Example:
        >>> pipeline = EdiIngestionPipeline(PipelineConfig(strict_envelope=True))
        >>> doc = pipeline.parse_file("data/raw/po_850.edi")
        >>> print(doc.status, doc.error_count)
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        dictionary: Optional[SegmentDictionary] = None,
    ):
        """
        Initialize the pipeline

        Args:
            config: Pipeline configuration. Uses defaults if not provided.
            dictionary: Segment dictionary. Uses the built-in table if not provided.
        """
        self.config = config or PipelineConfig()
        self.dictionary = dictionary or DEFAULT_DICTIONARY

        # pylint: disable=no-member
        separators = (
            self.config.separators if self.config.separators is not None
            else settings.tokenizer.separators
        )
        self.delimiters = DelimiterConfig(separators=frozenset(separators))
        self.isa_element_count = (
            self.config.isa_element_count if self.config.isa_element_count is not None
            else settings.validation.isa_element_count
        )
        self.date_pattern = re.compile(
            self.config.date_pattern if self.config.date_pattern is not None
            else settings.validation.date_pattern
        )
        self.strict_envelope = (
            self.config.strict_envelope if self.config.strict_envelope is not None
            else settings.validation.strict_envelope
        )
        self.encoding = settings.tokenizer.encoding
        self.encoding_errors = settings.tokenizer.encoding_errors
        self.input_file_extensions = [
            ext.lower().lstrip('.') for ext in settings.tokenizer.input_file_extensions
        ]
        # pylint: enable=no-member

    def parse(self, raw_text: str, file_name: str) -> ParsedDocument:
        """
        Parse already-materialized text

        Args:
            raw_text: Interchange text
            file_name: Display name carried into the result

        Returns:
            ParsedDocument: Always a complete result; defects are diagnostics
        """
        # surrogatepass: lone surrogates are counted as their 3-byte encoding
        file_size_bytes = len(raw_text.encode('utf-8', errors='surrogatepass'))
        return self._parse(raw_text, file_name, file_size_bytes)

    def parse_file(self, file_path: Union[str, Path]) -> ParsedDocument:
        """
        Read and parse one file

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If check_extension is on and the extension is not configured
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"EDI file not found: {file_path}")

        if self.config.check_extension:
            extension = file_path.suffix.lower().lstrip('.')
            if extension not in self.input_file_extensions:
                raise ValueError(
                    f"Unsupported file extension '{file_path.suffix}' for {file_path.name}. "
                    f"Expected one of: {', '.join(self.input_file_extensions)}"
                )

        raw_bytes = file_path.read_bytes()
        raw_text = raw_bytes.decode(self.encoding, errors=self.encoding_errors)
        return self._parse(raw_text, file_path.name, len(raw_bytes))

    def parse_batch(
        self,
        file_paths: Sequence[Union[str, Path]],
        max_workers: Optional[int] = None,
    ) -> List[BatchItemResult]:
        """
        Parse several files, optionally in parallel

        A file that cannot be read is reported as a failed item; it does
        not abort the batch.

        Args:
            file_paths: Files to parse
            max_workers: Thread count (None = auto, 1 = sequential)

        Returns:
            List[BatchItemResult]: One result per input, in input order
        """
        paths = [Path(p) for p in file_paths]
        if max_workers == 1 or len(paths) <= 1:
            return [self._parse_one(p) for p in paths]

        results: Dict[int, BatchItemResult] = {}
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {executor.submit(self._parse_one, p): idx for idx, p in enumerate(paths)}
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return [results[idx] for idx in range(len(paths))]

    def _parse_one(self, file_path: Path) -> BatchItemResult:
        start = time.time()
        try:
            document = self.parse_file(file_path)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load %s: %s", file_path, exc)
            return BatchItemResult(
                file=str(file_path),
                status='failed',
                error=str(exc),
                elapsed_time=time.time() - start,
            )
        return BatchItemResult(
            file=str(file_path),
            status='parsed',
            document=document,
            elapsed_time=time.time() - start,
        )

    def _parse(self, raw_text: str, file_name: str, file_size_bytes: int) -> ParsedDocument:
        raw_segments = tokenize(raw_text, self.delimiters)
        logger.debug("%s: tokenized %d segments", file_name, len(raw_segments))

        segment_diagnostics: Dict[str, List[Diagnostic]] = {
            segment.id: validate_segment(
                segment,
                isa_element_count=self.isa_element_count,
                date_pattern=self.date_pattern,
            )
            for segment in raw_segments
        }
        transaction_type = classify(raw_segments)
        structural_diagnostics = validate_structure(
            raw_segments, strict_envelope=self.strict_envelope
        )

        document = assemble(
            file_name=file_name,
            file_size_bytes=file_size_bytes,
            raw_segments=raw_segments,
            segment_diagnostics=segment_diagnostics,
            structural_diagnostics=structural_diagnostics,
            transaction_type=transaction_type,
            dictionary=self.dictionary,
        )
        logger.info(
            "Parsed %s: %s, %d segments, status=%s (%d errors, %d warnings)",
            file_name, transaction_type, len(document), document.status.value,
            document.error_count, document.warning_count,
        )
        return document


def parse(raw_text: str, file_name: str) -> ParsedDocument:
    """Parse text with the default pipeline configuration"""
    return EdiIngestionPipeline().parse(raw_text, file_name)


def parse_file(file_path: Union[str, Path]) -> ParsedDocument:
    """Read and parse one file with the default pipeline configuration"""
    return EdiIngestionPipeline().parse_file(file_path)
