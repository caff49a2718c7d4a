"""
Pydantic model for a fully parsed EDI document.

ParsedDocument is the sole handoff artifact of the ingestion pipeline.
Lifecycle states beyond validated/error (uploaded, sent, received, ...)
belong to whoever owns the document afterwards.
"""

import json
from enum import Enum
from pathlib import Path
from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .diagnostics import Diagnostic, Severity
from .segments import ValidatedSegment

FORMAT_VERSION = '1.0'


class DocumentStatus(str, Enum):
    """Outcome of a parse"""
    VALIDATED = "validated"
    ERROR = "error"


class ParsedDocument(BaseModel):
    """
    Parsed EDI interchange

    Attributes:
        file_name: Display name supplied by the caller
        file_size_bytes: Size of the input text in UTF-8 bytes
        transaction_type: Human-readable transaction set label
        segments: Validated segments in input order
        diagnostics: Segment-level findings in segment order, then document-level findings
        status: ERROR iff any diagnostic has error severity
    """
    model_config = ConfigDict(frozen=True)

    file_name: str
    file_size_bytes: int = Field(ge=0)
    transaction_type: str
    segments: Tuple[ValidatedSegment, ...] = ()
    diagnostics: Tuple[Diagnostic, ...] = ()
    status: DocumentStatus

    @model_validator(mode='after')
    def _status_matches_diagnostics(self) -> 'ParsedDocument':
        expected = status_for(self.diagnostics)
        if self.status is not expected:
            raise ValueError(
                f"status {self.status.value!r} contradicts diagnostics "
                f"(expected {expected.value!r})"
            )
        return self

    def __len__(self) -> int:
        """Return number of segments"""
        return len(self.segments)

    def _count(self, severity: Severity) -> int:
        return sum(1 for d in self.diagnostics if d.severity is severity)

    @property
    def error_count(self) -> int:
        return self._count(Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(Severity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(Severity.INFO)

    @property
    def is_valid(self) -> bool:
        return self.status is DocumentStatus.VALIDATED

    def diagnostics_for(self, segment_id: str) -> List[Diagnostic]:
        """Diagnostics attached to one segment, in insertion order"""
        return [d for d in self.diagnostics if d.segment_id == segment_id]

    def document_diagnostics(self) -> List[Diagnostic]:
        """Diagnostics not tied to any single segment"""
        return [d for d in self.diagnostics if d.segment_id is None]

    def save_to_json(
        self,
        output_path: Union[str, Path],
        overwrite: bool = False
    ) -> Path:
        """
        Save the parsed document to a JSON file

        Args:
            output_path: Destination path (extension forced to .json)
            overwrite: Whether to overwrite an existing file

        Returns:
            Path to the saved file

        Raises:
            FileExistsError: If file exists and overwrite=False
        """
        output_path = Path(output_path)

        if output_path.suffix != '.json':
            output_path = output_path.with_suffix('.json')

        if output_path.exists() and not overwrite:
            raise FileExistsError(f"File exists: {output_path}. Set overwrite=True.")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = {'version': FORMAT_VERSION, **self.model_dump(mode='json')}

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return output_path

    @staticmethod
    def load_from_json(file_path: Union[str, Path]) -> 'ParsedDocument':
        """
        Load a parsed document saved by save_to_json

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file does not hold a valid parsed document
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Parsed document file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict) or 'version' not in data:
            raise ValueError(
                f"File does not contain valid parsed document data: {file_path}"
            )
        data.pop('version')

        try:
            return ParsedDocument.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid parsed document in {file_path}: {exc}") from exc


def status_for(diagnostics) -> DocumentStatus:
    """ERROR iff at least one diagnostic has error severity."""
    if any(d.severity is Severity.ERROR for d in diagnostics):
        return DocumentStatus.ERROR
    return DocumentStatus.VALIDATED
