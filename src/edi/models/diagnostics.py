"""
Pydantic models for validation findings.

A Diagnostic is the only way the pipeline reports a defect: parsing never
raises for document content, it accumulates diagnostics instead.
"""

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Closed set of diagnostic severities."""
    ERROR = "error"      # Flips document status to error
    WARNING = "warning"  # Reported, never blocks
    INFO = "info"        # Non-blocking notice


def _new_diagnostic_id() -> str:
    return f"val_{uuid.uuid4().hex[:12]}"


class Diagnostic(BaseModel):
    """
    Single validation finding

    Attributes:
        id: Opaque identifier, unique per finding
        severity: error, warning or info
        segment_tag: Tag of the offending segment, or "FILE" for document-level rules
        segment_id: Id of the offending segment (None for document-level rules)
        element_index: 1-based element position the finding refers to
        message: Human-readable description
        suggestion: Optional remediation hint
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_diagnostic_id)
    severity: Severity
    segment_tag: str
    segment_id: Optional[str] = None
    element_index: Optional[int] = Field(default=None, ge=1)
    message: str
    suggestion: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        parts = [f"[{self.severity.value.upper()}]", f"{self.segment_tag}:", self.message]
        if self.element_index is not None:
            parts.append(f"(element {self.element_index})")
        if self.suggestion:
            parts.append(f"-> {self.suggestion}")
        return " ".join(parts)
