"""
Pydantic models for tokenized and validated EDI segments.

Contains:
- RawSegment: one tokenized input line (tag + positional elements)
- ValidatedSegment: RawSegment enriched with its dictionary description
  and the outcome of segment-level validation
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RawSegment(BaseModel):
    """
    Tokenized segment

    Identity is positional: two segments with identical tag and elements
    are distinct if they come from different input lines.

    Attributes:
        id: Opaque identifier ("seg_0", "seg_1", ...)
        position: 0-based index in the tokenized sequence, strictly increasing
        tag: Segment identifier (first token of the line)
        elements: Element values in order; interior empty elements are kept as ""
    """
    model_config = ConfigDict(frozen=True)

    id: str
    position: int = Field(ge=0)
    tag: str
    elements: Tuple[str, ...] = ()

    def element(self, index: int) -> str | None:
        """Return the element at 1-based ``index`` or None when absent."""
        if 1 <= index <= len(self.elements):
            return self.elements[index - 1]
        return None

    def __len__(self) -> int:
        return len(self.elements)


class ValidatedSegment(RawSegment):
    """
    Segment with dictionary description and validation outcome

    ``errors`` holds the message text of every diagnostic attached to this
    segment (warnings included); ``is_valid`` only reflects error severity.
    """
    description: str
    is_valid: bool = True
    errors: Tuple[str, ...] = ()

    @model_validator(mode='after')
    def _errors_imply_messages(self) -> 'ValidatedSegment':
        if not self.is_valid and not self.errors:
            raise ValueError(f"Invalid segment {self.id} must carry at least one message")
        return self
