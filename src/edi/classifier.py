"""Transaction set classification from the first ST segment."""

from typing import Mapping, Sequence

from .constants import ST, TRANSACTION_SET_LABELS, UNKNOWN_TRANSACTION_TYPE
from .models import RawSegment


def label_for_code(code: str, labels: Mapping[str, str] = TRANSACTION_SET_LABELS) -> str:
    """Map a transaction set code to its label; unknown codes become "Transaction <code>"."""
    return labels.get(code, f"Transaction {code}")


def classify(
    segments: Sequence[RawSegment],
    labels: Mapping[str, str] = TRANSACTION_SET_LABELS,
) -> str:
    """
    Classify a document by its first transaction set header

    Only the first ST carrying a code is used; later ST segments in a
    batched interchange are not classified separately.

    Returns:
        str: Transaction label, or "Unknown" when no ST segment has a code
    """
    for segment in segments:
        if segment.tag == ST and segment.elements:
            return label_for_code(segment.elements[0], labels)
    return UNKNOWN_TRANSACTION_TYPE
