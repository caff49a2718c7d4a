"""
Tokenizer for flat-text EDI X12 interchanges

Splits raw text into lines and each line into elements using a tolerant
delimiter class. Tokenization never rejects input: malformed lines become
segments with unrecognized tags and are left for validation to judge.
"""

import logging
import re
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from src.config import settings

from .constants import DEFAULT_SEPARATORS
from .models import RawSegment

logger = logging.getLogger(__name__)

LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')


class DelimiterConfig(BaseModel):
    """
    Candidate separator characters for the tokenizer

    Segment terminators and element separators are treated as one class,
    so '~', '*' and '|' are interchangeable within a line.
    """
    model_config = ConfigDict(frozen=True)

    separators: FrozenSet[str] = DEFAULT_SEPARATORS

    @field_validator('separators')
    @classmethod
    def _single_characters(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        if not value:
            raise ValueError("at least one separator is required")
        for sep in value:
            if len(sep) != 1 or sep in '\r\n':
                raise ValueError(f"separator must be a single non-newline character: {sep!r}")
        return value

    @classmethod
    def from_settings(cls) -> 'DelimiterConfig':
        """Build from settings.tokenizer.separators"""
        return cls(separators=frozenset(settings.tokenizer.separators))  # pylint: disable=no-member

    def pattern(self) -> re.Pattern:
        return _compile_separator_class(self.separators)


def _compile_separator_class(separators: FrozenSet[str]) -> re.Pattern:
    # sorted so the same set always yields the same pattern
    return re.compile('[' + ''.join(re.escape(s) for s in sorted(separators)) + ']')


DEFAULT_DELIMITERS = DelimiterConfig()


def split_line(line: str, pattern: re.Pattern) -> List[str]:
    """
    Split one trimmed line into tokens.

    Empty tokens produced purely by leading or trailing separators are
    dropped; interior empty tokens are kept so element positions stay
    accurate (``DTM**20240101`` -> ``['DTM', '', '20240101']``).
    """
    tokens = pattern.split(line)

    start, end = 0, len(tokens)
    while start < end and tokens[start] == '':
        start += 1
    while end > start and tokens[end - 1] == '':
        end -= 1

    return tokens[start:end]


def tokenize(
    raw_text: str,
    delimiters: Optional[DelimiterConfig] = None
) -> List[RawSegment]:
    """
    Tokenize raw EDI text into an ordered list of segments

    Args:
        raw_text: Already-materialized interchange text
        delimiters: Separator candidates (default: ~ * |)

    Returns:
        List[RawSegment]: One segment per non-blank line, in input order
    """
    if not raw_text:
        return []

    pattern = (delimiters or DEFAULT_DELIMITERS).pattern()
    segments: List[RawSegment] = []

    for line in LINE_BREAK_PATTERN.split(raw_text):
        line = line.strip()
        if not line:
            continue

        tokens = split_line(line, pattern)
        if not tokens:
            # line made only of separators
            logger.debug("Skipping separator-only line: %r", line)
            continue

        position = len(segments)
        segments.append(RawSegment(
            id=f"seg_{position}",
            position=position,
            tag=tokens[0].strip(),
            elements=tuple(tokens[1:]),
        ))

    logger.debug("Tokenized %d segments", len(segments))
    return segments
