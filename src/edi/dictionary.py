"""
Segment dictionary: tag -> human-readable description.

The table is illustrative, not exhaustive. Extra tag sets are added by
merging, which returns a new dictionary and leaves the original untouched.

Usage:
    >>> from src.edi.dictionary import DEFAULT_DICTIONARY
    >>> DEFAULT_DICTIONARY.describe("BEG")
    'Beginning Segment for Purchase Order'
    >>> extended = DEFAULT_DICTIONARY.merge({"MSG": "Message Text"})
"""

from types import MappingProxyType
from typing import Iterator, Mapping

from .constants import DEFAULT_SEGMENT_DESCRIPTIONS, UNKNOWN_SEGMENT_DESCRIPTION


class SegmentDictionary:
    """Immutable tag -> description lookup"""

    __slots__ = ('_entries',)

    def __init__(self, entries: Mapping[str, str]):
        self._entries = MappingProxyType(dict(entries))

    def describe(self, tag: str) -> str:
        """Description for ``tag``, or "Unknown Segment" if the tag is absent"""
        return self._entries.get(tag, UNKNOWN_SEGMENT_DESCRIPTION)

    def merge(self, extra: Mapping[str, str]) -> 'SegmentDictionary':
        """New dictionary with ``extra`` layered over this one"""
        merged = dict(self._entries)
        merged.update(extra)
        return SegmentDictionary(merged)

    def as_mapping(self) -> Mapping[str, str]:
        return self._entries

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SegmentDictionary({len(self)} tags)"


DEFAULT_DICTIONARY = SegmentDictionary(DEFAULT_SEGMENT_DESCRIPTIONS)
