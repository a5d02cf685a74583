"""
Genomic intervals.

Intervals are stored 0-based and half-open: `offset` elements precede the
interval on its reference and `end = offset + length` is the first position
after it. Text shown to people (and parsed from them) uses the 1-based,
inclusive `name:start-end` form.
"""

from dataclasses import dataclass
from typing import Optional


class IntervalParseError(ValueError):
    """Raised when interval text can not be parsed."""

    def __init__(self, text, reason):
        self.text = text
        self.reason = reason
        super().__init__(f"Can not parse interval '{text}': {reason}")


def _check_coordinate(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _is_digits(text):
    if not (text.isascii() and text.isdigit()):
        return False
    return text == "0" or not text.startswith("0")


@dataclass(frozen=True, eq=True)
class GenomicInterval:
    """A (reference name, offset, length) interval."""
    reference_name: str
    offset: int
    length: int

    def __post_init__(self):
        _check_coordinate("offset", self.offset)
        _check_coordinate("length", self.length)

    @classmethod
    def from_half_open(cls, reference_name: str, start: int, end: int) -> "GenomicInterval":
        """Create from 0-based half-open coordinates (BED convention)."""
        if end < start:
            raise ValueError(f"End {end} is before start {start}")
        return cls(reference_name, start, end - start)

    @classmethod
    def from_one_based(cls, reference_name: str, start: int, end: int) -> "GenomicInterval":
        """Create from 1-based inclusive coordinates (GTF/GFF convention)."""
        if start < 1:
            raise ValueError(f"Start position must be 1 or larger, got {start}")
        if end < start:
            raise ValueError(f"End {end} is before start {start}")
        return cls(reference_name, start - 1, end - start + 1)

    @classmethod
    def parse(cls, text: str) -> "GenomicInterval":
        """
        Parse a `name:start-end` string with 1-based inclusive coordinates.

        Args:
            text: Interval text such as "chr1:1232-1235"

        Returns:
            The parsed interval

        Raises:
            IntervalParseError: if the text is malformed, start is 0 or
                end is before start
        """
        stripped = text.strip()

        name, colon, coordinates = stripped.rpartition(":")
        if not colon:
            raise IntervalParseError(text, "missing ':' between reference name and coordinates")
        if not name:
            raise IntervalParseError(text, "missing reference name")

        start_text, dash, end_text = coordinates.partition("-")
        if not dash:
            raise IntervalParseError(text, "missing '-' between start and end position")

        # Only plain digits, so that display_string reproduces the text
        if not _is_digits(start_text):
            raise IntervalParseError(text, f"can not parse start position '{start_text}'")
        if not _is_digits(end_text):
            raise IntervalParseError(text, f"can not parse end position '{end_text}'")
        start = int(start_text)
        end = int(end_text)

        if start < 1:
            raise IntervalParseError(text, "start position must be 1 or larger")
        if end < start:
            raise IntervalParseError(text, "end position must be greater or equal start position")

        return cls(name, start - 1, end - start + 1)

    @property
    def end(self) -> int:
        return self.offset + self.length

    def is_empty(self) -> bool:
        return self.length == 0

    def contains(self, position: int) -> bool:
        """True if the 0-based `position` lies within the interval."""
        return self.offset <= position < self.end

    def overlap_length(self, other: "GenomicInterval") -> int:
        """Number of positions shared with `other`; 0 on different references."""
        if self.reference_name != other.reference_name:
            return 0
        start = max(self.offset, other.offset)
        end = min(self.end, other.end)
        return max(0, end - start)

    def overlaps(self, other: "GenomicInterval") -> bool:
        return self.overlap_length(other) > 0

    def intersect(self, other: "GenomicInterval") -> Optional["GenomicInterval"]:
        """
        Return the shared sub-interval.

        Intervals that just touch give an empty interval at the meeting
        point. None is returned for different references or disjoint
        intervals.
        """
        if self.reference_name != other.reference_name:
            return None
        start = max(self.offset, other.offset)
        end = min(self.end, other.end)
        if end < start:
            return None
        return GenomicInterval(self.reference_name, start, end - start)

    def compare(self, other: "GenomicInterval") -> int:
        """
        Compare by reference name, then offset, then length.

        Returns -1, 0 or 1. The order is total, so intervals from several
        references can be sorted together.
        """
        mine = (self.reference_name, self.offset, self.length)
        theirs = (other.reference_name, other.offset, other.length)
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other):
        if not isinstance(other, GenomicInterval):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, GenomicInterval):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, GenomicInterval):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, GenomicInterval):
            return NotImplemented
        return self.compare(other) >= 0

    def display_string(self) -> str:
        return f"{self.reference_name}:{self.offset + 1}-{self.end}"

    def __str__(self):
        return self.display_string()
