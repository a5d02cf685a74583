"""
Alignment of a query sequence against a template sequence.

An alignment is an ordered list of segments. Each segment covers a stretch
of the query and, if it is aligned, a stretch of the template. Whether a
segment is a match, mismatch, insertion, deletion or complex change is
always computed from its coordinates and the sequences, never stored.
"""

import logging
from collections import Counter
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ngstk.models.interval import GenomicInterval
from ngstk.sequence import NucleotideSequence, Sequence


class AlignmentOperation(Enum):
    """Alignment operations consumed when building an alignment."""
    MATCH = "M"
    INSERTION = "I"
    DELETION = "D"
    SOFT_CLIP = "S"
    SKIP = "N"


class SegmentKind(Enum):
    """Classification of an aligned segment."""
    MATCH = "match"
    MISMATCH = "mismatch"
    INSERTION = "insertion"
    DELETION = "deletion"
    COMPLEX = "complex"


# CIGAR letters and the operation they map to. '=' and 'X' are treated
# as aligned runs; the classification decides whether they match.
_CIGAR_OPERATIONS = {
    "M": AlignmentOperation.MATCH,
    "=": AlignmentOperation.MATCH,
    "X": AlignmentOperation.MATCH,
    "I": AlignmentOperation.INSERTION,
    "D": AlignmentOperation.DELETION,
    "S": AlignmentOperation.SOFT_CLIP,
    "N": AlignmentOperation.SKIP,
}

# BAM numeric operation codes, in the order of the SAM specification
_BAM_CIGAR_CODES = "MIDNSHP=X"


def decode_cigar_operations(pairs: Iterable[Tuple]) -> List[Tuple[AlignmentOperation, int]]:
    """
    Convert decoded CIGAR (operation, length) pairs into alignment operations.

    Operations may be given as CIGAR letters or as BAM numeric codes. Hard
    clips, padding and anything unrecognised do not touch the stored query
    or template and are skipped.

    Args:
        pairs: Iterable of (operation, length) tuples

    Returns:
        List of (AlignmentOperation, length) tuples
    """
    operations = []
    for op, length in pairs:
        if isinstance(op, int) and 0 <= op < len(_BAM_CIGAR_CODES):
            op = _BAM_CIGAR_CODES[op]
        operation = _CIGAR_OPERATIONS.get(op)
        if operation is None:
            logging.debug(f"Skipping CIGAR operation {op!r} of length {length}")
            continue
        operations.append((operation, int(length)))
    return operations


@dataclass(frozen=True)
class AlignmentSegment:
    """
    One part of an alignment.

    A segment is aligned if both template coordinates are set. If
    `is_reverse` is set, the query slice is reverse complemented before it
    is compared with the template.
    """
    template: Optional[Sequence]
    query: Sequence
    query_offset: int
    query_length: int
    template_offset: Optional[int] = None
    template_length: Optional[int] = None
    is_reverse: bool = False

    @property
    def query_end(self) -> int:
        return self.query_offset + self.query_length

    @property
    def template_end(self) -> Optional[int]:
        if not self.is_aligned():
            return None
        return self.template_offset + self.template_length

    def is_aligned(self) -> bool:
        return (self.template is not None
                and self.template_offset is not None
                and self.template_length is not None)

    def query_slice(self) -> Sequence:
        """The covered part of the query as stored, without orientation."""
        return self.query.slice(self.query_offset, self.query_length)

    def template_slice(self) -> Optional[Sequence]:
        """The covered part of the template, or None for unaligned segments."""
        if not self.is_aligned():
            return None
        return self.template.slice(self.template_offset, self.template_length)

    def sequence_slice(self) -> Optional[Sequence]:
        """
        The query slice oriented like the template.

        Returns None for unaligned segments.
        """
        if not self.is_aligned():
            return None
        piece = self.query_slice()
        if self.is_reverse:
            if isinstance(piece, NucleotideSequence):
                return piece.reverse_complement()
            return piece.reverse()
        return piece

    def is_match(self) -> bool:
        return (self.is_aligned()
                and self.template_length == self.query_length
                and self.template_slice() == self.sequence_slice())

    def is_mismatch(self) -> bool:
        return (self.is_aligned()
                and self.template_length == self.query_length
                and self.template_slice() != self.sequence_slice())

    def is_insertion(self) -> bool:
        return self.is_aligned() and self.template_length == 0 and self.query_length > 0

    def is_deletion(self) -> bool:
        return self.is_aligned() and self.template_length > 0 and self.query_length == 0

    def is_complex(self) -> bool:
        return (self.is_aligned()
                and self.template_length > 0
                and self.query_length > 0
                and self.template_length != self.query_length)

    def kind(self) -> Optional[SegmentKind]:
        """Classify the segment; None if it is not aligned."""
        if not self.is_aligned():
            return None
        if self.template_length == self.query_length:
            if self.template_slice() == self.sequence_slice():
                return SegmentKind.MATCH
            return SegmentKind.MISMATCH
        if self.template_length == 0:
            return SegmentKind.INSERTION
        if self.query_length == 0:
            return SegmentKind.DELETION
        return SegmentKind.COMPLEX

    def __str__(self):
        if not self.is_aligned():
            return f"unaligned[{self.query_offset}:{self.query_end}]"
        return (f"{self.kind().value}[{self.query_offset}:{self.query_end}]"
                f"->[{self.template_offset}:{self.template_end}]")


class Alignment:
    """
    Alignment of a query against a template.

    The segments are expected to cover the query completely and in order;
    `is_fully_covered` checks this.
    """

    def __init__(self, template: Optional[Sequence], query: Sequence, segments=()):
        self.template = template
        self.query = query
        self.segments = tuple(segments)

    @classmethod
    def from_operations(cls, template: Sequence, query: Sequence, operations,
                        template_offset: int = 0, is_reverse: bool = False) -> "Alignment":
        """
        Build an alignment by walking template and query cursors.

        Args:
            template: Template (reference) sequence
            query: Query (read) sequence
            operations: Iterable of (AlignmentOperation, length) tuples
            template_offset: Template position where the first operation starts
            is_reverse: Whether the query is aligned in reverse orientation

        Returns:
            The alignment

        Raises:
            ValueError: if an operation is not an AlignmentOperation
        """
        template_pos = template_offset
        query_pos = 0
        segments = []

        for op, length in operations:
            operation = AlignmentOperation(op)
            if length < 0:
                raise ValueError(f"Negative length {length} for operation {operation.name}")

            if operation is AlignmentOperation.MATCH:
                segments.append(AlignmentSegment(template, query, query_pos, length,
                                                 template_pos, length, is_reverse))
                query_pos += length
                template_pos += length
            elif operation is AlignmentOperation.INSERTION:
                segments.append(AlignmentSegment(template, query, query_pos, length,
                                                 template_pos, 0, is_reverse))
                query_pos += length
            elif operation is AlignmentOperation.DELETION:
                segments.append(AlignmentSegment(template, query, query_pos, 0,
                                                 template_pos, length, is_reverse))
                template_pos += length
            elif operation is AlignmentOperation.SOFT_CLIP:
                segments.append(AlignmentSegment(None, query, query_pos, length))
                query_pos += length
            elif operation is AlignmentOperation.SKIP:
                template_pos += length

        if query_pos != query.length():
            logging.warning(
                f"Alignment operations cover {query_pos} of {query.length()} query elements"
            )

        return cls(template, query, segments)

    def is_fully_covered(self) -> bool:
        """True if the segments' query slices rebuild the query in order."""
        position = 0
        for segment in self.segments:
            if segment.query_offset != position:
                return False
            position = segment.query_end
        return position == self.query.length()

    def reconstruct_query(self) -> Sequence:
        """Concatenate the query slices of all segments."""
        result = self.query.slice(0, 0)
        for segment in self.segments:
            result = result + segment.query_slice()
        return result

    def aligned_segments(self) -> List[AlignmentSegment]:
        return [s for s in self.segments if s.is_aligned()]

    def kind_counts(self) -> Counter:
        """Count segments per SegmentKind; unaligned segments are counted under None."""
        return Counter(s.kind() for s in self.segments)

    def template_interval(self, reference_name: str) -> Optional[GenomicInterval]:
        """Template range spanned by the aligned segments."""
        aligned = self.aligned_segments()
        if not aligned:
            return None
        start = min(s.template_offset for s in aligned)
        end = max(s.template_end for s in aligned)
        return GenomicInterval(reference_name, start, end - start)

    def canonicalize(self) -> "Alignment":
        """
        Merge adjacent insertion segments.

        Two insertions are merged if the second continues the first on the
        query, both are anchored at the same template position and share
        the orientation.
        """
        merged = []
        for segment in self.segments:
            previous = merged[-1] if merged else None
            if (previous is not None
                    and previous.is_insertion() and segment.is_insertion()
                    and previous.query_end == segment.query_offset
                    and previous.template_offset == segment.template_offset
                    and previous.is_reverse == segment.is_reverse):
                merged[-1] = replace(previous, query_length=previous.query_length + segment.query_length)
            else:
                merged.append(segment)
        return Alignment(self.template, self.query, merged)

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __repr__(self):
        return f"Alignment(query_length={self.query.length()}, segments={len(self.segments)})"
