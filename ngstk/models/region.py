"""
Genomic regions: an interval together with the sequence it covers.
"""

from dataclasses import dataclass

from ngstk.models.interval import GenomicInterval
from ngstk.models.strand import Strand
from ngstk.sequence import DEFAULT_CODON_TABLE_ID, Sequence


class RegionLengthError(ValueError):
    """Raised when a region's sequence does not cover exactly its interval."""


@dataclass(frozen=True)
class GenomicRegion:
    """
    A genomic interval bound to its sequence.

    The sequence is always given on the forward strand; `strand` records
    on which strand the region is read.
    """
    interval: GenomicInterval
    sequence: Sequence
    strand: Strand = Strand.FORWARD

    def __post_init__(self):
        if self.sequence.length() != self.interval.length:
            raise RegionLengthError(
                f"Sequence of length {self.sequence.length()} does not match "
                f"interval {self.interval} of length {self.interval.length}"
            )

    @classmethod
    def from_sequence(cls, reference_name: str, offset: int, sequence: Sequence,
                      strand: Strand = Strand.FORWARD) -> "GenomicRegion":
        """Create a region whose interval is derived from the sequence length."""
        return cls(GenomicInterval(reference_name, offset, sequence.length()), sequence, strand)

    @property
    def reference_name(self) -> str:
        return self.interval.reference_name

    @property
    def offset(self) -> int:
        return self.interval.offset

    @property
    def length(self) -> int:
        return self.interval.length

    @property
    def end(self) -> int:
        return self.interval.end

    def overlaps(self, other) -> bool:
        return self.interval.overlaps(_interval_of(other))

    def overlap_length(self, other) -> int:
        return self.interval.overlap_length(_interval_of(other))

    def subsequence(self, start: int, length: int) -> "GenomicRegion":
        """
        Extract the sub-region starting at genomic position `start`.

        The request is clamped to the region, so the result may be shorter
        than `length` or empty.
        """
        requested = GenomicInterval(self.reference_name, start, length)
        shared = self.interval.intersect(requested)
        if shared is None:
            shared = GenomicInterval(self.reference_name, max(start, self.offset), 0)
            if shared.offset > self.end:
                shared = GenomicInterval(self.reference_name, self.end, 0)
        sub_sequence = self.sequence.slice(shared.offset - self.offset, shared.length)
        return GenomicRegion(shared, sub_sequence, self.strand)

    def stranded_sequence(self) -> Sequence:
        """The sequence as read on the region's strand."""
        if self.strand.is_reverse():
            return self.sequence.reverse_complement()
        return self.sequence

    def translate(self, offset: int = 0, table_id: int = DEFAULT_CODON_TABLE_ID):
        """Translate the stranded sequence of a DNA region."""
        return self.stranded_sequence().translate(offset, table_id=table_id)

    def display_string(self) -> str:
        return self.interval.display_string()

    def __str__(self):
        return f"{self.interval.display_string()}({self.strand})"


def _interval_of(item) -> GenomicInterval:
    if isinstance(item, GenomicRegion):
        return item.interval
    return item
