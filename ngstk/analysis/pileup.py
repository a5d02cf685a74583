"""
Pileup of aligned nucleotides over a template.
"""

import logging

import numpy as np

from ngstk.sequence import DnaNucleotide, DnaSequence, RnaSequence

# Column order of the count matrix
PILEUP_BASES = (DnaNucleotide.A, DnaNucleotide.C, DnaNucleotide.G, DnaNucleotide.T, DnaNucleotide.N)
_COLUMN = {base: i for i, base in enumerate(PILEUP_BASES)}


class Pileup:
    """
    Per-position nucleotide counts from alignments against one template.

    Only segments whose template and query lengths agree (matches and
    mismatches) contribute; insertions, deletions and complex segments have
    no position-wise correspondence.
    """

    def __init__(self, template_length: int):
        self.counts = np.zeros((template_length, len(PILEUP_BASES)), dtype=np.int64)

    @property
    def template_length(self) -> int:
        return self.counts.shape[0]

    def add_alignment(self, alignment):
        """
        Add the bases of an alignment's equal-length aligned segments.

        RNA queries are counted as DNA (U as T).

        Raises:
            TypeError: if the query is not a nucleotide sequence
        """
        if not isinstance(alignment.query, (DnaSequence, RnaSequence)):
            raise TypeError(
                f"Pileup counts nucleotides, got a {type(alignment.query).__name__} query"
            )

        added = 0
        for segment in alignment.segments:
            if not segment.is_aligned() or segment.template_length != segment.query_length:
                continue
            bases = segment.sequence_slice()
            if isinstance(bases, RnaSequence):
                bases = bases.back_transcribe()
            for i, base in enumerate(bases):
                position = segment.template_offset + i
                if position >= self.template_length:
                    break
                self.counts[position, _COLUMN[base]] += 1
                added += 1
        logging.debug(f"Added {added} bases to pileup")
        return added

    def count(self, position: int, base: DnaNucleotide) -> int:
        return int(self.counts[position, _COLUMN[DnaNucleotide(base)]])

    def depth(self, position: int) -> int:
        return int(self.counts[position].sum())

    def depths(self) -> np.ndarray:
        return self.counts.sum(axis=1)

    def consensus(self) -> DnaSequence:
        """
        Most frequent base per position.

        Positions without coverage become N. Ties are resolved in favour of
        the base that comes first in A, C, G, T, N order.
        """
        best = np.argmax(self.counts, axis=1)
        covered = self.depths() > 0
        return DnaSequence(
            PILEUP_BASES[column] if has_coverage else DnaNucleotide.N
            for column, has_coverage in zip(best, covered)
        )
