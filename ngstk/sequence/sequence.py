"""
Sequence container shared by DNA, RNA and peptide sequences.

A sequence is an immutable tuple of alphabet symbols. Subclasses only pick
the alphabet and add the operations that make sense for it (complement for
nucleotides, codons and translation for DNA).
"""

from typing import List, Optional

import numpy as np
from Bio.Seq import Seq

from ngstk.sequence.alphabet import AminoAcid, DnaNucleotide, RnaNucleotide, SequenceElement
from ngstk.sequence.codon import DEFAULT_CODON_TABLE_ID, Codon, translate_codon


class Sequence:
    """
    Ordered, immutable list of symbols from one alphabet.

    Items passed to the constructor are decoded through the alphabet, so
    both symbols and characters are accepted. Symbols of another alphabet
    are decoded by their character; anything unrecognised becomes the
    unknown symbol.
    """

    alphabet = None

    __slots__ = ("_elements",)

    def __init__(self, elements=()):
        self._elements = tuple(self._decode(e) for e in elements)

    @classmethod
    def _decode(cls, element):
        # Symbols of another alphabet are read by their character
        if isinstance(element, SequenceElement) and not isinstance(element, cls.alphabet):
            element = element.value
        return cls.alphabet(element)

    @classmethod
    def from_characters(cls, text: str):
        """Decode text into a sequence, ignoring whitespace."""
        return cls(c for c in text if not c.isspace())

    @classmethod
    def _from_elements(cls, elements):
        seq = cls.__new__(cls)
        seq._elements = tuple(elements)
        return seq

    @property
    def elements(self):
        return self._elements

    def length(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def slice(self, offset: int, length: int):
        """
        Return the elements in [offset, offset + length).

        The requested range is clamped to the sequence, so asking for more
        than is available gives a shorter (possibly empty) sequence.
        """
        if offset < 0 or length < 0:
            raise ValueError(f"Offset and length must not be negative (offset={offset}, length={length})")
        return self._from_elements(self._elements[offset:offset + length])

    # Alias used by code that speaks of subsequences
    subsequence = slice

    def reverse(self):
        return self._from_elements(reversed(self._elements))

    def to_text(self) -> str:
        """Canonical characters of the sequence without whitespace."""
        return "".join(e.value for e in self._elements)

    def to_seq(self) -> Seq:
        """Return the sequence as a Biopython Seq."""
        return Seq(self.to_text())

    def to_array(self) -> np.ndarray:
        """Encode the sequence as an array of numeric symbol codes."""
        return np.fromiter((e.code for e in self._elements), dtype=np.uint8, count=len(self._elements))

    def as_list(self) -> List:
        return list(self._elements)

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._from_elements(self._elements[index])
        return self._elements[index]

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_elements(self._elements + other._elements)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elements == other._elements

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elements < other._elements

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elements <= other._elements

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elements > other._elements

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elements >= other._elements

    def __hash__(self):
        return hash((type(self).__name__, self._elements))

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"{type(self).__name__}('{self.to_text()}')"


class NucleotideSequence(Sequence):
    """Sequence over a nucleotide alphabet."""

    __slots__ = ()

    def complement(self):
        """Complementary strand, read in the same direction."""
        return self._from_elements(e.complement() for e in self._elements)

    def reverse_complement(self):
        """Complementary strand read 5' to 3'."""
        return self._from_elements(e.complement() for e in reversed(self._elements))

    # Name used for the strand that is actually read by polymerases
    reverse_strand = reverse_complement


class DnaSequence(NucleotideSequence):
    """DNA sequence."""

    alphabet = DnaNucleotide

    __slots__ = ()

    def frame(self, offset: int = 0) -> List[Codon]:
        """
        Split the sequence starting at `offset` into codons.

        A trailing group of one or two nucleotides is still returned, padded
        with N.
        """
        tail = self._elements[offset:]
        return [Codon.from_elements(tail[i:i + 3]) for i in range(0, len(tail), 3)]

    def codons(self) -> List[Codon]:
        return self.frame(0)

    def translate(self, offset: int = 0, table_id: int = DEFAULT_CODON_TABLE_ID) -> "Peptide":
        """Translate the reading frame starting at `offset` into a peptide."""
        return Peptide._from_elements(translate_codon(c, table_id=table_id) for c in self.frame(offset))

    def transcribe(self) -> "RnaSequence":
        """RNA with the same sense as this (coding) strand."""
        return RnaSequence._from_elements(e.to_rna() for e in self._elements)


class RnaSequence(NucleotideSequence):
    """RNA sequence."""

    alphabet = RnaNucleotide

    __slots__ = ()

    def back_transcribe(self) -> DnaSequence:
        return DnaSequence._from_elements(e.to_dna() for e in self._elements)

    def translate(self, offset: int = 0, table_id: int = DEFAULT_CODON_TABLE_ID) -> "Peptide":
        return self.back_transcribe().translate(offset, table_id=table_id)


class Peptide(Sequence):
    """Amino acid sequence."""

    alphabet = AminoAcid

    __slots__ = ()

    def to_three_letter(self, separator: str = "") -> str:
        return separator.join(e.three_letter for e in self._elements)

    def stop_position(self) -> Optional[int]:
        """Index of the first stop, or None if the peptide has none."""
        for i, residue in enumerate(self._elements):
            if residue.is_stop():
                return i
        return None
