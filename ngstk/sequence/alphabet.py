"""
Closed alphabets for biological sequences.

Every alphabet is an Enum whose values are the canonical one-character
forms. Decoding is total: any character that is not part of the alphabet
becomes the alphabet's unknown symbol instead of raising.
"""

from enum import Enum


class SequenceElement(Enum):
    """Base class for the symbols of a sequence alphabet."""

    @classmethod
    def unknown(cls):
        """Return the symbol used for characters that can not be decoded."""
        raise NotImplementedError

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str) and len(value) == 1 and value != value.upper():
            return cls(value.upper())
        return cls.unknown()

    @classmethod
    def from_char(cls, char):
        """Decode a single character, falling back to the unknown symbol."""
        return cls(char)

    @property
    def char(self):
        return self.value

    @property
    def code(self):
        """Numeric code of the symbol, used for array encodings."""
        return ord(self.value)

    def is_unknown(self):
        return self is self.unknown()

    # Total order: alphabetical by canonical character
    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented

    def __le__(self, other):
        if self.__class__ is other.__class__:
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other):
        if self.__class__ is other.__class__:
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other):
        if self.__class__ is other.__class__:
            return self.value >= other.value
        return NotImplemented

    def __str__(self):
        return self.value


class DnaNucleotide(SequenceElement):
    """DNA nucleotide."""
    A = "A"
    C = "C"
    G = "G"
    T = "T"
    N = "N"

    @classmethod
    def unknown(cls):
        return cls.N

    @property
    def code(self):
        return _NUCLEOTIDE_CODES[self.value]

    def complement(self):
        return _DNA_COMPLEMENT[self]

    def to_rna(self):
        """Map onto the RNA alphabet on the same strand (T becomes U)."""
        return RnaNucleotide("U" if self is DnaNucleotide.T else self.value)


class RnaNucleotide(SequenceElement):
    """RNA nucleotide."""
    A = "A"
    C = "C"
    G = "G"
    U = "U"
    N = "N"

    @classmethod
    def unknown(cls):
        return cls.N

    @property
    def code(self):
        return _NUCLEOTIDE_CODES[self.value]

    def complement(self):
        return _RNA_COMPLEMENT[self]

    def to_dna(self):
        return DnaNucleotide("T" if self is RnaNucleotide.U else self.value)


class AminoAcid(SequenceElement):
    """
    Amino acid residue, including the stop signal and an unknown residue.

    The one-letter IUPAC codes are the values; `three_letter` gives the
    three-letter abbreviation.
    """
    ALA = "A"
    ARG = "R"
    ASN = "N"
    ASP = "D"
    CYS = "C"
    GLU = "E"
    GLN = "Q"
    GLY = "G"
    HIS = "H"
    ILE = "I"
    LEU = "L"
    LYS = "K"
    MET = "M"
    PHE = "F"
    PRO = "P"
    SER = "S"
    THR = "T"
    TRP = "W"
    TYR = "Y"
    VAL = "V"
    UNKNOWN = "X"
    STOP = "*"

    @classmethod
    def unknown(cls):
        return cls.UNKNOWN

    @property
    def three_letter(self):
        if self is AminoAcid.STOP:
            return "Ter"
        if self is AminoAcid.UNKNOWN:
            return "Xaa"
        return self.name.capitalize()

    def is_stop(self):
        return self is AminoAcid.STOP


_NUCLEOTIDE_CODES = {"A": 1, "C": 2, "G": 3, "T": 4, "U": 4, "N": 0}

_DNA_COMPLEMENT = {
    DnaNucleotide.A: DnaNucleotide.T,
    DnaNucleotide.C: DnaNucleotide.G,
    DnaNucleotide.G: DnaNucleotide.C,
    DnaNucleotide.T: DnaNucleotide.A,
    DnaNucleotide.N: DnaNucleotide.N,
}

_RNA_COMPLEMENT = {
    RnaNucleotide.A: RnaNucleotide.U,
    RnaNucleotide.C: RnaNucleotide.G,
    RnaNucleotide.G: RnaNucleotide.C,
    RnaNucleotide.U: RnaNucleotide.A,
    RnaNucleotide.N: RnaNucleotide.N,
}
