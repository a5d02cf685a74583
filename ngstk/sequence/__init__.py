"""
Sequence model: closed alphabets, codons and typed sequences.
"""

from ngstk.sequence.alphabet import (
    SequenceElement,
    DnaNucleotide,
    RnaNucleotide,
    AminoAcid,
)
from ngstk.sequence.codon import (
    DEFAULT_CODON_TABLE_ID,
    Codon,
    codon_table,
    translate_codon,
)
from ngstk.sequence.sequence import (
    Sequence,
    NucleotideSequence,
    DnaSequence,
    RnaSequence,
    Peptide,
)

__all__ = [
    "SequenceElement",
    "DnaNucleotide",
    "RnaNucleotide",
    "AminoAcid",
    "DEFAULT_CODON_TABLE_ID",
    "Codon",
    "codon_table",
    "translate_codon",
    "Sequence",
    "NucleotideSequence",
    "DnaSequence",
    "RnaSequence",
    "Peptide",
]
