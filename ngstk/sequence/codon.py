"""
Codons and the genetic code.

The lookup tables are derived from Biopython's NCBI codon tables. Codons
containing an unknown base are resolved when every fully specified codon
consistent with the wildcard encodes the same residue (e.g. GCN is always
alanine); otherwise they translate to the unknown amino acid.
"""

import itertools
from functools import lru_cache
from typing import Dict, Iterable, NamedTuple

from Bio.Data import CodonTable

from ngstk.sequence.alphabet import AminoAcid, DnaNucleotide, RnaNucleotide

# NCBI translation table used when none is requested (standard code)
DEFAULT_CODON_TABLE_ID = 1

_BASES = (DnaNucleotide.A, DnaNucleotide.C, DnaNucleotide.G, DnaNucleotide.T)


def _as_dna(element) -> DnaNucleotide:
    if isinstance(element, RnaNucleotide):
        return element.to_dna()
    return DnaNucleotide(element)


class Codon(NamedTuple):
    """Three consecutive DNA nucleotides."""
    first: DnaNucleotide
    second: DnaNucleotide
    third: DnaNucleotide

    @classmethod
    def from_elements(cls, elements: Iterable[DnaNucleotide]) -> "Codon":
        """
        Build a codon from up to three nucleotides.

        Missing positions are filled with N, so partial codons at the end of
        a reading frame still translate. Characters are decoded, RNA
        nucleotides are mapped to DNA and anything else becomes N.
        """
        padded = [_as_dna(e) for e in itertools.islice(elements, 3)]
        padded += [DnaNucleotide.N] * (3 - len(padded))
        return cls(*padded)

    @classmethod
    def from_text(cls, text: str) -> "Codon":
        return cls.from_elements(DnaNucleotide(c) for c in text)

    def translate(self, table_id: int = DEFAULT_CODON_TABLE_ID) -> AminoAcid:
        return translate_codon(self, table_id=table_id)

    def is_complete(self) -> bool:
        """True if none of the bases is unknown."""
        return all(not base.is_unknown() for base in self)

    def __str__(self):
        return "".join(base.value for base in self)


@lru_cache(maxsize=None)
def codon_table(table_id: int = DEFAULT_CODON_TABLE_ID) -> Dict[Codon, AminoAcid]:
    """
    Return the full lookup table for an NCBI translation table.

    The table has an entry for each of the 125 triplets over A, C, G, T
    and N.
    """
    ncbi_table = CodonTable.unambiguous_dna_by_id[table_id]

    exact = {}
    for triplet, residue in ncbi_table.forward_table.items():
        exact[triplet] = AminoAcid(residue)
    for triplet in ncbi_table.stop_codons:
        exact[triplet] = AminoAcid.STOP

    table = {}
    for triplet in itertools.product(list(DnaNucleotide), repeat=3):
        choices = [_BASES if base.is_unknown() else (base,) for base in triplet]
        residues = {
            exact.get("".join(base.value for base in candidate), AminoAcid.UNKNOWN)
            for candidate in itertools.product(*choices)
        }
        if len(residues) == 1:
            table[Codon(*triplet)] = residues.pop()
        else:
            table[Codon(*triplet)] = AminoAcid.UNKNOWN

    return table


def translate_codon(codon, table_id: int = DEFAULT_CODON_TABLE_ID) -> AminoAcid:
    """
    Translate a codon into an amino acid.

    Args:
        codon: A Codon, a text triplet, or any iterable of up to three
            nucleotides or characters
        table_id: NCBI translation table

    Returns:
        The encoded AminoAcid, AminoAcid.STOP or AminoAcid.UNKNOWN
    """
    if isinstance(codon, str):
        codon = Codon.from_text(codon)
    elif not isinstance(codon, Codon):
        codon = Codon.from_elements(codon)
    return codon_table(table_id)[codon]
