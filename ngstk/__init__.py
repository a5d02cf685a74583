"""
ngstk: sequence, coordinate, alignment and variant models for NGS data.
"""

__version__ = "0.1.0"

from ngstk.sequence import (
    DnaNucleotide,
    RnaNucleotide,
    AminoAcid,
    Codon,
    DnaSequence,
    RnaSequence,
    Peptide,
    translate_codon,
)
from ngstk.models import (
    GenomicInterval,
    IntervalParseError,
    GenomicRegion,
    RegionLengthError,
    Strand,
)
from ngstk.analysis import (
    Alignment,
    AlignmentOperation,
    AlignmentSegment,
    SegmentKind,
    Pileup,
    Variant,
    VariantType,
    normalize,
)

__all__ = [
    "DnaNucleotide",
    "RnaNucleotide",
    "AminoAcid",
    "Codon",
    "DnaSequence",
    "RnaSequence",
    "Peptide",
    "translate_codon",
    "GenomicInterval",
    "IntervalParseError",
    "GenomicRegion",
    "RegionLengthError",
    "Strand",
    "Alignment",
    "AlignmentOperation",
    "AlignmentSegment",
    "SegmentKind",
    "Pileup",
    "Variant",
    "VariantType",
    "normalize",
]
