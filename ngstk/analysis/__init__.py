"""
Alignment and variant analysis on top of the sequence and coordinate models.
"""

from ngstk.analysis.alignment import (
    AlignmentOperation,
    SegmentKind,
    AlignmentSegment,
    Alignment,
    decode_cigar_operations,
)
from ngstk.analysis.pileup import Pileup
from ngstk.analysis.variant import (
    VariantType,
    Variant,
    normalize,
    classify,
    variants_from_alignment,
    apply_variants,
)

__all__ = [
    "AlignmentOperation",
    "SegmentKind",
    "AlignmentSegment",
    "Alignment",
    "decode_cigar_operations",
    "Pileup",
    "VariantType",
    "Variant",
    "normalize",
    "classify",
    "variants_from_alignment",
    "apply_variants",
]
