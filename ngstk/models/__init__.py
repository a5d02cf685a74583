"""
Genomic coordinate models: intervals, strands and regions.
"""

from ngstk.models.interval import GenomicInterval, IntervalParseError
from ngstk.models.strand import Strand
from ngstk.models.region import GenomicRegion, RegionLengthError

__all__ = [
    "GenomicInterval",
    "IntervalParseError",
    "Strand",
    "GenomicRegion",
    "RegionLengthError",
]
