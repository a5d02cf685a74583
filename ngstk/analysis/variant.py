"""
Variant normalization, classification and application.

A variant replaces `reference` by `alternative`, where `reference` starts
`offset` elements into the named template. All derived values (normalized
form, type, interval) are computed on demand.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from ngstk.models.interval import GenomicInterval
from ngstk.sequence import Sequence


class VariantType(Enum):
    """Enumeration of variant types."""
    NONE = "NONE"
    SUBSTITUTION = "SUBSTITUTION"
    INSERTION = "INSERTION"
    DELETION = "DELETION"
    COMPLEX = "COMPLEX"


def _common_prefix_length(first, second) -> int:
    length = 0
    for a, b in zip(first, second):
        if a != b:
            break
        length += 1
    return length


def normalize(reference: Sequence, alternative: Sequence, offset: int) -> Tuple[int, Sequence, Sequence]:
    """
    Trim the common prefix and then the common suffix of a ref/alt pair.

    The prefix is removed first and the suffix is searched in what
    remains, so repeated motifs are attributed to the leftmost position.

    Args:
        reference: Reference sequence
        alternative: Alternative sequence
        offset: Position of the reference on its template

    Returns:
        Tuple of (new offset, trimmed reference, trimmed alternative)
    """
    prefix_length = _common_prefix_length(reference, alternative)
    ref_rest = reference[prefix_length:]
    alt_rest = alternative[prefix_length:]

    ref_reversed = ref_rest.reverse()
    alt_reversed = alt_rest.reverse()
    suffix_length = _common_prefix_length(ref_reversed, alt_reversed)

    trimmed_ref = ref_reversed[suffix_length:].reverse()
    trimmed_alt = alt_reversed[suffix_length:].reverse()

    return offset + prefix_length, trimmed_ref, trimmed_alt


def classify(reference_length: int, alternative_length: int) -> VariantType:
    """Classify a normalized variant from its reference and alternative lengths."""
    if reference_length == 0 and alternative_length == 0:
        return VariantType.NONE
    if reference_length == alternative_length:
        return VariantType.SUBSTITUTION
    if reference_length == 0:
        return VariantType.INSERTION
    if alternative_length == 0:
        return VariantType.DELETION
    return VariantType.COMPLEX


@dataclass(frozen=True)
class Variant:
    """Represents a sequence variant on a named template."""
    template_name: str
    offset: int
    reference: Sequence
    alternative: Sequence

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError(f"Variant offset must not be negative, got {self.offset}")
        if type(self.reference) is not type(self.alternative):
            raise ValueError(
                f"Reference and alternative must have the same sequence type "
                f"({type(self.reference).__name__} != {type(self.alternative).__name__})"
            )

    @property
    def reference_length(self) -> int:
        return self.reference.length()

    @property
    def alternative_length(self) -> int:
        return self.alternative.length()

    @property
    def length_change(self) -> int:
        return self.alternative.length() - self.reference.length()

    def normalized(self) -> Tuple[int, Sequence, Sequence]:
        return normalize(self.reference, self.alternative, self.offset)

    def normalized_variant(self) -> "Variant":
        offset, reference, alternative = self.normalized()
        return Variant(self.template_name, offset, reference, alternative)

    def variant_type(self) -> VariantType:
        _, reference, alternative = self.normalized()
        return classify(reference.length(), alternative.length())

    def interval(self) -> GenomicInterval:
        """Template interval replaced by the normalized variant."""
        offset, reference, _ = self.normalized()
        return GenomicInterval(self.template_name, offset, reference.length())

    def check_reference(self, full_sequence: Sequence) -> bool:
        """
        Check that the declared reference is found at the declared offset.

        The unnormalized reference is compared. A mismatch is logged as a
        warning and reported as False.
        """
        found = full_sequence.slice(self.offset, self.reference.length())
        if found == self.reference:
            return True
        logging.warning(
            f"Reference mismatch for variant on {self.template_name} at offset {self.offset}: "
            f"expected {self.reference}, found {found}"
        )
        return False

    def apply(self, full_sequence: Sequence) -> Sequence:
        """
        Splice the normalized alternative into `full_sequence`.

        The reference is not checked; call `check_reference` first.
        """
        offset, reference, alternative = self.normalized()
        return (full_sequence[:offset]
                + alternative
                + full_sequence[offset + reference.length():])

    def __str__(self):
        return f"{self.template_name}:{self.offset + 1}:{self.reference or '-'}>{self.alternative or '-'}"


def variants_from_alignment(alignment, template_name: str) -> List[Variant]:
    """
    Derive one variant per aligned segment that does not match its template.

    The reference is the template slice and the alternative the query slice
    oriented like the template.
    """
    variants = []
    for segment in alignment.segments:
        if not segment.is_aligned() or segment.is_match():
            continue
        variants.append(Variant(
            template_name,
            segment.template_offset,
            segment.template_slice(),
            segment.sequence_slice(),
        ))
    return variants


def apply_variants(full_sequence: Sequence, variants: Iterable[Variant],
                   allow_mismatches: bool = False) -> Sequence:
    """
    Apply several variants to a sequence from left to right.

    Offsets of later variants are shifted by the length changes of those
    already applied. A variant overlapping one that was already applied is
    skipped with a warning.

    Args:
        full_sequence: Template sequence the variant offsets refer to
        variants: Variants to apply
        allow_mismatches: Apply variants whose reference does not match
            instead of raising

    Returns:
        The modified sequence

    Raises:
        ValueError: on a reference mismatch unless allow_mismatches is set
    """
    ordered = sorted(variants, key=lambda v: v.normalized()[0])

    result = full_sequence
    shift = 0
    applied_end = 0

    for variant in ordered:
        offset, reference, alternative = variant.normalized()
        if offset < applied_end:
            logging.warning(f"Skipping variant {variant}: overlaps a previously applied variant")
            continue

        if not variant.check_reference(full_sequence):
            if not allow_mismatches:
                raise ValueError(
                    f"Reference mismatch for variant {variant}. Use allow_mismatches to force application."
                )
            logging.warning(f"Applying variant {variant} despite reference mismatch")

        logging.info(f"Applying {variant.variant_type().value} {variant} at offset {offset + shift}")
        shifted = Variant(variant.template_name, offset + shift, reference, alternative)
        result = shifted.apply(result)

        shift += alternative.length() - reference.length()
        applied_end = offset + reference.length()

    return result
