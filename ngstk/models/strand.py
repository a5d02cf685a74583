"""
Strand of a genomic feature.
"""

from enum import Enum


class Strand(Enum):
    """Enumeration of DNA strands."""
    FORWARD = "+"
    BACKWARD = "-"

    @classmethod
    def parse(cls, text: str) -> "Strand":
        """Parse '+' or '-', ignoring surrounding whitespace."""
        stripped = text.strip() if isinstance(text, str) else ""
        if stripped[:1] == "+":
            return cls.FORWARD
        if stripped[:1] == "-":
            return cls.BACKWARD
        raise ValueError(f"Can not parse strand '{text}'")

    def is_reverse(self) -> bool:
        return self is Strand.BACKWARD

    def __str__(self):
        return self.value
