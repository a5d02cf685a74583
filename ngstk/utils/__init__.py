"""
Utilities shared across ngstk.
"""

from ngstk.utils.logging import setup_logging

__all__ = ["setup_logging"]
