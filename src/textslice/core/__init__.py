"""Core range and encoding primitives.

This package holds the character range value type and the UTF-8 boundary
scanner the substring functions are built on.
"""

from .ranges import UNBOUNDED, CharRange
from . import utf8

__all__ = ["CharRange", "UNBOUNDED", "utf8"]
