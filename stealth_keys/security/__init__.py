# stealth_keys/security/__init__.py
"""
Stealth Keys Security Layer

Homoglyph detection for human-readable recipient names.
"""

from .confusables import (
    CONFUSABLES,
    ZERO_WIDTH_POINTS,
    make_skeleton,
    is_confusing,
    confusable_characters,
    describe,
)

__all__ = [
    "CONFUSABLES",
    "ZERO_WIDTH_POINTS",
    "make_skeleton",
    "is_confusing",
    "confusable_characters",
    "describe",
]
