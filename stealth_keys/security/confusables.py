# stealth_keys/security/confusables.py
"""
Stealth Keys Security: Confusable Character Detection

Anti-phishing guard for name lookups. A name is "confusing" when its
skeleton (each code point replaced by its canonical lookalike) differs
from the name itself, e.g. a Cyrillic U+0456 standing in for a Latin "i".

The table lives in data/confusables.json as hex code point pairs and is
loaded once at import. It is never mutated afterwards.

Zero-width handling:
    U+200B, U+200C, U+200D, U+FEFF, U+2028 and U+2029 are dropped from
    the skeleton. Line/paragraph separators are not zero-width when
    rendered but are treated as such, matching wallet phishing
    checks. Because the original string keeps them, any of these
    code points makes a string confusing.

Usage:
    from stealth_keys.security import is_confusing

    is_confusing("vitalik.eth")        # False
    is_confusing("v\u0456talik.eth")  # True

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


# =============================================================================
# Constants
# =============================================================================

TABLE_PATH = Path(__file__).parent / "data" / "confusables.json"

ZERO_WIDTH_POINTS = frozenset({
    "\u200b",  # zero width space
    "\u200c",  # zero width non-joiner
    "\u200d",  # zero width joiner
    "\ufeff",  # zero width no-break space
    "\u2028",  # line separator
    "\u2029",  # paragraph separator
})


def _load_table() -> Mapping[str, str]:
    """Load the confusables table from its JSON file."""
    with open(TABLE_PATH, encoding="utf-8") as f:
        data = json.load(f)
    entries: Dict[str, str] = data.get("confusables", data)
    table = {chr(int(src, 16)): chr(int(dst, 16)) for src, dst in entries.items()}
    return MappingProxyType(table)


CONFUSABLES: Mapping[str, str] = _load_table()


# =============================================================================
# Skeleton
# =============================================================================

def make_skeleton(input_str: str) -> List[str]:
    """
    Build the skeleton of a string.

    Each code point is replaced by its canonical lookalike; zero-width
    code points are dropped.
    """
    return [CONFUSABLES.get(point, point) for point in input_str if point not in ZERO_WIDTH_POINTS]


def is_confusing(input_str: str) -> bool:
    """Return True if the string contains confusable or zero-width characters."""
    skeleton = make_skeleton(input_str)
    original = list(input_str)
    if len(skeleton) != len(original):
        return True
    for canonical, point in zip(skeleton, original):
        if canonical != point:
            return True
    return False


def confusable_characters(input_str: str) -> List[Tuple[int, str, str]]:
    """
    List offending characters as (index, original, canonical).

    Zero-width code points are reported with an empty canonical.
    """
    found: List[Tuple[int, str, str]] = []
    for index, point in enumerate(input_str):
        if point in ZERO_WIDTH_POINTS:
            found.append((index, point, ""))
        elif point in CONFUSABLES:
            found.append((index, point, CONFUSABLES[point]))
    return found


def describe(input_str: str) -> str:
    """Human-readable summary of confusable characters, for logs."""
    parts = []
    for index, point, canonical in confusable_characters(input_str):
        target = f"'{canonical}'" if canonical else "zero-width"
        parts.append(f"U+{ord(point):04X}@{index}->{target}")
    return ", ".join(parts)
