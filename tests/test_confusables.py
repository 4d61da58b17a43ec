# tests/test_confusables.py
"""
Stealth Keys Confusable Detection Test Suite

Categories:
  C1. ASCII names
  C2. Homoglyphs
  C3. Zero-width code points
  C4. Table
"""

import string

import pytest

from stealth_keys import is_confusing
from stealth_keys.security import (
    CONFUSABLES,
    ZERO_WIDTH_POINTS,
    confusable_characters,
    describe,
    make_skeleton,
)


# =============================================================================
# C1. ASCII names
# =============================================================================

@pytest.mark.parametrize("name", ["vitalik.eth", "msolomon.eth", "udtestdev-msolomon.crypto", "", "0x1234"])
def test_c1_1_ascii_is_not_confusing(name):
    assert is_confusing(name) is False


def test_c1_2_every_printable_ascii_character():
    assert not is_confusing(string.printable)


# =============================================================================
# C2. Homoglyphs
# =============================================================================

@pytest.mark.parametrize("name", [
    "v\u0456talik.eth",          # Cyrillic i
    "\u0430lice.eth",            # Cyrillic a
    "b\u03bfb.eth",              # Greek omicron
    "\uff41lice.eth",            # fullwidth a
    "\U0001d41alice.eth",        # mathematical bold a
    "alic\u212f.crypto",         # script e
])
def test_c2_1_homoglyphs_are_confusing(name):
    assert is_confusing(name) is True


def test_c2_2_every_table_entry_is_confusing():
    for point in CONFUSABLES:
        assert is_confusing("name" + point + ".eth"), f"U+{ord(point):04X}"


def test_c2_3_skeleton_maps_to_canonical():
    assert "".join(make_skeleton("v\u0456talik")) == "vitalik"


def test_c2_4_reports_offending_characters():
    found = confusable_characters("v\u0456talik")
    assert found == [(1, "\u0456", "i")]
    assert "U+0456@1" in describe("v\u0456talik")


# =============================================================================
# C3. Zero-width code points
# =============================================================================

@pytest.mark.parametrize("point", sorted(ZERO_WIDTH_POINTS))
def test_c3_1_zero_width_is_confusing(point):
    assert is_confusing("alice" + point + ".eth")


def test_c3_2_zero_width_dropped_from_skeleton():
    assert make_skeleton("a\u200bb\u2028c") == ["a", "b", "c"]


def test_c3_3_separators_count_as_zero_width():
    assert "\u2028" in ZERO_WIDTH_POINTS
    assert "\u2029" in ZERO_WIDTH_POINTS


# =============================================================================
# C4. Table
# =============================================================================

def test_c4_1_table_has_no_ascii_sources():
    assert all(ord(point) > 0x7F for point in CONFUSABLES)


def test_c4_2_table_is_read_only():
    with pytest.raises(TypeError):
        CONFUSABLES["a"] = "b"  # type: ignore[index]
