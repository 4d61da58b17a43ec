# tests/test_hexcodec.py
"""
Stealth Keys Hex Codec Test Suite

Categories:
  H1. Padding
  H2. Input validation
  H3. Prefix helpers
"""

import pytest

from stealth_keys import InvalidHexInput, pad_hex
from stealth_keys.encoding import add_hex_prefix, is_hex, strip_hex_prefix

PAD_ERROR = "Input must be a hex string without the 0x prefix"


# =============================================================================
# H1. Padding
# =============================================================================

def test_h1_1_pads_to_32_bytes_by_default():
    assert pad_hex("1234") == "0" * 60 + "1234"
    assert pad_hex("1234", 32) == "0" * 60 + "1234"


def test_h1_2_pads_to_16_bytes():
    assert pad_hex("1234", 16) == "00000000000000000000000000001234"


def test_h1_3_idempotent():
    for value in ("", "1", "abc", "00ff", "F" * 64):
        once = pad_hex(value)
        assert pad_hex(once) == once
        assert len(once) == 64


def test_h1_4_full_width_unchanged():
    full = "ab" * 32
    assert pad_hex(full) == full


# =============================================================================
# H2. Input validation
# =============================================================================

@pytest.mark.parametrize("value", ["q", "0x1", "12 34", "0X1", "12\n", "\n", "ab\ncd"])
def test_h2_1_rejects_non_hex_and_prefix(value):
    with pytest.raises(InvalidHexInput, match=PAD_ERROR) as exc:
        pad_hex(value)
    assert str(exc.value) == PAD_ERROR
    assert exc.value.kind == "invalid_hex_input"


def test_h2_2_rejects_overflow():
    with pytest.raises(InvalidHexInput):
        pad_hex("1" * 33, 16)


def test_h2_3_rejects_unsupported_width():
    with pytest.raises(InvalidHexInput):
        pad_hex("12", 20)


# =============================================================================
# H3. Prefix helpers
# =============================================================================

def test_h3_1_is_hex():
    assert not is_hex("0x" + "ab" * 19 + "a\n", 40)
    assert not is_hex("0x12\n")
    assert is_hex("0x" + "ab" * 20, 40)
    assert not is_hex("0x" + "ab" * 20, 64)
    assert not is_hex("ab" * 20)
    assert not is_hex("0xzz")
    assert not is_hex(1)


def test_h3_2_strip_and_add_prefix():
    assert strip_hex_prefix("0xabc") == "abc"
    assert strip_hex_prefix("abc") == "abc"
    assert add_hex_prefix("abc") == "0xabc"
    assert add_hex_prefix("0xabc") == "0xabc"
