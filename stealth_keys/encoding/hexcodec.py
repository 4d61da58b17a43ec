# stealth_keys/encoding/hexcodec.py
"""
Stealth Keys Encoding: Hex Codec

Fixed-width hex padding and prefix handling for key material.

Internally hex is kept bare (no "0x"); the prefix is only added or
stripped at API boundaries.

Usage:
    from stealth_keys.encoding import pad_hex

    pad_hex("1234")       # 60 zeros + "1234"
    pad_hex("1234", 16)   # 28 zeros + "1234"

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

import re
from typing import Optional

from ..errors import InvalidHexInput


# =============================================================================
# Constants
# =============================================================================

HEX_PREFIX = "0x"

# Supported field widths in bytes
BYTE_WIDTHS = (16, 32)

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


# =============================================================================
# Helpers
# =============================================================================

def is_hex(value: object, length: Optional[int] = None) -> bool:
    """
    Check for a 0x-prefixed hex string.

    Args:
        value: Candidate value
        length: Required number of hex digits after the prefix (any if None)
    """
    if not isinstance(value, str) or not value.startswith(HEX_PREFIX):
        return False
    digits = value[len(HEX_PREFIX):]
    if length is not None and len(digits) != length:
        return False
    return bool(_HEX_RE.fullmatch(digits))


def strip_hex_prefix(value: str) -> str:
    """Remove a leading 0x/0X if present."""
    if value[:2].lower() == HEX_PREFIX:
        return value[2:]
    return value


def add_hex_prefix(value: str) -> str:
    """Add a 0x prefix unless one is already there."""
    if value[:2].lower() == HEX_PREFIX:
        return value
    return HEX_PREFIX + value


# =============================================================================
# Padding
# =============================================================================

def pad_hex(value: str, byte_width: int = 32) -> str:
    """
    Left-pad a bare hex string to a fixed width.

    Args:
        value: Hex digits without 0x prefix
        byte_width: Target width in bytes (16 or 32)

    Returns:
        Exactly 2 * byte_width hex digits

    Raises:
        InvalidHexInput: On 0x prefix, non-hex characters or overflow
    """
    if not isinstance(value, str) or not _HEX_RE.fullmatch(value):
        # Also catches "0x..." since "x" is not a hex digit
        raise InvalidHexInput()

    if byte_width not in BYTE_WIDTHS:
        raise InvalidHexInput(f"Unsupported byte width: {byte_width}")

    width = 2 * byte_width
    if len(value) > width:
        raise InvalidHexInput(f"Hex value longer than {byte_width} bytes: {len(value)} digits")

    return value.rjust(width, "0")
