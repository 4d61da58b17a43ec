# stealth_keys/encoding/__init__.py
"""
Stealth Keys Encoding Layer

Hex normalisation for public-key material.
"""

from .hexcodec import (
    HEX_PREFIX,
    BYTE_WIDTHS,
    pad_hex,
    is_hex,
    strip_hex_prefix,
    add_hex_prefix,
)

__all__ = [
    "HEX_PREFIX",
    "BYTE_WIDTHS",
    "pad_hex",
    "is_hex",
    "strip_hex_prefix",
    "add_hex_prefix",
]
