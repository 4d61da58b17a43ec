# stealth_keys/keys.py
"""
Stealth Keys: Public Key Types

PublicKey: uncompressed secp256k1 point (04 || x || y), kept as 130 bare
lower-case hex digits. The 0x prefix is only added by to_hex().

KeyPair: spending + viewing public keys of a stealth recipient.

Usage:
    from stealth_keys.keys import PublicKey, KeyPair

    key = PublicKey.from_hex("0x04df3d...")
    pair = KeyPair.single(key)
    pair.to_dict()  # {"spendingPublicKey": "0x04...", "viewingPublicKey": "0x04..."}

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from eth_keys import keys as eth_keys
from eth_keys.exceptions import ValidationError as EthKeysValidationError

from .encoding import HEX_PREFIX, is_hex, pad_hex, strip_hex_prefix
from .errors import InvalidHexInput, InvalidPublicKey


# =============================================================================
# Constants
# =============================================================================

# secp256k1 field prime and curve coefficient (y^2 = x^3 + 7)
SECP256K1_P = 2**256 - 2**32 - 977
SECP256K1_B = 7

UNCOMPRESSED_PREFIX = "04"
COMPRESSED_PREFIXES = (2, 3)

# 04 + 64-digit x + 64-digit y
PUBLIC_KEY_HEX_LENGTH = 130


def is_on_curve(x: int, y: int) -> bool:
    """Check that (x, y) is an affine point on secp256k1."""
    if not (0 <= x < SECP256K1_P and 0 <= y < SECP256K1_P):
        return False
    return (y * y - x * x * x - SECP256K1_B) % SECP256K1_P == 0


# =============================================================================
# PublicKey
# =============================================================================

@dataclass(frozen=True)
class PublicKey:
    """
    Uncompressed secp256k1 public key.

    Attributes:
        value: 130 lower-case hex digits, no 0x prefix
    """
    value: str

    def __post_init__(self):
        value = self.value
        if not isinstance(value, str) or len(value) != PUBLIC_KEY_HEX_LENGTH:
            raise InvalidPublicKey(f"expected {PUBLIC_KEY_HEX_LENGTH} hex digits")
        if value != value.lower():
            raise InvalidPublicKey("hex must be lower-case")
        if not value.startswith(UNCOMPRESSED_PREFIX):
            raise InvalidPublicKey("missing 04 prefix")
        if not is_hex(HEX_PREFIX + value, PUBLIC_KEY_HEX_LENGTH):
            raise InvalidPublicKey("non-hex characters")
        x, y = int(value[2:66], 16), int(value[66:], 16)
        if not is_on_curve(x, y):
            raise InvalidPublicKey("point is not on secp256k1")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_hex(cls, value: str) -> PublicKey:
        """Parse a 0x-prefixed (or bare) uncompressed key."""
        if not isinstance(value, str):
            raise InvalidPublicKey(f"expected str, got {type(value).__name__}")
        return cls(strip_hex_prefix(value).lower())

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> PublicKey:
        """Build from integer affine coordinates."""
        try:
            x_hex = pad_hex(format(x, "x"))
            y_hex = pad_hex(format(y, "x"))
        except InvalidHexInput as e:
            raise InvalidPublicKey("coordinate out of range") from e
        return cls(UNCOMPRESSED_PREFIX + x_hex + y_hex)

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        """Build from 64 (x || y) or 65 (04 || x || y) bytes."""
        if len(data) == 64:
            data = b"\x04" + data
        if len(data) != 65:
            raise InvalidPublicKey(f"expected 64 or 65 bytes, got {len(data)}")
        return cls(data.hex())

    @classmethod
    def from_compressed(cls, prefix: int, x: int) -> PublicKey:
        """
        Decompress a point stored as (prefix, x).

        Registries store keys this way: prefix 2 or 3 encodes the parity
        of y, x is the full 32-byte coordinate.
        """
        if prefix not in COMPRESSED_PREFIXES:
            raise InvalidPublicKey(f"invalid compressed prefix: {prefix}")
        try:
            compressed = bytes.fromhex(format(prefix, "02x") + pad_hex(format(x, "x")))
            point = eth_keys.PublicKey.from_compressed_bytes(compressed)
        except (InvalidHexInput, EthKeysValidationError, ValueError) as e:
            raise InvalidPublicKey(f"cannot decompress point: {e}") from e
        return cls.from_bytes(point.to_bytes())

    @classmethod
    def from_eth_key(cls, key: eth_keys.PublicKey) -> PublicKey:
        """Convert an eth-keys public key."""
        return cls.from_bytes(key.to_bytes())

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def x(self) -> int:
        return int(self.value[2:66], 16)

    @property
    def y(self) -> int:
        return int(self.value[66:], 16)

    @property
    def address(self) -> str:
        """Checksum address controlled by this key."""
        return eth_keys.PublicKey(self.to_bytes()[1:]).to_checksum_address()

    def to_bytes(self) -> bytes:
        """65-byte uncompressed encoding."""
        return bytes.fromhex(self.value)

    def to_hex(self) -> str:
        """0x-prefixed uncompressed encoding."""
        return HEX_PREFIX + self.value

    def __str__(self) -> str:
        return self.to_hex()


# =============================================================================
# KeyPair
# =============================================================================

@dataclass(frozen=True)
class KeyPair:
    """
    Stealth recipient keys.

    Attributes:
        spending_public_key: Authorises fund movement
        viewing_public_key: Used to detect incoming payments
    """
    spending_public_key: PublicKey
    viewing_public_key: PublicKey

    @classmethod
    def single(cls, key: PublicKey) -> KeyPair:
        """Use one key for both roles (raw key / transaction hash lookups)."""
        return cls(spending_public_key=key, viewing_public_key=key)

    @classmethod
    def from_hex(cls, spending: Union[str, PublicKey], viewing: Union[str, PublicKey]) -> KeyPair:
        """Build from hex strings or PublicKey instances."""
        if not isinstance(spending, PublicKey):
            spending = PublicKey.from_hex(spending)
        if not isinstance(viewing, PublicKey):
            viewing = PublicKey.from_hex(viewing)
        return cls(spending_public_key=spending, viewing_public_key=viewing)

    def to_dict(self) -> Dict[str, str]:
        """Boundary form with 0x-prefixed keys."""
        return {
            "spendingPublicKey": self.spending_public_key.to_hex(),
            "viewingPublicKey": self.viewing_public_key.to_hex(),
        }
