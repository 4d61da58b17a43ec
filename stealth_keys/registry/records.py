# stealth_keys/registry/records.py
"""
Stealth Keys Registry: Records and Contract ABIs

On-chain shapes of a recipient's stealth keys:

    StealthKeyRegistry.stealthKeys(address)
        -> (spendingPrefix, spendingX, viewingPrefix, viewingX)
        Compressed points, all zero when nothing is registered.

    ENS resolver text(node, key) / CNS reader getData(keys, tokenId)
        -> two text records holding full 0x04... keys.

Both decode to a StealthKeyRecord.

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..keys import KeyPair, PublicKey


# =============================================================================
# Constants
# =============================================================================

ABI_DIR = Path(__file__).parent / "contracts" / "abi"


def _load_abi(name: str) -> List[Dict[str, Any]]:
    """Load contract ABI from JSON file."""
    with open(ABI_DIR / f"{name}.json") as f:
        data = json.load(f)
        return data.get("abi", data)


STEALTH_KEY_REGISTRY_ABI = _load_abi("StealthKeyRegistry")
TEXT_RESOLVER_ABI = _load_abi("TextResolver")
CNS_READER_ABI = _load_abi("CnsProxyReader")


# =============================================================================
# Types
# =============================================================================

class RegistryKind(Enum):
    """Registry a key record or name is looked up in."""
    STEALTH_KEY_REGISTRY = "stealth_key_registry"
    ENS = "ens"
    CNS = "cns"


@dataclass(frozen=True)
class StealthKeyRecord:
    """
    Stealth keys as stored by a registry.

    Attributes:
        spending_public_key: 0x-prefixed uncompressed spending key
        viewing_public_key: 0x-prefixed uncompressed viewing key
    """
    spending_public_key: str
    viewing_public_key: str

    @classmethod
    def from_contract_tuple(cls, data: Sequence[int]) -> Optional[StealthKeyRecord]:
        """
        Decode a stealthKeys() return tuple.

        Returns None for an all-zero tuple (nothing registered).

        Raises:
            InvalidPublicKey: If a stored point does not decompress
        """
        spending_prefix, spending_x, viewing_prefix, viewing_x = (int(v) for v in data)
        if spending_prefix == spending_x == viewing_prefix == viewing_x == 0:
            return None
        return cls(
            spending_public_key=PublicKey.from_compressed(spending_prefix, spending_x).to_hex(),
            viewing_public_key=PublicKey.from_compressed(viewing_prefix, viewing_x).to_hex(),
        )

    @classmethod
    def from_text_records(cls, spending: Optional[str], viewing: Optional[str]) -> Optional[StealthKeyRecord]:
        """Build from two text records; None unless both are set."""
        if not spending or not viewing:
            return None
        return cls(spending_public_key=spending, viewing_public_key=viewing)

    def to_key_pair(self) -> KeyPair:
        """
        Validate both keys.

        Raises:
            InvalidPublicKey: If either key is not an uncompressed secp256k1 point
        """
        return KeyPair.from_hex(self.spending_public_key, self.viewing_public_key)
