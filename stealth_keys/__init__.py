# stealth_keys/__init__.py
"""
Stealth Keys: Recipient Key Lookup for Stealth Payments

Resolves a recipient identifier into the spending and viewing public keys
a stealth payment is addressed to.

- Raw public keys (0x04...)
- Transaction hashes (sender's key recovered from the signature)
- Addresses (stealth key registry)
- ENS names (.eth) and CNS names (.crypto), guarded against homoglyphs

Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │  stealth_keys                                           │
    │  ├── encoding/         # Hex padding and prefixes       │
    │  ├── security/         # Confusable character check     │
    │  ├── keys.py           # PublicKey, KeyPair             │
    │  ├── chain/            # Chain access                   │
    │  │   ├── query.py      # ChainQuery, Web3, in-memory    │
    │  │   └── recovery.py   # Tx hash -> public key          │
    │  ├── registry/         # Identifier dispatch            │
    │  │   ├── records.py    # ABIs, StealthKeyRecord         │
    │  │   └── resolver.py   # lookup_recipient               │
    │  ├── networks.py       # Registry deployments per chain │
    │  ├── config.py         # Environment settings           │
    │  └── errors.py         # Error taxonomy                 │
    └─────────────────────────────────────────────────────────┘

Quick Start:
    from web3 import AsyncWeb3
    from stealth_keys import Web3ChainQuery, lookup_recipient

    w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider("https://..."))
    keys = await lookup_recipient("alice.eth", Web3ChainQuery(w3))
    print(keys.spending_public_key.to_hex())
"""

__version__ = "0.1.0"

# =============================================================================
# Errors
# =============================================================================

from .errors import (
    StealthKeyError,
    InvalidHexInput,
    InvalidTransactionHash,
    InvalidPublicKey,
    UnsupportedIdentifierFormat,
    ConfusingIdentifier,
    TransactionNotFound,
    UnsupportedTransactionType,
    RecoveryError,
    NameNotRegistered,
    KeysNotFound,
    UnsupportedNetwork,
    QueryTimeout,
)

# =============================================================================
# Encoding & Security
# =============================================================================

from .encoding import pad_hex
from .security import is_confusing

# =============================================================================
# Keys
# =============================================================================

from .keys import PublicKey, KeyPair

# =============================================================================
# Chain & Registry
# =============================================================================

from .registry import (
    IdentifierKind,
    RegistryKind,
    StealthKeyRecord,
    RecipientResolver,
    classify_identifier,
    lookup_recipient,
)

from .chain import (
    ChainQuery,
    Web3ChainQuery,
    InMemoryChainQuery,
    recover_public_key_from_transaction,
)

from .networks import Network, NETWORKS, get_network

# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Version
    "__version__",

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    "pad_hex",
    "is_confusing",
    "recover_public_key_from_transaction",
    "lookup_recipient",
    "classify_identifier",

    # -------------------------------------------------------------------------
    # Types
    # -------------------------------------------------------------------------
    "PublicKey",
    "KeyPair",
    "IdentifierKind",
    "RegistryKind",
    "StealthKeyRecord",
    "RecipientResolver",
    "ChainQuery",
    "Web3ChainQuery",
    "InMemoryChainQuery",
    "Network",
    "NETWORKS",
    "get_network",

    # -------------------------------------------------------------------------
    # Errors
    # -------------------------------------------------------------------------
    "StealthKeyError",
    "InvalidHexInput",
    "InvalidTransactionHash",
    "InvalidPublicKey",
    "UnsupportedIdentifierFormat",
    "ConfusingIdentifier",
    "TransactionNotFound",
    "UnsupportedTransactionType",
    "RecoveryError",
    "NameNotRegistered",
    "KeysNotFound",
    "UnsupportedNetwork",
    "QueryTimeout",
]
