# stealth_keys/chain/__init__.py
"""
Stealth Keys Chain Layer

Read-only chain access and transaction public key recovery.

Modules:
    query: ChainQuery interface, Web3ChainQuery, InMemoryChainQuery
    recovery: recover_public_key_from_transaction
"""

from .query import (
    ChainQuery,
    Web3ChainQuery,
    InMemoryChainQuery,
    ZERO_ADDRESS,
)

from .recovery import (
    recover_public_key,
    recover_public_key_from_transaction,
    signing_hash,
    unsigned_transaction_fields,
)

__all__ = [
    "ChainQuery",
    "Web3ChainQuery",
    "InMemoryChainQuery",
    "ZERO_ADDRESS",
    "recover_public_key",
    "recover_public_key_from_transaction",
    "signing_hash",
    "unsigned_transaction_fields",
]
