# stealth_keys/registry/resolver.py
"""
Stealth Keys Registry: Recipient Resolver

High-level API for resolving a recipient identifier into stealth keys.

Identifier kinds (first match wins):
    1. 0x04 + 128 hex     -> public key, used for both roles
    2. 0x + 64 hex        -> transaction hash, sender's recovered key
    3. 0x + 40 hex        -> address, stealth key registry record
    4. *.eth              -> ENS name, resolver text records
    5. *.crypto           -> CNS name, reader contract records

Names are checked for confusable characters before any query.

Usage:
    from stealth_keys.registry import lookup_recipient

    keys = await lookup_recipient("alice.eth", chain)
    keys.to_dict()

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ..chain.recovery import recover_public_key_from_transaction
from ..encoding import is_hex
from ..errors import (
    ConfusingIdentifier,
    KeysNotFound,
    NameNotRegistered,
    UnsupportedIdentifierFormat,
)
from ..keys import KeyPair, PublicKey
from ..networks import NAME_SUFFIX_CNS, NAME_SUFFIX_ENS
from ..security import describe, is_confusing
from .records import RegistryKind

if TYPE_CHECKING:
    from ..chain.query import ChainQuery


logger = logging.getLogger("stealth_keys.registry")


# =============================================================================
# Classification
# =============================================================================

class IdentifierKind(Enum):
    """Recipient identifier shapes."""
    PUBLIC_KEY = "public_key"
    TRANSACTION_HASH = "transaction_hash"
    ADDRESS = "address"
    ENS_NAME = "ens_name"
    CNS_NAME = "cns_name"


NAME_REGISTRIES = {
    IdentifierKind.ENS_NAME: RegistryKind.ENS,
    IdentifierKind.CNS_NAME: RegistryKind.CNS,
}


def classify_identifier(identifier: str) -> IdentifierKind:
    """
    Classify an identifier by shape alone.

    Raises:
        UnsupportedIdentifierFormat: If no shape matches
    """
    if not isinstance(identifier, str):
        raise UnsupportedIdentifierFormat(identifier)

    if is_hex(identifier, 130) and identifier[2:4] == "04":
        return IdentifierKind.PUBLIC_KEY
    if is_hex(identifier, 64):
        return IdentifierKind.TRANSACTION_HASH
    if is_hex(identifier, 40):
        return IdentifierKind.ADDRESS

    lowered = identifier.lower()
    if lowered.endswith(NAME_SUFFIX_ENS):
        return IdentifierKind.ENS_NAME
    if lowered.endswith(NAME_SUFFIX_CNS):
        return IdentifierKind.CNS_NAME

    raise UnsupportedIdentifierFormat(identifier)


# =============================================================================
# Resolution
# =============================================================================

async def lookup_recipient(identifier: str, chain: "ChainQuery") -> KeyPair:
    """
    Resolve a recipient identifier into stealth keys.

    Args:
        identifier: Public key, transaction hash, address or name
        chain: Query interface for the recipient's network

    Returns:
        KeyPair of validated uncompressed keys. Keys come back lower-case,
        so an upper-case public key identifier is normalised, not echoed

    Raises:
        UnsupportedIdentifierFormat: Identifier matches no known shape
        ConfusingIdentifier: Name contains confusable characters
        NameNotRegistered: Name has no resolver
        KeysNotFound: Registry holds no keys for the address or name
        InvalidTransactionHash / TransactionNotFound: From key recovery
        InvalidPublicKey: Supplied or registered key is not a valid point
    """
    kind = classify_identifier(identifier)
    logger.debug(f"Resolving {identifier} as {kind.value}")

    if kind is IdentifierKind.PUBLIC_KEY:
        return KeyPair.single(PublicKey.from_hex(identifier))

    if kind is IdentifierKind.TRANSACTION_HASH:
        return KeyPair.single(await recover_public_key_from_transaction(identifier, chain))

    if kind is IdentifierKind.ADDRESS:
        return await _lookup_address(identifier, chain)

    return await _lookup_name(identifier, NAME_REGISTRIES[kind], chain)


async def _lookup_address(address: str, chain: "ChainQuery") -> KeyPair:
    record = await chain.get_key_record(address, RegistryKind.STEALTH_KEY_REGISTRY)
    if record is None:
        raise KeysNotFound(address)
    return record.to_key_pair()


async def _lookup_name(name: str, registry: RegistryKind, chain: "ChainQuery") -> KeyPair:
    if is_confusing(name):
        logger.warning(f"Rejected confusable name {name!r}: {describe(name)}")
        raise ConfusingIdentifier(name)

    address = await chain.resolve_name_to_address(name, registry)
    if address is None:
        raise NameNotRegistered(name)
    logger.debug(f"{name} resolves to {address}")

    record = await chain.get_key_record(name, registry)
    if record is None:
        raise KeysNotFound(name)
    return record.to_key_pair()


# =============================================================================
# Resolver
# =============================================================================

class RecipientResolver:
    """
    Recipient lookups bound to one query interface.

    Holds no results between calls; every lookup queries the chain.
    """

    def __init__(self, chain: "ChainQuery"):
        """
        Initialize resolver.

        Args:
            chain: Query interface for the recipients' network
        """
        self._chain = chain

    @property
    def chain(self) -> "ChainQuery":
        return self._chain

    async def lookup(self, identifier: str) -> KeyPair:
        """Resolve an identifier into stealth keys."""
        return await lookup_recipient(identifier, self._chain)

    async def recover(self, tx_hash: str) -> PublicKey:
        """Recover a sender's public key from a transaction hash."""
        return await recover_public_key_from_transaction(tx_hash, self._chain)

    @staticmethod
    def classify(identifier: str) -> IdentifierKind:
        return classify_identifier(identifier)
