# stealth_keys/registry/__init__.py
"""
Stealth Keys Registry Layer

Recipient identifier dispatch and on-chain key records.

Components:
    records: Contract ABIs, RegistryKind, StealthKeyRecord
    resolver: classify_identifier, lookup_recipient, RecipientResolver

Usage:
    from stealth_keys.registry import lookup_recipient

    keys = await lookup_recipient("0x04...", chain)
"""

from .records import (
    RegistryKind,
    StealthKeyRecord,
    STEALTH_KEY_REGISTRY_ABI,
    TEXT_RESOLVER_ABI,
    CNS_READER_ABI,
)

from .resolver import (
    IdentifierKind,
    RecipientResolver,
    classify_identifier,
    lookup_recipient,
)

__all__ = [
    # Records
    "RegistryKind",
    "StealthKeyRecord",
    "STEALTH_KEY_REGISTRY_ABI",
    "TEXT_RESOLVER_ABI",
    "CNS_READER_ABI",
    # Resolver
    "IdentifierKind",
    "RecipientResolver",
    "classify_identifier",
    "lookup_recipient",
]
