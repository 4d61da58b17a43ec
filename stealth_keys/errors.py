# stealth_keys/errors.py
"""
Stealth Keys: Error Taxonomy

Every error raised by the package derives from StealthKeyError and carries
a stable ``kind`` string. Message text is part of the contract: callers
and tests match on it.

Usage:
    from stealth_keys.errors import StealthKeyError, TransactionNotFound

    try:
        keys = await lookup_recipient(identifier, chain)
    except TransactionNotFound as e:
        print(e.kind, e)

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Base
# =============================================================================

class StealthKeyError(Exception):
    """Base error for recipient key lookups."""
    kind: str = "stealth_key_error"


# =============================================================================
# Input Validation
# =============================================================================

class InvalidHexInput(StealthKeyError, ValueError):
    """Malformed hex passed to the hex codec."""
    kind = "invalid_hex_input"

    MESSAGE = "Input must be a hex string without the 0x prefix"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.MESSAGE)


class InvalidTransactionHash(StealthKeyError, ValueError):
    """Transaction hash has the wrong shape or type."""
    kind = "invalid_transaction_hash"

    MESSAGE = "Invalid transaction hash provided"

    def __init__(self):
        super().__init__(self.MESSAGE)


class InvalidPublicKey(StealthKeyError, ValueError):
    """Key material is not an uncompressed secp256k1 point."""
    kind = "invalid_public_key"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid public key: {reason}")


class UnsupportedIdentifierFormat(StealthKeyError, ValueError):
    """Identifier matches no known recipient shape."""
    kind = "unsupported_identifier_format"

    def __init__(self, identifier: object):
        self.identifier = identifier
        super().__init__(f"Unsupported recipient identifier format: {identifier}")


class ConfusingIdentifier(StealthKeyError):
    """Name contains characters that impersonate other characters."""
    kind = "confusing_identifier"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Name contains confusable characters: {name}")


# =============================================================================
# Chain Lookups
# =============================================================================

class TransactionNotFound(StealthKeyError):
    """The connected network has no transaction with this hash."""
    kind = "transaction_not_found"

    MESSAGE = "Transaction not found. Are the provider and transaction hash on the same network?"

    def __init__(self, tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(self.MESSAGE)


class UnsupportedTransactionType(StealthKeyError):
    """Transaction envelope type we cannot rebuild a signing hash for."""
    kind = "unsupported_transaction_type"

    def __init__(self, tx_type: int):
        self.tx_type = tx_type
        super().__init__(f"Unsupported transaction type: {tx_type}")


class RecoveryError(StealthKeyError):
    """Signature recovery produced an unusable or inconsistent key."""
    kind = "recovery_error"


class NameNotRegistered(StealthKeyError):
    """Name has no resolver set in its registry."""
    kind = "name_not_registered"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Name is not registered or has no resolver set: {name}")


class KeysNotFound(StealthKeyError):
    """Registry holds no stealth key record for the target."""
    kind = "keys_not_found"

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"No stealth keys registered for {target}")


class UnsupportedNetwork(StealthKeyError):
    """No registry deployment is known for this chain."""
    kind = "unsupported_network"

    def __init__(self, chain_id: int, registry: Optional[str] = None):
        self.chain_id = chain_id
        self.registry = registry
        if registry:
            super().__init__(f"No {registry} deployment on chain {chain_id}")
        else:
            super().__init__(f"Unsupported network: chain {chain_id}")


class QueryTimeout(StealthKeyError):
    """A chain query exceeded the configured deadline."""
    kind = "query_timeout"

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"{operation} timed out after {timeout}s")
