# stealth_keys/chain/recovery.py
"""
Stealth Keys Chain: Public Key Recovery

Recovers the signer's uncompressed public key from a transaction hash.

Account-based transactions are self-signed: the signing hash of the
unsigned payload plus (v, r, s) determine the signer's public key, so any
account that has sent a transaction has a recoverable key.

Supported envelopes:
    - Type 0: legacy, with or without EIP-155 replay protection
    - Type 1: EIP-2930 access list
    - Type 2: EIP-1559 dynamic fee

Usage:
    from stealth_keys.chain import recover_public_key_from_transaction

    key = await recover_public_key_from_transaction(tx_hash, chain)
    print(key.to_hex())  # 0x04...

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Tuple

# Private eth-account helpers (no public equivalent); pinned to a tested
# range in pyproject.toml
from eth_account._utils.legacy_transactions import serializable_unsigned_transaction_from_dict
from eth_account._utils.signing import extract_chain_id, to_standard_v
from eth_keys import keys as eth_keys
from eth_keys.exceptions import BadSignature, ValidationError as EthKeysValidationError
from eth_utils import to_checksum_address, to_hex
from hexbytes import HexBytes

from ..encoding import is_hex
from ..errors import (
    InvalidTransactionHash,
    RecoveryError,
    TransactionNotFound,
    UnsupportedTransactionType,
)
from ..keys import PublicKey

if TYPE_CHECKING:
    from .query import ChainQuery


logger = logging.getLogger("stealth_keys.chain")


# =============================================================================
# Constants
# =============================================================================

TX_HASH_HEX_LENGTH = 64

TX_TYPE_LEGACY = 0
TX_TYPE_ACCESS_LIST = 1
TX_TYPE_DYNAMIC_FEE = 2

SUPPORTED_TX_TYPES = (TX_TYPE_LEGACY, TX_TYPE_ACCESS_LIST, TX_TYPE_DYNAMIC_FEE)


# =============================================================================
# Field Normalisation
# =============================================================================

def _as_int(value: Any) -> int:
    """Coerce RPC quantities (int, hex str, bytes) to int."""
    if isinstance(value, int):
        return value
    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(value, "big")
    if isinstance(value, str):
        return int(value, 16) if value[:2].lower() == "0x" else int(value)
    raise RecoveryError(f"Cannot read quantity from {type(value).__name__}")


def _access_list(value: Any) -> list:
    """Access list in the shape eth-account validates (hex strings)."""
    entries = []
    for entry in value or []:
        entries.append({
            "address": to_checksum_address(entry["address"]),
            "storageKeys": [
                key if isinstance(key, str) else to_hex(key)
                for key in entry["storageKeys"]
            ],
        })
    return entries


def unsigned_transaction_fields(tx: Dict[str, Any]) -> Tuple[Dict[str, Any], int]:
    """
    Rebuild the unsigned payload of a fetched transaction.

    Args:
        tx: Transaction fields as returned by eth_getTransactionByHash

    Returns:
        (unsigned transaction dict for eth-account, recovery id 0/1)

    Raises:
        UnsupportedTransactionType: For envelopes other than 0, 1, 2
    """
    tx_type = _as_int(tx.get("type", TX_TYPE_LEGACY))
    if tx_type not in SUPPORTED_TX_TYPES:
        raise UnsupportedTransactionType(tx_type)

    fields: Dict[str, Any] = {
        "nonce": _as_int(tx["nonce"]),
        "gas": _as_int(tx["gas"]),
        "value": _as_int(tx.get("value", 0)),
        "data": bytes(HexBytes(tx.get("input", tx.get("data", b"")))),
    }
    if tx.get("to"):
        fields["to"] = to_checksum_address(tx["to"])

    if tx_type == TX_TYPE_LEGACY:
        raw_v = _as_int(tx["v"])
        chain_id, _ = extract_chain_id(raw_v)
        fields["gasPrice"] = _as_int(tx["gasPrice"])
        # None keeps the pre-EIP-155 six-field payload
        fields["chainId"] = chain_id
        return fields, to_standard_v(raw_v)

    fields["type"] = tx_type
    fields["chainId"] = _as_int(tx["chainId"])
    fields["accessList"] = _access_list(tx.get("accessList"))
    if tx_type == TX_TYPE_ACCESS_LIST:
        fields["gasPrice"] = _as_int(tx["gasPrice"])
    else:
        fields["maxFeePerGas"] = _as_int(tx["maxFeePerGas"])
        fields["maxPriorityFeePerGas"] = _as_int(tx["maxPriorityFeePerGas"])

    y_parity = tx.get("yParity", tx.get("v"))
    return fields, _as_int(y_parity)


def signing_hash(tx: Dict[str, Any]) -> Tuple[bytes, int]:
    """Signing hash and recovery id of a fetched transaction."""
    fields, recovery_id = unsigned_transaction_fields(tx)
    unsigned = serializable_unsigned_transaction_from_dict(fields)
    return bytes(unsigned.hash()), recovery_id


# =============================================================================
# Recovery
# =============================================================================

def recover_public_key(tx: Dict[str, Any]) -> PublicKey:
    """
    Recover the signer's public key from fetched transaction fields.

    Raises:
        RecoveryError: On a malformed signature, or if the recovered key
                       does not control the transaction's "from" address
    """
    msg_hash, recovery_id = signing_hash(tx)
    try:
        signature = eth_keys.Signature(vrs=(recovery_id, _as_int(tx["r"]), _as_int(tx["s"])))
        recovered = signature.recover_public_key_from_msg_hash(msg_hash)
    except (BadSignature, EthKeysValidationError) as e:
        raise RecoveryError(f"Cannot recover public key: {e}") from e

    sender = tx.get("from")
    if sender and recovered.to_checksum_address() != to_checksum_address(sender):
        raise RecoveryError(
            f"Recovered signer {recovered.to_checksum_address()} does not match sender {sender}"
        )
    return PublicKey.from_eth_key(recovered)


async def recover_public_key_from_transaction(tx_hash: str, chain: "ChainQuery") -> PublicKey:
    """
    Recover the public key of the account that sent a transaction.

    Args:
        tx_hash: 0x-prefixed 32-byte transaction hash
        chain: Query interface bound to the transaction's network

    Returns:
        Uncompressed public key (same form as a directly supplied key)

    Raises:
        InvalidTransactionHash: Before any query, on a malformed hash
        TransactionNotFound: If the connected network has no such transaction
    """
    if not is_hex(tx_hash, TX_HASH_HEX_LENGTH):
        raise InvalidTransactionHash()

    tx = await chain.get_transaction(tx_hash)
    if tx is None:
        logger.warning(f"Transaction {tx_hash} not found on connected network")
        raise TransactionNotFound(tx_hash)

    public_key = recover_public_key(tx)
    logger.debug(f"Recovered {public_key.address} from {tx_hash}")
    return public_key
