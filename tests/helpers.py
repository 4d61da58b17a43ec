# tests/helpers.py
"""
Stealth Keys Test Helpers: signed transaction builders and fixed keys.

Transactions are signed locally with eth-account so the signer's public
key is known independently of recovery.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from eth_account import Account
from eth_keys import keys as eth_keys
from hexbytes import HexBytes

# Well-known throwaway keys; never hold funds with these
SENDER_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
SPENDING_PRIVATE_KEY = "0x" + "11" * 32
VIEWING_PRIVATE_KEY = "0x" + "22" * 32

RECIPIENT_ADDRESS = "0x3535353535353535353535353535353535353535"
ACCESS_LIST_ADDRESS = "0x0000000000000000000000000000000000000001"


def public_key_hex(private_key: str) -> str:
    """0x04-prefixed uncompressed public key of a private key."""
    key = eth_keys.PrivateKey(HexBytes(private_key))
    return "0x04" + key.public_key.to_bytes().hex()


def _int_bytes(value: int) -> HexBytes:
    return HexBytes(value.to_bytes(32, "big"))


def sign_transaction(tx: Dict[str, Any], private_key: str = SENDER_PRIVATE_KEY) -> Dict[str, Any]:
    """
    Sign a transaction and return it shaped like eth_getTransactionByHash.

    r and s come back as HexBytes and the payload as "input", as web3
    formats them.
    """
    signed = Account.sign_transaction(tx, private_key)
    fetched: Dict[str, Any] = {k: v for k, v in tx.items() if k != "data"}
    fetched.update({
        "hash": HexBytes(signed.hash),
        "input": HexBytes(tx.get("data", b"")),
        "from": Account.from_key(private_key).address,
        "v": signed.v,
        "r": _int_bytes(signed.r),
        "s": _int_bytes(signed.s),
        "type": tx.get("type", 0),
    })
    if "accessList" in tx:
        fetched["accessList"] = [
            {"address": entry["address"], "storageKeys": [HexBytes(k) for k in entry["storageKeys"]]}
            for entry in tx["accessList"]
        ]
    return fetched


def legacy_tx(chain_id: Optional[int] = 1, nonce: int = 0) -> Dict[str, Any]:
    tx = {
        "nonce": nonce,
        "gasPrice": 20 * 10**9,
        "gas": 21000,
        "to": RECIPIENT_ADDRESS,
        "value": 10**18,
        "data": b"",
    }
    if chain_id is not None:
        tx["chainId"] = chain_id
    return tx


def access_list_tx(chain_id: int = 1) -> Dict[str, Any]:
    return {
        "type": 1,
        "chainId": chain_id,
        "nonce": 3,
        "gasPrice": 20 * 10**9,
        "gas": 50000,
        "to": RECIPIENT_ADDRESS,
        "value": 1,
        "data": b"\x12\x34",
        "accessList": [
            {"address": ACCESS_LIST_ADDRESS, "storageKeys": ["0x" + "00" * 31 + "01"]},
        ],
    }


def dynamic_fee_tx(chain_id: int = 1) -> Dict[str, Any]:
    return {
        "type": 2,
        "chainId": chain_id,
        "nonce": 7,
        "maxFeePerGas": 30 * 10**9,
        "maxPriorityFeePerGas": 2 * 10**9,
        "gas": 60000,
        "to": RECIPIENT_ADDRESS,
        "value": 12345,
        "data": b"\xde\xad\xbe\xef",
        "accessList": [],
    }

