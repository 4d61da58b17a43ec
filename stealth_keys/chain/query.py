# stealth_keys/chain/query.py
"""
Stealth Keys Chain: Query Interface

Read-only chain access used by the recipient lookup. The caller owns the
query object and passes it into every lookup; nothing here is global.

Implementations:
    ChainQuery          - Abstract interface
    Web3ChainQuery      - web3.py AsyncWeb3 backed (transactions, ENS,
                          CNS reader, stealth key registry)
    InMemoryChainQuery  - Dict-backed fake for tests and offline use

Usage:
    from web3 import AsyncWeb3
    from stealth_keys.chain import Web3ChainQuery

    w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider("https://..."))
    chain = Web3ChainQuery(w3, timeout=10.0)
    tx = await chain.get_transaction("0x...")

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, List, Optional, Tuple, TypeVar

from ens.utils import raw_name_to_hash
from web3 import AsyncWeb3
from web3.exceptions import TransactionNotFound as Web3TransactionNotFound

from .. import config
from ..errors import QueryTimeout, UnsupportedNetwork
from ..networks import Network, get_network
from ..registry.records import (
    CNS_READER_ABI,
    STEALTH_KEY_REGISTRY_ABI,
    TEXT_RESOLVER_ABI,
    RegistryKind,
    StealthKeyRecord,
)


logger = logging.getLogger("stealth_keys.chain")

T = TypeVar("T")

ZERO_ADDRESS = "0x" + "0" * 40


# =============================================================================
# Abstract Interface
# =============================================================================

class ChainQuery(ABC):
    """Read-only queries a recipient lookup needs from a chain."""

    @abstractmethod
    async def get_transaction(self, tx_hash: str) -> Optional[Dict[str, Any]]:
        """
        Fetch a transaction by hash.

        Returns:
            Transaction fields (web3 naming: nonce, gas, gasPrice, input,
            v, r, s, type, chainId, ...) or None if the network has no
            such transaction
        """
        pass

    @abstractmethod
    async def resolve_name_to_address(self, name: str, registry: RegistryKind) -> Optional[str]:
        """Forward-resolve a name; None if it has no resolver."""
        pass

    @abstractmethod
    async def get_key_record(self, target: str, registry: RegistryKind) -> Optional[StealthKeyRecord]:
        """
        Fetch the stealth key record for a target.

        Args:
            target: Address for STEALTH_KEY_REGISTRY, the name itself for
                    ENS and CNS (records live on the name's resolver)
            registry: Registry to query

        Returns:
            StealthKeyRecord or None if nothing is registered
        """
        pass


# =============================================================================
# In-Memory Implementation
# =============================================================================

class InMemoryChainQuery(ChainQuery):
    """
    In-memory chain for testing.

    No network required - transactions, names and key records are
    registered up front. Every query is appended to ``calls``.
    """

    def __init__(self):
        self._transactions: Dict[str, Dict[str, Any]] = {}
        self._names: Dict[Tuple[RegistryKind, str], str] = {}
        self._records: Dict[Tuple[RegistryKind, str], StealthKeyRecord] = {}
        self.calls: List[Tuple[str, str]] = []

    @staticmethod
    def _target_key(target: str, registry: RegistryKind) -> str:
        # Addresses compare case-insensitively, names as given
        if registry is RegistryKind.STEALTH_KEY_REGISTRY:
            return target.lower()
        return target

    def add_transaction(self, tx: Dict[str, Any]) -> None:
        """Store a transaction under its "hash" field."""
        tx_hash = tx["hash"]
        if isinstance(tx_hash, bytes):
            tx_hash = "0x" + bytes(tx_hash).hex()
        self._transactions[tx_hash.lower()] = dict(tx)

    def register_name(self, name: str, registry: RegistryKind, address: str) -> None:
        """Point a name at an address."""
        self._names[(registry, name)] = address

    def register_keys(
        self,
        target: str,
        registry: RegistryKind,
        spending_public_key: str,
        viewing_public_key: str,
    ) -> None:
        """Store a key record for an address or name."""
        self._records[(registry, self._target_key(target, registry))] = StealthKeyRecord(
            spending_public_key=spending_public_key,
            viewing_public_key=viewing_public_key,
        )

    async def get_transaction(self, tx_hash: str) -> Optional[Dict[str, Any]]:
        self.calls.append(("get_transaction", tx_hash))
        tx = self._transactions.get(tx_hash.lower())
        return dict(tx) if tx is not None else None

    async def resolve_name_to_address(self, name: str, registry: RegistryKind) -> Optional[str]:
        self.calls.append(("resolve_name_to_address", name))
        return self._names.get((registry, name))

    async def get_key_record(self, target: str, registry: RegistryKind) -> Optional[StealthKeyRecord]:
        self.calls.append(("get_key_record", target))
        return self._records.get((registry, self._target_key(target, registry)))


# =============================================================================
# web3.py Implementation
# =============================================================================

class Web3ChainQuery(ChainQuery):
    """
    ChainQuery over an AsyncWeb3 instance.

    The network (registry addresses) is detected from the provider's
    chain id on first use unless given explicitly.
    """

    def __init__(
        self,
        w3: AsyncWeb3,
        network: Optional[Network] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Web3ChainQuery.

        Args:
            w3: Connected AsyncWeb3 instance
            network: Registry deployments (auto-detected if None)
            timeout: Per-query deadline in seconds (config default if None)
        """
        self._w3 = w3
        self._network = network
        self._timeout = timeout if timeout is not None else config.get_query_timeout()

    async def _with_deadline(self, operation: str, awaitable: Awaitable[T]) -> T:
        if self._timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, self._timeout)
        except asyncio.TimeoutError as e:
            raise QueryTimeout(operation, self._timeout) from e

    async def network(self) -> Network:
        """Registry deployments for the connected chain."""
        if self._network is None:
            chain_id = await self._with_deadline("eth_chainId", self._w3.eth.chain_id)
            self._network = get_network(chain_id)
            logger.debug(f"Detected network {self._network.name} (chain {chain_id})")
        return self._network

    # =========================================================================
    # Transactions
    # =========================================================================

    async def get_transaction(self, tx_hash: str) -> Optional[Dict[str, Any]]:
        try:
            tx = await self._with_deadline(
                "eth_getTransactionByHash",
                self._w3.eth.get_transaction(tx_hash),
            )
        except Web3TransactionNotFound:
            return None
        return dict(tx) if tx is not None else None

    # =========================================================================
    # Names
    # =========================================================================

    async def resolve_name_to_address(self, name: str, registry: RegistryKind) -> Optional[str]:
        if registry is RegistryKind.ENS:
            await self._require_ens()
            return await self._with_deadline("ens.address", self._w3.ens.address(name))

        if registry is RegistryKind.CNS:
            resolver, owner, values = await self._cns_get_data(name, [config.CNS_ADDRESS_RECORD])
            if resolver == ZERO_ADDRESS:
                return None
            return values[0] or owner

        raise ValueError(f"Registry {registry.value} does not resolve names")

    # =========================================================================
    # Key Records
    # =========================================================================

    async def get_key_record(self, target: str, registry: RegistryKind) -> Optional[StealthKeyRecord]:
        if registry is RegistryKind.STEALTH_KEY_REGISTRY:
            return await self._registry_record(target)
        if registry is RegistryKind.ENS:
            return await self._ens_record(target)
        if registry is RegistryKind.CNS:
            return await self._cns_record(target)
        raise ValueError(f"Unknown registry: {registry}")

    async def _registry_record(self, address: str) -> Optional[StealthKeyRecord]:
        network = await self.network()
        if network.stealth_key_registry is None:
            raise UnsupportedNetwork(network.chain_id, "stealth key registry")

        contract = self._w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(network.stealth_key_registry),
            abi=STEALTH_KEY_REGISTRY_ABI,
        )
        data = await self._with_deadline(
            "stealthKeys",
            contract.functions.stealthKeys(AsyncWeb3.to_checksum_address(address)).call(),
        )
        return StealthKeyRecord.from_contract_tuple(data)

    async def _ens_record(self, name: str) -> Optional[StealthKeyRecord]:
        await self._require_ens()
        resolver = await self._with_deadline("ens.resolver", self._w3.ens.resolver(name))
        if resolver is None:
            return None

        text_resolver = self._w3.eth.contract(address=resolver.address, abi=TEXT_RESOLVER_ABI)
        node = raw_name_to_hash(name)
        spending = await self._with_deadline(
            "text",
            text_resolver.functions.text(node, config.ENS_SPENDING_KEY_RECORD).call(),
        )
        viewing = await self._with_deadline(
            "text",
            text_resolver.functions.text(node, config.ENS_VIEWING_KEY_RECORD).call(),
        )
        return StealthKeyRecord.from_text_records(spending, viewing)

    async def _cns_record(self, name: str) -> Optional[StealthKeyRecord]:
        resolver, _owner, values = await self._cns_get_data(
            name,
            [config.CNS_SPENDING_KEY_RECORD, config.CNS_VIEWING_KEY_RECORD],
        )
        if resolver == ZERO_ADDRESS:
            return None
        return StealthKeyRecord.from_text_records(values[0], values[1])

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _require_ens(self) -> None:
        network = await self.network()
        if not network.supports_ens:
            raise UnsupportedNetwork(network.chain_id, "ENS")

    async def _cns_get_data(self, name: str, keys: List[str]) -> Tuple[str, str, List[str]]:
        network = await self.network()
        if not network.supports_cns:
            raise UnsupportedNetwork(network.chain_id, "CNS")

        reader = self._w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(network.cns_reader),
            abi=CNS_READER_ABI,
        )
        # CNS token ids use the ENS namehash algorithm
        token_id = int.from_bytes(raw_name_to_hash(name), "big")
        resolver, owner, values = await self._with_deadline(
            "getData",
            reader.functions.getData(keys, token_id).call(),
        )
        return resolver, owner, list(values)
