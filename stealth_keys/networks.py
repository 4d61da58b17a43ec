# stealth_keys/networks.py
"""
Stealth Keys Networks

Registry deployments per chain. Each network records where the stealth
key registry lives and which name registries can be queried on it.

Registry Selection:
    - Stealth key registry: address -> (spending, viewing) record
    - ENS (registry A, ".eth"): mainnet and Sepolia only
    - CNS (registry B, ".crypto"): reader contract address must be set
      through configuration, no deployment is assumed

Usage:
    from stealth_keys.networks import get_network

    network = get_network(1)
    print(network.stealth_key_registry)

Updated: 2025-01-20
Version: 0.1.0
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

from . import config
from .errors import UnsupportedNetwork


# =============================================================================
# Constants
# =============================================================================

# Same address on every chain it is deployed to
STEALTH_KEY_REGISTRY = "0x31fe56609C65Cd0C510E7125f051D440424D38f3"

# ENS registry (mainnet and Sepolia)
ENS_REGISTRY = "0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"

NAME_SUFFIX_ENS = ".eth"
NAME_SUFFIX_CNS = ".crypto"


# =============================================================================
# Network Definitions
# =============================================================================

@dataclass(frozen=True)
class Network:
    """Registry deployments on one chain."""
    chain_id: int
    name: str
    stealth_key_registry: Optional[str]
    ens_registry: Optional[str] = None
    cns_reader: Optional[str] = None

    @property
    def supports_ens(self) -> bool:
        return self.ens_registry is not None

    @property
    def supports_cns(self) -> bool:
        return self.cns_reader is not None


NETWORKS: Dict[int, Network] = {
    1: Network(
        chain_id=1,
        name="mainnet",
        stealth_key_registry=STEALTH_KEY_REGISTRY,
        ens_registry=ENS_REGISTRY,
    ),
    10: Network(
        chain_id=10,
        name="optimism",
        stealth_key_registry=STEALTH_KEY_REGISTRY,
    ),
    100: Network(
        chain_id=100,
        name="gnosis",
        stealth_key_registry=STEALTH_KEY_REGISTRY,
    ),
    137: Network(
        chain_id=137,
        name="polygon",
        stealth_key_registry=STEALTH_KEY_REGISTRY,
    ),
    8453: Network(
        chain_id=8453,
        name="base",
        stealth_key_registry=STEALTH_KEY_REGISTRY,
    ),
    42161: Network(
        chain_id=42161,
        name="arbitrum",
        stealth_key_registry=STEALTH_KEY_REGISTRY,
    ),
    11155111: Network(
        chain_id=11155111,
        name="sepolia",
        stealth_key_registry=STEALTH_KEY_REGISTRY,
        ens_registry=ENS_REGISTRY,
    ),
}


def get_network(chain_id: int) -> Network:
    """
    Get registry deployments for a chain, with configured overrides applied.

    Unknown chains are accepted when a registry address is configured.

    Raises:
        UnsupportedNetwork: If nothing is known or configured for the chain
    """
    network = NETWORKS.get(chain_id)
    registry_override = config.get_registry_address()
    cns_override = config.get_cns_reader_address()

    if network is None:
        if registry_override is None and cns_override is None:
            raise UnsupportedNetwork(chain_id)
        network = Network(chain_id=chain_id, name=f"chain-{chain_id}", stealth_key_registry=None)

    overrides = {}
    if registry_override is not None:
        overrides["stealth_key_registry"] = registry_override
    if cns_override is not None:
        overrides["cns_reader"] = cns_override
    return replace(network, **overrides) if overrides else network
