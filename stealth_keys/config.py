# stealth_keys/config.py
"""
Stealth Keys Configuration: environment-driven settings in one place.
"""
from __future__ import annotations

import os
from typing import Optional

# --- Query deadline ---
ENV_QUERY_TIMEOUT = "STEALTH_KEYS_QUERY_TIMEOUT"


def get_query_timeout() -> Optional[float]:
    """Seconds allowed per chain query; unset or 0 means no deadline."""
    raw = os.environ.get(ENV_QUERY_TIMEOUT, "").strip()
    if not raw:
        return None
    timeout = float(raw)
    return timeout if timeout > 0 else None


# --- Registry address overrides ---
ENV_REGISTRY_ADDRESS = "STEALTH_KEYS_REGISTRY_ADDRESS"
ENV_CNS_READER_ADDRESS = "STEALTH_KEYS_CNS_READER_ADDRESS"


def get_registry_address() -> Optional[str]:
    return os.environ.get(ENV_REGISTRY_ADDRESS) or None


def get_cns_reader_address() -> Optional[str]:
    return os.environ.get(ENV_CNS_READER_ADDRESS) or None


# --- Name record keys ---
ENS_SPENDING_KEY_RECORD = os.environ.get(
    "STEALTH_KEYS_ENS_SPENDING_RECORD", "vnd.stealth.spending_public_key"
)
ENS_VIEWING_KEY_RECORD = os.environ.get(
    "STEALTH_KEYS_ENS_VIEWING_RECORD", "vnd.stealth.viewing_public_key"
)
CNS_SPENDING_KEY_RECORD = os.environ.get(
    "STEALTH_KEYS_CNS_SPENDING_RECORD", "stealth.spending_public_key"
)
CNS_VIEWING_KEY_RECORD = os.environ.get(
    "STEALTH_KEYS_CNS_VIEWING_RECORD", "stealth.viewing_public_key"
)
CNS_ADDRESS_RECORD = "crypto.ETH.address"
