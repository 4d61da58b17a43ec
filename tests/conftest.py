# tests/conftest.py
"""
Stealth Keys Test Configuration: shared fixtures.
"""
from __future__ import annotations

import pytest

from stealth_keys import InMemoryChainQuery

from helpers import (
    SENDER_PRIVATE_KEY,
    SPENDING_PRIVATE_KEY,
    VIEWING_PRIVATE_KEY,
    public_key_hex,
)


@pytest.fixture
def sender_public_key() -> str:
    return public_key_hex(SENDER_PRIVATE_KEY)


@pytest.fixture
def spending_public_key() -> str:
    return public_key_hex(SPENDING_PRIVATE_KEY)


@pytest.fixture
def viewing_public_key() -> str:
    return public_key_hex(VIEWING_PRIVATE_KEY)


@pytest.fixture
def chain() -> InMemoryChainQuery:
    return InMemoryChainQuery()

