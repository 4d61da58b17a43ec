# tests/test_keys.py
"""
Stealth Keys Public Key Test Suite

Categories:
  K1. Parsing and serialisation
  K2. Validation
  K3. Compressed points
  K4. Key pairs
"""

import pytest
from eth_account import Account

from stealth_keys import InvalidHexInput, InvalidPublicKey, KeyPair, PublicKey
from stealth_keys.registry import StealthKeyRecord

from helpers import SENDER_PRIVATE_KEY, public_key_hex


# =============================================================================
# K1. Parsing and serialisation
# =============================================================================

def test_k1_1_hex_round_trip(sender_public_key):
    key = PublicKey.from_hex(sender_public_key)
    assert key.to_hex() == sender_public_key
    assert not key.value.startswith("0x")
    assert len(key.value) == 130


def test_k1_2_upper_case_input_is_normalised(sender_public_key):
    key = PublicKey.from_hex("0x" + sender_public_key[2:].upper())
    assert key.to_hex() == sender_public_key


def test_k1_3_coordinates_are_padded(sender_public_key):
    key = PublicKey.from_hex(sender_public_key)
    assert PublicKey.from_coordinates(key.x, key.y) == key


def test_k1_4_address_matches_account(sender_public_key):
    key = PublicKey.from_hex(sender_public_key)
    assert key.address == Account.from_key(SENDER_PRIVATE_KEY).address


# =============================================================================
# K2. Validation
# =============================================================================

def test_k2_1_rejects_point_off_curve(sender_public_key):
    tampered = sender_public_key[:-1] + ("0" if sender_public_key[-1] != "0" else "1")
    with pytest.raises(InvalidPublicKey):
        PublicKey.from_hex(tampered)


@pytest.mark.parametrize("value", [
    "0x04",
    "0x05" + "00" * 64,
    "0x04" + "zz" * 64,
    "0x" + "04" * 33,
])
def test_k2_2_rejects_malformed(value):
    with pytest.raises(InvalidPublicKey):
        PublicKey.from_hex(value)


def test_k2_3b_coordinate_overflow_keeps_cause():
    with pytest.raises(InvalidPublicKey) as exc:
        PublicKey.from_coordinates(2**256, 1)
    assert isinstance(exc.value.__cause__, InvalidHexInput)


def test_k2_3c_decompress_overflow_keeps_cause():
    with pytest.raises(InvalidPublicKey) as exc:
        PublicKey.from_compressed(2, 2**256)
    assert isinstance(exc.value.__cause__, InvalidHexInput)


def test_k2_3_rejects_non_string():
    with pytest.raises(InvalidPublicKey):
        PublicKey.from_hex(1234)  # type: ignore[arg-type]


# =============================================================================
# K3. Compressed points
# =============================================================================

def test_k3_1_decompress(spending_public_key):
    key = PublicKey.from_hex(spending_public_key)
    prefix = 2 + (key.y & 1)
    assert PublicKey.from_compressed(prefix, key.x) == key


def test_k3_2_rejects_bad_prefix(spending_public_key):
    key = PublicKey.from_hex(spending_public_key)
    with pytest.raises(InvalidPublicKey):
        PublicKey.from_compressed(4, key.x)


def test_k3_3_registry_tuple(spending_public_key, viewing_public_key):
    spending = PublicKey.from_hex(spending_public_key)
    viewing = PublicKey.from_hex(viewing_public_key)
    record = StealthKeyRecord.from_contract_tuple((
        2 + (spending.y & 1), spending.x,
        2 + (viewing.y & 1), viewing.x,
    ))
    assert record.spending_public_key == spending_public_key
    assert record.viewing_public_key == viewing_public_key


def test_k3_4_empty_registry_tuple():
    assert StealthKeyRecord.from_contract_tuple((0, 0, 0, 0)) is None


# =============================================================================
# K4. Key pairs
# =============================================================================

def test_k4_1_single_key_pair(sender_public_key):
    pair = KeyPair.single(PublicKey.from_hex(sender_public_key))
    assert pair.to_dict() == {
        "spendingPublicKey": sender_public_key,
        "viewingPublicKey": sender_public_key,
    }


def test_k4_2_key_pair_is_immutable(spending_public_key, viewing_public_key):
    pair = KeyPair.from_hex(spending_public_key, viewing_public_key)
    with pytest.raises(AttributeError):
        pair.spending_public_key = pair.viewing_public_key  # type: ignore[misc]


def test_k4_3_text_records_need_both_keys(spending_public_key):
    assert StealthKeyRecord.from_text_records(spending_public_key, "") is None
    assert StealthKeyRecord.from_text_records(None, spending_public_key) is None


def test_k4_4_helper_keys_are_distinct():
    assert public_key_hex("0x" + "11" * 32) != public_key_hex("0x" + "22" * 32)
