"""Tests for Solidity mapping slot derivation."""

import pytest
from Crypto.Hash import keccak

from balance_override.encoding import keccak256
from balance_override.errors import InvalidKey
from balance_override.slots import compute_slot

ACCOUNT = "0x" + "ab" * 20


def _keccak(b):
    k = keccak.new(digest_bits=256)
    k.update(b)
    return k.digest()


def test_keccak256_empty_input_vector():
    assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def test_slot_is_hash_of_padded_key_then_padded_base_slot():
    expected = _keccak(b"\x00" * 12 + bytes.fromhex("ab" * 20) + (2).to_bytes(32, "big"))
    assert compute_slot("0x2", ACCOUNT) == expected


def test_slot_is_always_32_bytes():
    assert len(compute_slot(0, ACCOUNT)) == 32


def test_slot_is_deterministic():
    assert compute_slot("0x5", ACCOUNT) == compute_slot("0x5", ACCOUNT)


@pytest.mark.parametrize("base_slot", [2, "0x2", "0x02", b"\x02", (2).to_bytes(32, "big")])
def test_base_slot_forms_are_equivalent(base_slot):
    assert compute_slot(base_slot, ACCOUNT) == compute_slot(2, ACCOUNT)


def test_key_accepts_raw_bytes_and_mixed_case():
    raw = bytes.fromhex("ab" * 20)
    assert compute_slot(2, raw) == compute_slot(2, ACCOUNT)
    assert compute_slot(2, ACCOUNT.upper().replace("0X", "0x")) == compute_slot(2, ACCOUNT)


def test_swapped_operand_order_gives_different_slot():
    key = b"\x00" * 12 + bytes.fromhex("ab" * 20)
    base = (2).to_bytes(32, "big")
    assert compute_slot(2, ACCOUNT) != _keccak(base + key)


def test_different_base_slots_give_different_slots():
    assert compute_slot(2, ACCOUNT) != compute_slot(5, ACCOUNT)


@pytest.mark.parametrize("key", ["0x1234", "0x" + "ab" * 21, b"\x01" * 19, "0xzz" + "00" * 19])
def test_malformed_key_raises_invalid_key(key):
    with pytest.raises(InvalidKey):
        compute_slot(2, key)


@pytest.mark.parametrize("base_slot", [-1, 2**256, b"\x01" * 33])
def test_out_of_range_base_slot_raises_invalid_key(base_slot):
    with pytest.raises(InvalidKey):
        compute_slot(base_slot, ACCOUNT)


def test_zero_key_at_slot_zero_vector():
    assert compute_slot(0, "0x" + "00" * 20).hex() == "ad3228b676f7d3cd4284a5443f17f1962b36e491b30a40b2405849e597ba5fb5"


@pytest.mark.parametrize("key", ["0x" + "b" * 39, "0x" + "b" * 41, "b" * 39])
def test_odd_length_key_raises_invalid_key(key):
    with pytest.raises(InvalidKey):
        compute_slot(2, key)


@pytest.mark.parametrize("key", [20, None, 0.5])
def test_non_hex_non_bytes_key_raises_invalid_key(key):
    with pytest.raises(InvalidKey):
        compute_slot(2, key)


@pytest.mark.parametrize("base_slot", [None, 2.0, [2]])
def test_unsupported_base_slot_type_raises_invalid_key(base_slot):
    with pytest.raises(InvalidKey):
        compute_slot(base_slot, ACCOUNT)
