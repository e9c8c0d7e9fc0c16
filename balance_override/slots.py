"""Storage slot derivation for Solidity ``mapping(address => uint256)``.

Solidity places the value for ``key`` in a mapping declared at slot ``p`` at
``keccak256(abi.encode(key, p))``: both operands left-padded to 32 bytes, key
first. Vyper orders the operands differently, and nested mappings, dynamic
arrays and packed structs need a different derivation, so none of those are
supported here.

See https://docs.soliditylang.org/en/latest/internals/layout_in_storage.html#mappings-and-dynamic-arrays
"""
from typing import Union

from .encoding import HexOrBytes, addr_to_bytes32, keccak256, slot_to_bytes32


def compute_slot(base_slot: Union[int, HexOrBytes], key: HexOrBytes) -> bytes:
    """Return the full 32-byte storage key holding ``key``'s entry."""
    return keccak256(addr_to_bytes32(key) + slot_to_bytes32(base_slot))
