from typing import Union

from Crypto.Hash import keccak

from .errors import AmountOverflow, InvalidKey

MAX_UINT256 = 2**256 - 1

HexOrBytes = Union[str, bytes]


def keccak256(b: bytes) -> bytes:
    k = keccak.new(digest_bits=256)
    k.update(b)
    return k.digest()


def zpad32(b: bytes) -> bytes:
    if len(b) > 32:
        raise InvalidKey(f"value is {len(b)} bytes, expected at most 32")
    return b.rjust(32, b"\x00")


def hex_to_bytes(h: str) -> bytes:
    h = h.strip()
    if h[:2] in ("0x", "0X"):
        h = h[2:]
    if len(h) % 2:
        h = "0" + h
    try:
        return bytes.fromhex(h)
    except ValueError:
        raise InvalidKey(f"not a hex string: {h!r}") from None


def bytes_to_hex(b: bytes) -> str:
    return "0x" + b.hex()


def strip_zeros_hex(b: bytes) -> str:
    # JSON-RPC QUANTITY: no leading zeros, zero is "0x0"
    return hex(int.from_bytes(b, byteorder="big"))


def address_bytes(addr: HexOrBytes) -> bytes:
    if isinstance(addr, str):
        digits = addr.strip()
        if digits[:2] in ("0x", "0X"):
            digits = digits[2:]
        if len(digits) != 40:
            raise InvalidKey(f"address must be 40 hex digits, got {len(digits)}")
        b = hex_to_bytes(digits)
    elif isinstance(addr, (bytes, bytearray)):
        b = bytes(addr)
    else:
        raise InvalidKey(f"address must be a hex string or bytes, not {type(addr).__name__}")
    if len(b) != 20:
        raise InvalidKey(f"address must be 20 bytes, got {len(b)}")
    return b


def addr_to_bytes32(addr: HexOrBytes) -> bytes:
    return zpad32(address_bytes(addr))


def slot_to_bytes32(slot: Union[int, HexOrBytes]) -> bytes:
    if isinstance(slot, int):
        if slot < 0:
            raise InvalidKey("slot index must be non-negative")
        if slot > MAX_UINT256:
            raise InvalidKey("slot index does not fit in 32 bytes")
        return slot.to_bytes(32, byteorder="big")
    if isinstance(slot, str):
        return zpad32(hex_to_bytes(slot))
    if isinstance(slot, (bytes, bytearray)):
        return zpad32(bytes(slot))
    raise InvalidKey(f"slot must be an int, hex string or bytes, not {type(slot).__name__}")


def int_to_bytes32(i: int) -> bytes:
    if i < 0 or i > MAX_UINT256:
        raise AmountOverflow(i)
    return i.to_bytes(32, byteorder="big")


def int_to_storage_word(v: int) -> str:
    return bytes_to_hex(int_to_bytes32(v))


def selector(signature: str) -> bytes:
    return keccak256(signature.encode("ascii"))[:4]


def encode_balance_of(account: HexOrBytes) -> str:
    data = selector("balanceOf(address)") + addr_to_bytes32(account)
    return bytes_to_hex(data)


def encode_approve(spender: HexOrBytes, amount: int) -> str:
    data = selector("approve(address,uint256)") + addr_to_bytes32(spender) + int_to_bytes32(amount)
    return bytes_to_hex(data)


def decode_uint256(h: str) -> int:
    b = hex_to_bytes(h)
    if not b:
        return 0
    return int.from_bytes(b[:32], byteorder="big")
