import logging

from .encoding import HexOrBytes, bytes_to_hex, int_to_bytes32, strip_zeros_hex
from .errors import InvalidKey
from .rpc import JsonRpcTransport

logger = logging.getLogger(__name__)

DIALECTS = ("hardhat", "anvil")


class LedgerStateClient:
    """Privileged state writes, only available on a development node."""

    def __init__(self, transport: JsonRpcTransport, dialect: str = "hardhat"):
        if dialect not in DIALECTS:
            raise ValueError(f"unsupported dialect {dialect!r}, expected one of {DIALECTS}")
        self.transport = transport
        self.dialect = dialect

    def set_native_balance(self, account: str, amount: int) -> None:
        int_to_bytes32(amount)
        self.transport.send(f"{self.dialect}_setBalance", [account, hex(amount)])

    def set_storage_at(self, contract: str, slot: bytes, value: bytes) -> None:
        if len(slot) != 32:
            raise InvalidKey(f"storage slot must be 32 bytes, got {len(slot)}")
        if len(value) != 32:
            raise InvalidKey(f"storage value must be 32 bytes, got {len(value)}")
        self.transport.send(
            f"{self.dialect}_setStorageAt", [contract, strip_zeros_hex(slot), bytes_to_hex(value)]
        )


class LedgerClock:
    def __init__(self, transport: JsonRpcTransport):
        self.transport = transport

    def increase_time(self, seconds: int) -> None:
        """Advance the clock by ``seconds`` and mine a block so it takes effect."""
        self.transport.send("evm_increaseTime", [int(seconds)])
        self.transport.send("evm_mine", [])

    def set_next_block_timestamp(self, timestamp: int) -> int:
        timestamp = int(timestamp)
        self.transport.send("evm_setNextBlockTimestamp", [timestamp])
        logger.debug("next block timestamp set to %d", timestamp)
        return timestamp
