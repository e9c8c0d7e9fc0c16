import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from .encoding import address_bytes, slot_to_bytes32
from .errors import InvalidKey, UnknownToken

logger = logging.getLogger(__name__)

ETH_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

DEFAULT_TOKENS: Mapping[str, Mapping[str, Any]] = {
    "eth": {"address": ETH_ADDRESS, "decimals": 18, "mappingSlot": None},
    "dai": {"address": "0x6B175474E89094C44Da98b954EedeAC495271d0F", "decimals": 18, "mappingSlot": "0x2"},
    "gtc": {"address": "0xDe30da39c46104798bB5aA3fe8B9e0e1F348163F", "decimals": 18, "mappingSlot": "0x5"},
}


@dataclass(frozen=True)
class TokenDescriptor:
    symbol: str
    address: str
    decimals: int
    mapping_slot: Optional[Union[int, str]]

    def __post_init__(self):
        if not isinstance(self.address, str):
            raise InvalidKey(f"{self.symbol}: address must be a string")
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int) or self.decimals < 0:
            raise InvalidKey(f"{self.symbol}: decimals must be a non-negative integer, got {self.decimals!r}")
        is_sentinel = self.address.lower() == ETH_ADDRESS.lower()
        if self.mapping_slot is None:
            if not is_sentinel:
                raise InvalidKey(f"{self.symbol}: native token must use address {ETH_ADDRESS}")
            return
        if isinstance(self.mapping_slot, bool) or not isinstance(self.mapping_slot, (int, str)):
            raise InvalidKey(f"{self.symbol}: mappingSlot must be an integer or hex string")
        if is_sentinel:
            raise InvalidKey(f"{self.symbol}: token contract cannot use the native sentinel address")
        address_bytes(self.address)
        slot_to_bytes32(self.mapping_slot)

    @property
    def is_native(self) -> bool:
        return self.mapping_slot is None


class TokenRegistry(Mapping[str, TokenDescriptor]):
    """Read-only, case-insensitive table of supported tokens."""

    def __init__(self, table: Mapping[str, Mapping[str, Any]]):
        if not isinstance(table, Mapping):
            raise InvalidKey(f"token table must map symbols to tokens, got {type(table).__name__}")
        tokens: Dict[str, TokenDescriptor] = {}
        for symbol, props in table.items():
            if not isinstance(symbol, str) or not isinstance(props, Mapping):
                raise InvalidKey(f"token {symbol!r}: entry must be an object keyed by symbol")
            if "address" not in props or "decimals" not in props:
                raise InvalidKey(f"token {symbol!r}: address and decimals are required")
            key = symbol.lower()
            tokens[key] = TokenDescriptor(
                symbol=key,
                address=props["address"],
                decimals=props["decimals"],
                mapping_slot=props.get("mappingSlot"),
            )
        self._tokens = MappingProxyType(tokens)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "TokenRegistry":
        with open(path, "r", encoding="utf-8") as f:
            table = json.load(f)
        registry = cls(table)
        logger.debug("loaded %d token(s) from %s", len(registry), path)
        return registry

    def lookup(self, symbol: str) -> TokenDescriptor:
        try:
            return self._tokens[symbol.lower()]
        except KeyError:
            raise UnknownToken(symbol) from None

    def __getitem__(self, symbol: str) -> TokenDescriptor:
        return self.lookup(symbol)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.lower() in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)


def default_registry() -> TokenRegistry:
    return TokenRegistry(DEFAULT_TOKENS)
