import logging
from typing import Optional

from .encoding import MAX_UINT256, decode_uint256, encode_approve, encode_balance_of
from .registry import TokenRegistry
from .rpc import JsonRpcTransport

logger = logging.getLogger(__name__)


class ContractCallClient:
    """Reads and writes that go through normal contract execution."""

    def __init__(self, transport: JsonRpcTransport, registry: TokenRegistry):
        self.transport = transport
        self.registry = registry

    def read_balance(self, symbol: str, account: str) -> int:
        token = self.registry.lookup(symbol)
        if token.is_native:
            return decode_uint256(self.transport.send("eth_getBalance", [account, "latest"]))
        call = {"to": token.address, "data": encode_balance_of(account)}
        return decode_uint256(self.transport.send("eth_call", [call, "latest"]))

    def grant_max_allowance(self, symbol: str, holder: str, spender: str) -> Optional[str]:
        """Approve ``spender`` for the maximum amount of ``holder``'s tokens.

        The node must be able to sign for ``holder`` (an unlocked or
        impersonated account). Returns the transaction hash, or None for the
        native asset, which has no allowances.
        """
        token = self.registry.lookup(symbol)
        if token.is_native:
            return None
        tx = {"from": holder, "to": token.address, "data": encode_approve(spender, MAX_UINT256)}
        tx_hash = self.transport.send("eth_sendTransaction", [tx])
        logger.info("approved %s for max %s from %s (tx %s)", spender, token.symbol, holder, tx_hash)
        return tx_hash
