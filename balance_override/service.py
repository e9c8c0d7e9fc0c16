import logging

from .encoding import address_bytes, int_to_bytes32
from .ledger import LedgerStateClient
from .registry import TokenRegistry
from .slots import compute_slot

logger = logging.getLogger(__name__)


class BalanceOverrideService:
    """Force an account's balance of a registered asset to an exact amount.

    Native balances go through the node's set-balance method. Token balances
    are written straight into the token contract's balance mapping, which
    bypasses mint/transfer logic entirely (total supply is left untouched).
    """

    def __init__(self, registry: TokenRegistry, ledger: LedgerStateClient):
        self.registry = registry
        self.ledger = ledger

    def set_balance(self, symbol: str, account: str, amount: int) -> None:
        token = self.registry.lookup(symbol)
        address_bytes(account)
        word = int_to_bytes32(amount)

        if token.is_native:
            self.ledger.set_native_balance(account, amount)
            logger.info("set native balance of %s to %d", account, amount)
            return

        slot = compute_slot(token.mapping_slot, account)
        self.ledger.set_storage_at(token.address, slot, word)
        logger.info("set %s balance of %s to %d (slot 0x%s)", token.symbol, account, amount, slot.hex())
