from typing import Any, Optional


class BalanceOverrideError(Exception):
    pass


class UnknownToken(BalanceOverrideError, KeyError):
    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"unknown token: {self.symbol!r}"


class InvalidKey(BalanceOverrideError, ValueError):
    pass


class AmountOverflow(BalanceOverrideError, ValueError):
    def __init__(self, amount: int):
        super().__init__(f"amount {amount} does not fit in a 32-byte storage word")
        self.amount = amount


class TransportFailure(BalanceOverrideError, RuntimeError):
    def __init__(self, method: str, message: str, error: Optional[Any] = None):
        super().__init__(f"{method}: {message}")
        self.method = method
        self.error = error
