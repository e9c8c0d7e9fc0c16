from .contracts import ContractCallClient
from .errors import (
    AmountOverflow,
    BalanceOverrideError,
    InvalidKey,
    TransportFailure,
    UnknownToken,
)
from .ledger import LedgerClock, LedgerStateClient
from .registry import TokenDescriptor, TokenRegistry, default_registry
from .rpc import JsonRpcTransport
from .service import BalanceOverrideService
from .slots import compute_slot

__all__ = [
    "AmountOverflow",
    "BalanceOverrideError",
    "BalanceOverrideService",
    "ContractCallClient",
    "InvalidKey",
    "JsonRpcTransport",
    "LedgerClock",
    "LedgerStateClient",
    "TokenDescriptor",
    "TokenRegistry",
    "TransportFailure",
    "UnknownToken",
    "compute_slot",
    "default_registry",
]
