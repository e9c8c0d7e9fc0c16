#!/usr/bin/env python3
import argparse
import logging
import os
import sys

from .contracts import ContractCallClient
from .errors import BalanceOverrideError
from .formatting import format_address
from .ledger import DIALECTS, LedgerStateClient
from .registry import TokenRegistry, default_registry
from .rpc import DEFAULT_RPC_URL, JsonRpcTransport
from .service import BalanceOverrideService


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="balance-override",
        description="Set a native or ERC20 balance on a hardhat/anvil node by writing storage directly.",
    )
    ap.add_argument(
        "--rpc",
        default=os.environ.get("BALANCE_OVERRIDE_RPC", DEFAULT_RPC_URL),
        help="RPC URL (default: $BALANCE_OVERRIDE_RPC or %(default)s)",
    )
    ap.add_argument("--token", required=True, help="Token symbol, e.g. eth, dai, gtc")
    ap.add_argument("--account", required=True, help="Account address to set balance for")
    ap.add_argument("--amount", required=True, type=int, help="New balance (raw integer)")
    ap.add_argument("--tokens", help="JSON token table to use instead of the built-in one")
    ap.add_argument("--dialect", choices=DIALECTS, default="hardhat", help="Node RPC namespace")
    ap.add_argument("--timeout", type=float, default=30, help="RPC timeout in seconds")
    ap.add_argument("--approve", metavar="SPENDER", help="Also grant SPENDER a max allowance from the account")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default="WARNING",
        help="Logging level",
    )
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        registry = TokenRegistry.from_json(args.tokens) if args.tokens else default_registry()
    except (OSError, ValueError, KeyError) as e:
        print(f"failed to load token table: {e}", file=sys.stderr)
        return 2

    transport = JsonRpcTransport(args.rpc, timeout=args.timeout)
    calls = ContractCallClient(transport, registry)
    service = BalanceOverrideService(registry, LedgerStateClient(transport, dialect=args.dialect))
    who = format_address(args.account) or args.account

    try:
        before = calls.read_balance(args.token, args.account)
        print(f"{args.token} balance of {who} (before) = {before}")
        service.set_balance(args.token, args.account, args.amount)
        after = calls.read_balance(args.token, args.account)
        print(f"{args.token} balance of {who} (after) = {after}")
    except BalanceOverrideError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if after != args.amount:
        print(
            f"FAILED: balance reads {after}, expected {args.amount}; "
            "the token may not keep balances in a plain mapping at the configured slot.",
            file=sys.stderr,
        )
        return 1

    if args.approve:
        try:
            tx_hash = calls.grant_max_allowance(args.token, args.account, args.approve)
        except BalanceOverrideError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        if tx_hash:
            print(f"approve tx = {tx_hash}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
