"""
bbsend - transfer funds with the Boolberry wallet RPC interface.
"""
import argparse
import sys
from typing import List, Optional

from boolberry_sdk import BoolberryError, ClientConfig, WalletClient, from_display, to_display
from boolberry_sdk.units import MULTIPLIER

from .common import add_common_args, setup_logging

# Refuse to send unless the wallet holds more than this many smallest units
MIN_UNLOCKED_BALANCE = 1 * MULTIPLIER


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2
    parser = argparse.ArgumentParser(description="Send BBR from a wallet.")
    parser.add_argument("destination", help="Destination address")
    parser.add_argument("amount", help="Amount to send in BBR")
    parser.add_argument("--id", dest="payment_id", help="Payment ID (optional)", default="")
    parser.add_argument("--mixin", "-m", help="Mixin count", type=int, default=0)
    parser.add_argument("--yes", "-y", help="Do not ask for confirmation", action="store_true")
    add_common_args(parser, config, wallet=True)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    if args.mixin < 0:
        print("Mixin count must not be negative")
        return 2

    try:
        amount = from_display(args.amount)
    except (TypeError, ValueError) as e:
        print(f"Invalid amount: {e}")
        return 2

    try:
        wallet = WalletClient(args.wallet, timeout=args.timeout)
    except ValueError as e:
        print(f"Invalid address: {e}")
        return 2

    try:
        balance = wallet.get_balance()
    except BoolberryError as e:
        print(f"Could not get balance: {e}")
        return 1
    print(f"Balance: {to_display(balance.unlocked_balance):.2f}")

    if balance.unlocked_balance <= MIN_UNLOCKED_BALANCE:
        print("Not enough unlocked balance to send tx")
        return 1

    print(f"About to transfer {to_display(amount):.2f} to {args.destination}")
    if args.payment_id:
        print(f"with payment ID: {args.payment_id}")
    print()

    if not args.yes:
        answer = input("Proceed? [y/N] ").strip().lower()
        if answer not in ("y", "yes"):
            print("Aborted")
            return 1

    try:
        tx_hash = wallet.transfer(args.destination, amount, args.mixin, args.payment_id)
    except BoolberryError as e:
        print(f"Could not do transfer: {e}")
        return 1
    print(f"Transferred BBR, txid: {tx_hash}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
