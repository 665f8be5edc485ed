"""
listpayments - list incoming payments for a payment id.
"""
import argparse
import sys
from typing import List, Optional

from boolberry_sdk import BoolberryError, ClientConfig, WalletClient, to_display

from .common import add_common_args, setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2
    parser = argparse.ArgumentParser(description="List payments received for a payment id.")
    parser.add_argument("payment_id", help="Payment ID")
    add_common_args(parser, config, wallet=True)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        wallet = WalletClient(args.wallet, timeout=args.timeout)
    except ValueError as e:
        print(f"Invalid address: {e}")
        return 2

    try:
        payments = wallet.get_payments(args.payment_id)
    except BoolberryError as e:
        print(f"Could not get payments: {e}")
        return 1

    if not payments:
        print("No payments found")
    for p in payments:
        print(
            f"Payment: tx {p.tx_hash} amount {to_display(p.amount):.2f} "
            f"height {p.block_height} unlock_time {p.unlock_time}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
