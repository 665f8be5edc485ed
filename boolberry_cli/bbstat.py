"""
bbstat - show a few status values from the daemon and the wallet.
"""
import argparse
import sys
from datetime import datetime, timezone
from typing import List, Optional

from boolberry_sdk import BoolberryError, ClientConfig, DaemonClient, WalletClient, to_display

from .common import add_common_args, setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2
    parser = argparse.ArgumentParser(description="Display Boolberry daemon and wallet status.")
    add_common_args(parser, config, daemon=True, wallet=True)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        daemon = DaemonClient(args.daemon, timeout=args.timeout)
        wallet = WalletClient(args.wallet, timeout=args.timeout)
    except ValueError as e:
        print(f"Invalid address: {e}")
        return 2

    status = 0

    try:
        header = daemon.get_block_header_by_height(1)
        when = datetime.fromtimestamp(header.timestamp, tz=timezone.utc)
        print(f"Block {header.height} has timestamp {when.isoformat()}")
    except BoolberryError as e:
        print(f"Could not get blockheader: {e}")
        status = 1

    try:
        balance = wallet.get_balance()
        print(f"Wallet has unlocked balance {to_display(balance.unlocked_balance):f}")
    except BoolberryError as e:
        print(f"Could not get balance: {e}")
        status = 1

    return status


if __name__ == "__main__":
    sys.exit(main())
