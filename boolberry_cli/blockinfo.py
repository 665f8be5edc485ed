"""
blockinfo - trailing average block reward.

Walks the most recent blocks (720 by default, roughly a day) and prints how
many were orphaned along with the average reward of the rest. Also serves
as a rough benchmark of how long it takes to pull many headers.
"""
import argparse
import sys
import time
from typing import List, Optional

from boolberry_sdk import BoolberryError, ClientConfig, DaemonClient, to_display

from .common import add_common_args, setup_logging

DEFAULT_BLOCKS = 720


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2
    parser = argparse.ArgumentParser(description="Show the trailing average block reward.")
    parser.add_argument("--blocks", "-n", help="Number of trailing blocks", type=int, default=DEFAULT_BLOCKS)
    add_common_args(parser, config, daemon=True)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    if args.blocks <= 0:
        print("--blocks must be positive")
        return 2

    try:
        daemon = DaemonClient(args.daemon, timeout=args.timeout)
    except ValueError as e:
        print(f"Invalid address: {e}")
        return 2

    try:
        height = daemon.get_height()
    except BoolberryError as e:
        print(f"Error getting height: {e}")
        return 1

    orphans = 0
    normal = 0
    total_reward = 0
    started = time.monotonic()

    for h in range(max(height - args.blocks, 0), height):
        try:
            header = daemon.get_block_header_by_height(h)
        except BoolberryError as e:
            print(f"Error getting blockheader: {e}")
            return 1
        if header.orphan_status:
            orphans += 1
        else:
            normal += 1
            total_reward += header.reward

    average = to_display(total_reward // normal) if normal else 0.0
    print(f"Normal: {normal}  Orphans: {orphans}  Avg Reward: {average:.2f}")
    print(f"Fetched {normal + orphans} headers in {time.monotonic() - started:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
