"""
Argument and logging helpers shared by the sample programs.
"""
import argparse
import logging

from boolberry_sdk import ClientConfig


def positive_float(value: str) -> float:
    """argparse type for a strictly positive number of seconds"""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def add_common_args(parser: argparse.ArgumentParser, config: ClientConfig, daemon: bool = False, wallet: bool = False) -> None:
    """Add address, timeout and debug options defaulting to ``config``."""
    if daemon:
        parser.add_argument("--daemon", help="Daemon address", default=config.daemon_url)
    if wallet:
        parser.add_argument("--wallet", "-w", help="Wallet address", default=config.wallet_url)
    parser.add_argument("--timeout", help="Request timeout in seconds", type=positive_float, default=config.timeout)
    parser.add_argument("--debug", help="Enable debug output", action="store_true")


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
