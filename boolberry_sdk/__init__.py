"""
Boolberry SDK - Python client for the Boolberry daemon and wallet RPC interfaces.

Example use::

    from boolberry_sdk import DaemonClient, WalletClient, to_display

    daemon = DaemonClient("http://localhost:10102")
    header = daemon.get_block_header_by_height(1)
    print(f"Block {header.height} has timestamp {header.timestamp}")

    wallet = WalletClient("http://localhost:9291")
    print(f"Unlocked: {to_display(wallet.get_balance().unlocked_balance):.2f}")
"""
from .version import __version__
from .config import ClientConfig
from .daemon import DaemonClient
from .wallet import WalletClient
from .transport import JsonRpcTransport, build_request
from .models import (
    Balance, BlockHeader, DaemonInfo, JsonRpcResponse, PaymentDetails,
    TransferDestination, TransferParams, TransferResult
)
from .exceptions import (
    BoolberryError, DecodeError, EncodeError, RequestTimeoutError,
    RPCError, StatusError, TransportError
)
from .units import DEFAULT_FEE, MULTIPLIER, from_display, to_display

__all__ = [
    "DaemonClient",
    "WalletClient",
    "ClientConfig",
    "JsonRpcTransport",
    "build_request",
    "Balance",
    "BlockHeader",
    "DaemonInfo",
    "JsonRpcResponse",
    "PaymentDetails",
    "TransferDestination",
    "TransferParams",
    "TransferResult",
    "BoolberryError",
    "TransportError",
    "RequestTimeoutError",
    "EncodeError",
    "DecodeError",
    "RPCError",
    "StatusError",
    "MULTIPLIER",
    "DEFAULT_FEE",
    "to_display",
    "from_display",
    "__version__",
]
