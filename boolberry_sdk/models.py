"""
Data models for the Boolberry SDK.

Request parameter records are serialized into the ``params`` member of a
JSON-RPC envelope; result records are validated from the ``result`` member
(or from the whole body for the daemon's plain GET endpoints).
"""
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

from .units import DEFAULT_FEE


class RpcErrorObject(BaseModel):
    """The ``error`` member of a JSON-RPC response"""
    model_config = ConfigDict(frozen=True)

    code: int = 0
    message: str = ""


class JsonRpcResponse(BaseModel):
    """
    JSON-RPC 2.0 response envelope.

    ``result`` is kept undecoded here; it is only validated against the
    caller's result model once the error code is known to be zero.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = 0
    jsonrpc: str = "2.0"
    error: Optional[RpcErrorObject] = None
    result: Any = None

    def error_info(self) -> Tuple[int, str]:
        """Return ``(code, message)``, ``(0, "")`` when no error was reported."""
        if self.error is None:
            return 0, ""
        return self.error.code, self.error.message


# Daemon

class HeightResponse(BaseModel):
    """Body of ``GET /getheight``"""
    model_config = ConfigDict(frozen=True)

    # Absent when the daemon is not ready; status tells why
    height: Optional[NonNegativeInt] = None
    status: str


class DaemonInfo(BaseModel):
    """
    Snapshot of node statistics from ``GET /getinfo``.

    Only the common counters are declared; anything else the daemon
    reports is kept as an extra attribute.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    status: str
    height: Optional[NonNegativeInt] = None
    difficulty: Optional[NonNegativeInt] = None
    tx_count: Optional[NonNegativeInt] = None
    tx_pool_size: Optional[NonNegativeInt] = None
    alt_blocks_count: Optional[NonNegativeInt] = None
    outgoing_connections_count: Optional[NonNegativeInt] = None
    incoming_connections_count: Optional[NonNegativeInt] = None
    white_peerlist_size: Optional[NonNegativeInt] = None
    grey_peerlist_size: Optional[NonNegativeInt] = None


class BlockHeader(BaseModel):
    """Block header as returned by ``getblockheaderbyheight``"""
    model_config = ConfigDict(frozen=True, extra="allow")

    timestamp: NonNegativeInt
    height: NonNegativeInt
    major_version: Optional[int] = None
    minor_version: Optional[int] = None
    prev_hash: Optional[str] = None
    nonce: Optional[NonNegativeInt] = None
    orphan_status: bool = False
    depth: Optional[NonNegativeInt] = None
    hash: Optional[str] = None
    difficulty: Optional[Union[NonNegativeInt, str]] = None
    reward: NonNegativeInt = 0


class BlockHeaderByHeightParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    height: NonNegativeInt


class BlockHeaderResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str = ""
    block_header: BlockHeader


# Wallet

class Balance(BaseModel):
    """Wallet balance in smallest units"""
    model_config = ConfigDict(frozen=True)

    balance: NonNegativeInt
    unlocked_balance: NonNegativeInt

    @model_validator(mode="after")
    def _unlocked_within_total(self) -> "Balance":
        if self.unlocked_balance > self.balance:
            raise ValueError(
                f"unlocked_balance {self.unlocked_balance} exceeds balance {self.balance}"
            )
        return self


class TransferDestination(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: NonNegativeInt
    address: str


class TransferParams(BaseModel):
    """Parameters of the wallet ``transfer`` method"""
    model_config = ConfigDict(frozen=True)

    destinations: List[TransferDestination] = Field(..., min_length=1)
    fee: NonNegativeInt = DEFAULT_FEE
    mixin: NonNegativeInt = 0
    unlock_time: NonNegativeInt = 0
    payment_id: str = ""


class TransferResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    tx_hash: str


class GetPaymentsParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    payment_id: str


class PaymentDetails(BaseModel):
    """One incoming payment matching a payment id"""
    model_config = ConfigDict(frozen=True)

    tx_hash: str
    amount: NonNegativeInt
    block_height: NonNegativeInt
    unlock_time: NonNegativeInt = 0


class PaymentsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    # The wallet omits the key entirely when nothing matched
    payments: List[PaymentDetails] = Field(default_factory=list)
