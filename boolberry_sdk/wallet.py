"""
WalletClient - balance, transfer and payment queries against a Boolberry wallet.
"""
from typing import List

from .client import ServiceClient
from .config import ClientConfig
from .models import (
    Balance, GetPaymentsParams, PaymentDetails, PaymentsResult, TransferParams, TransferResult
)
from .units import DEFAULT_FEE


class WalletClient(ServiceClient):
    """
    Client for the wallet service's JSON-RPC interface.

    The client only forwards requests: it does not check that the wallet
    can afford a transfer or that a destination address is valid. Those
    checks happen in the wallet service, and failures come back as
    ``RPCError``.
    """

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs) -> "WalletClient":
        """Create a client for ``config.wallet_url``."""
        kwargs.setdefault("timeout", config.timeout)
        return cls(config.wallet_url, **kwargs)

    def get_balance(self) -> Balance:
        """
        Get the wallet balance

        Returns:
            Balance with total and unlocked amounts in smallest units

        Raises:
            RPCError: If the wallet reports an error
            TransportError: If the request fails
            DecodeError: If the response is malformed
        """
        return self._call("getbalance", None, Balance)

    def transfer(
        self,
        destination_address: str,
        amount: int,
        mixin_count: int = 0,
        payment_id: str = ""
    ) -> str:
        """
        Send ``amount`` to a single destination

        Args:
            destination_address: Recipient address
            amount: Amount in smallest units
            mixin_count: Number of decoy inputs to mix with (0 = none)
            payment_id: Hex-encoded payment id, empty for none

        Returns:
            Transaction hash reported by the wallet

        Raises:
            EncodeError: If the arguments cannot form a valid request
            RPCError: If the wallet rejects the transfer
            TransportError: If the request fails
            DecodeError: If the response is malformed
        """
        params = self._params(
            TransferParams,
            destinations=[{"amount": amount, "address": destination_address}],
            fee=DEFAULT_FEE,
            mixin=mixin_count,
            unlock_time=0,
            payment_id=payment_id,
        )
        self.logger.info(f"Transferring {amount} to {destination_address}")
        result = self._call("transfer", params, TransferResult)
        self.logger.info(f"Transfer sent: {result.tx_hash}")
        return result.tx_hash

    def get_payments(self, payment_id: str) -> List[PaymentDetails]:
        """
        List incoming payments tagged with ``payment_id``

        Returns:
            Matching payments, possibly empty
        """
        result = self._call(
            "get_payments",
            self._params(GetPaymentsParams, payment_id=payment_id),
            PaymentsResult,
        )
        return list(result.payments)
