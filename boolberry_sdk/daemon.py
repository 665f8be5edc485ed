"""
DaemonClient - blockchain queries against a Boolberry daemon.
"""
from .client import ServiceClient
from .config import ClientConfig
from .exceptions import DecodeError, StatusError
from .models import (
    BlockHeader, BlockHeaderByHeightParams, BlockHeaderResult, DaemonInfo, HeightResponse
)

STATUS_OK = "OK"


class DaemonClient(ServiceClient):
    """
    Client for the daemon's RPC interface.

    ``/getheight`` and ``/getinfo`` are plain GET endpoints that report
    failure through a ``status`` string; block header lookups go through
    JSON-RPC.

    Example::

        daemon = DaemonClient("http://localhost:10102")
        header = daemon.get_block_header_by_height(1)
        print(header.height, header.timestamp)
    """

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs) -> "DaemonClient":
        """Create a client for ``config.daemon_url``."""
        kwargs.setdefault("timeout", config.timeout)
        return cls(config.daemon_url, **kwargs)

    def get_height(self) -> int:
        """
        Get the current blockchain height

        Returns:
            Height of the chain

        Raises:
            StatusError: If the daemon reports a status other than OK
            TransportError: If the request fails
            DecodeError: If the response is malformed
        """
        response = self.transport.get_json(f"{self.address}/getheight", HeightResponse)
        self._check_status(response.status, "getheight")
        if response.height is None:
            self.logger.error("getheight returned status OK without a height")
            raise DecodeError("getheight response is missing height")
        return response.height

    def get_info(self) -> DaemonInfo:
        """
        Get a snapshot of node statistics

        Returns:
            DaemonInfo with the counters reported by the daemon

        Raises:
            StatusError: If the daemon reports a status other than OK
            TransportError: If the request fails
            DecodeError: If the response is malformed
        """
        info = self.transport.get_json(f"{self.address}/getinfo", DaemonInfo)
        self._check_status(info.status, "getinfo")
        return info

    def get_block_header_by_height(self, height: int) -> BlockHeader:
        """
        Get the header of the block at ``height``.

        Out-of-range heights are rejected by the daemon, not checked here.

        Raises:
            RPCError: If the daemon reports an error
            TransportError: If the request fails
            DecodeError: If the response is malformed
        """
        result = self._call(
            "getblockheaderbyheight",
            self._params(BlockHeaderByHeightParams, height=height),
            BlockHeaderResult,
        )
        return result.block_header

    def _check_status(self, status: str, endpoint: str) -> None:
        if status != STATUS_OK:
            self.logger.error(f"{endpoint} returned status {status!r}")
            raise StatusError(status)
