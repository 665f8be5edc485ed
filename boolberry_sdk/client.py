"""
Common base for the daemon and wallet clients.
"""
import logging
from typing import Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .config import normalize_url
from .exceptions import EncodeError
from .transport import JsonRpcTransport

M = TypeVar("M", bound=BaseModel)
C = TypeVar("C", bound="ServiceClient")


class ServiceClient:
    """
    A handle bound to one service address.

    The address and transport are fixed at construction, so a handle can be
    reused across calls and shared between threads.
    """

    def __init__(
        self,
        address: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        transport: Optional[JsonRpcTransport] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the client

        Args:
            address: Base URL of the service, e.g. ``http://localhost:10102``
            timeout: Request timeout in seconds (ignored if transport is given)
            session: Optional requests session (ignored if transport is given)
            transport: Optional transport to share with other clients
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If the address is not an http(s) URL
        """
        self.address = normalize_url(address, "address")
        self.logger = logger or logging.getLogger(self.__class__.__module__)
        # A transport passed in may be shared, so its owner closes it
        self._owns_transport = transport is None
        self.transport = transport or JsonRpcTransport(
            timeout=timeout, session=session, logger=self.logger
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.address!r})"

    def _params(self, model: Type[M], **fields) -> M:
        try:
            return model(**fields)
        except ValidationError as e:
            self.logger.error(f"Invalid {model.__name__}: {e}")
            raise EncodeError(f"Invalid {model.__name__}: {e}") from e

    def _call(self, method: str, params: Optional[BaseModel], result_model: Type[M]) -> M:
        return self.transport.post_json_rpc(self.address, method, params, result_model)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self: C) -> C:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
