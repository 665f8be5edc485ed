"""
HTTP transport for the Boolberry daemon and wallet RPC interfaces.

Two request styles are supported:

* JSON-RPC 2.0 over ``POST {base_url}/json_rpc``. Failures reported by the
  remote service arrive in the envelope's ``error`` member.
* Plain JSON over ``GET`` for the daemon's legacy endpoints
  (``/getheight``, ``/getinfo``). These carry a ``status`` string instead
  of an error object, which the caller checks.
"""
import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import (
    DecodeError, EncodeError, RequestTimeoutError, RPCError, TransportError
)
from .models import JsonRpcResponse

JSON_RPC_VERSION = "2.0"
JSON_RPC_PATH = "/json_rpc"

M = TypeVar("M", bound=BaseModel)


def build_request(method: str, params: Optional[BaseModel] = None) -> Dict[str, Any]:
    """
    Build a JSON-RPC 2.0 request body.

    Args:
        method: Remote method name
        params: Parameter record, omitted from the body when None

    Returns:
        A new request dictionary
    """
    request: Dict[str, Any] = {"jsonrpc": JSON_RPC_VERSION, "method": method}
    if params is not None:
        request["params"] = params.model_dump()
    return request


class JsonRpcTransport:
    """
    Performs single request/response round trips against a Boolberry service.

    The transport never retries: a failed request is reported to the caller
    immediately. It holds no per-call state and can be shared between
    threads and between daemon and wallet clients.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the transport

        Args:
            timeout: Request timeout in seconds (None blocks until the
                service answers or the connection fails)
            session: Optional pre-configured requests session
            logger: Optional logger instance to use for debug/error logging
        """
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        if session is None:
            session = requests.Session()
            # Disable retries at the urllib3 level as well
            no_retries = Retry(total=0, connect=0, read=0, redirect=0, status=0, raise_on_status=False)
            session.mount("http://", HTTPAdapter(max_retries=no_retries))
            session.mount("https://", HTTPAdapter(max_retries=no_retries))
        self.session = session

    def post_json_rpc(
        self,
        base_url: str,
        method: str,
        params: Optional[BaseModel],
        result_model: Type[M]
    ) -> M:
        """
        Call a JSON-RPC method and return its validated result.

        Args:
            base_url: Service address, e.g. ``http://localhost:10102``
            method: Remote method name
            params: Parameter record or None
            result_model: Model the ``result`` member is validated against

        Returns:
            The decoded result

        Raises:
            EncodeError: If the request cannot be serialized
            TransportError: If the HTTP request fails
            DecodeError: If the response is not a valid envelope or result
            RPCError: If the envelope carries a non-zero error code
        """
        try:
            body = json.dumps(build_request(method, params))
        except (TypeError, ValueError) as e:
            self.logger.error(f"Failed to encode {method} request: {e}")
            raise EncodeError(f"Failed to encode {method} request: {e}") from e

        url = f"{base_url}{JSON_RPC_PATH}"
        self.logger.debug(f"POST {url} method={method}")
        response = self._send("POST", url, data=body, headers={"Content-Type": "application/json"})

        envelope = self._decode(response, JsonRpcResponse)
        code, message = envelope.error_info()
        if code != 0:
            self.logger.error(f"{method} failed with RPC error {code}: {message}")
            raise RPCError(message, code)

        if envelope.result is None:
            raise DecodeError(f"Response to {method} has neither result nor error")
        try:
            return result_model.model_validate(envelope.result)
        except ValidationError as e:
            self.logger.error(f"Unexpected {method} result: {e}")
            raise DecodeError(f"Unexpected {method} result: {e}") from e

    def get_json(self, url: str, response_model: Type[M]) -> M:
        """
        Fetch a plain JSON document.

        Args:
            url: Full endpoint URL
            response_model: Model the whole body is validated against

        Returns:
            The decoded body

        Raises:
            TransportError: If the HTTP request fails
            DecodeError: If the body is not JSON or does not match the model
        """
        self.logger.debug(f"GET {url}")
        response = self._send("GET", url)
        return self._decode(response, response_model)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def __enter__(self) -> "JsonRpcTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _send(self, http_method: str, url: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(http_method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.Timeout as e:
            self.logger.error(f"Request to {url} timed out: {e}")
            raise RequestTimeoutError(f"Request to {url} timed out: {e}") from e
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            self.logger.error(f"Request to {url} failed with HTTP {status_code}")
            raise TransportError(f"Request to {url} failed: {e}", status_code=status_code) from e
        except requests.RequestException as e:
            self.logger.error(f"Request to {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e
        return response

    def _decode(self, response: requests.Response, model: Type[M]) -> M:
        content_type = response.headers.get("Content-Type", "")
        if content_type and "json" not in content_type:
            self.logger.warning(f"Unexpected Content-Type: {content_type} (expected application/json)")

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON response from {response.url}: {e}")
            raise DecodeError(f"Invalid JSON response: {e}") from e
        self.logger.debug(f"Response from {response.url}: {data}")

        try:
            return model.model_validate(data)
        except ValidationError as e:
            self.logger.error(f"Unexpected response shape from {response.url}: {e}")
            raise DecodeError(f"Unexpected response shape: {e}") from e
