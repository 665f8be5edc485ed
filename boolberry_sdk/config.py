"""
Client configuration for the Boolberry SDK.
"""
import os
import urllib.parse
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_DAEMON_URL = "http://localhost:10102"
DEFAULT_WALLET_URL = "http://localhost:9291"

ENV_DAEMON_URL = "BOOLBERRY_DAEMON_URL"
ENV_WALLET_URL = "BOOLBERRY_WALLET_URL"
ENV_TIMEOUT = "BOOLBERRY_RPC_TIMEOUT"


def normalize_url(url: str, name: str = "url") -> str:
    """
    Validate a service address and strip any trailing slash.

    Args:
        url: Address such as ``http://localhost:10102``
        name: Name used in error messages

    Returns:
        The normalized address

    Raises:
        ValueError: If the address is not an http(s) URL with a host
    """
    if not isinstance(url, str) or not url:
        raise ValueError(f"{name} must be a non-empty string")
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"{name} must use http:// or https:// (got: {url})")
    if not parsed.hostname:
        raise ValueError(f"{name} is missing a host (got: {url})")
    return url.rstrip("/")


@dataclass(frozen=True)
class ClientConfig:
    """Addresses of the daemon and wallet services plus the request timeout."""
    daemon_url: str = DEFAULT_DAEMON_URL
    wallet_url: str = DEFAULT_WALLET_URL
    timeout: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "daemon_url", normalize_url(self.daemon_url, "daemon_url"))
        object.__setattr__(self, "wallet_url", normalize_url(self.wallet_url, "wallet_url"))
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive (got: {self.timeout})")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        ``BOOLBERRY_DAEMON_URL``, ``BOOLBERRY_WALLET_URL`` and
        ``BOOLBERRY_RPC_TIMEOUT`` (seconds) override the defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            ClientConfig instance
        """
        env = os.environ if environ is None else environ
        timeout = env.get(ENV_TIMEOUT)
        try:
            parsed_timeout = float(timeout) if timeout else None
        except ValueError:
            raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds (got: {timeout})")
        return cls(
            daemon_url=env.get(ENV_DAEMON_URL) or DEFAULT_DAEMON_URL,
            wallet_url=env.get(ENV_WALLET_URL) or DEFAULT_WALLET_URL,
            timeout=parsed_timeout,
        )
