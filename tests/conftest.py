"""
Pytest fixtures for the Boolberry SDK tests.

HTTP traffic is faked with requests-mock; nothing reaches the network.
"""
import pytest

from boolberry_sdk import DaemonClient, WalletClient

# Constants for testing
TEST_DAEMON_URL = "http://daemon.test:10102"
TEST_WALLET_URL = "http://wallet.test:9291"
TEST_ADDRESS = "1Ji1ATjvpVoZ6dbyGf8e2vSk6cXm8CqM6qUkH8mRBbVbK3h7dLkrQZ9pC4Q8bJ2yUnEo5X1h5v2b9RwK6qWm3ZpFvmr8Qk"
TEST_PAYMENT_ID = "abc123"


def rpc_result(result, id=0):
    """Body of a successful JSON-RPC response"""
    return {"id": id, "jsonrpc": "2.0", "result": result}


def rpc_error(code, message, id=0):
    """Body of a failed JSON-RPC response"""
    return {"id": id, "jsonrpc": "2.0", "error": {"code": code, "message": message}}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's BOOLBERRY_* settings out of the tests."""
    for name in ("BOOLBERRY_DAEMON_URL", "BOOLBERRY_WALLET_URL", "BOOLBERRY_RPC_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def daemon():
    return DaemonClient(TEST_DAEMON_URL)


@pytest.fixture
def wallet():
    return WalletClient(TEST_WALLET_URL)


@pytest.fixture
def daemon_rpc(requests_mock):
    """Register a JSON-RPC answer on the daemon's /json_rpc endpoint."""
    def _register(**kwargs):
        return requests_mock.post(f"{TEST_DAEMON_URL}/json_rpc", **kwargs)
    return _register


@pytest.fixture
def wallet_rpc(requests_mock):
    """Register a JSON-RPC answer on the wallet's /json_rpc endpoint."""
    def _register(**kwargs):
        return requests_mock.post(f"{TEST_WALLET_URL}/json_rpc", **kwargs)
    return _register


@pytest.fixture
def block_header():
    """A header as the daemon reports it, including fields the SDK does not declare"""
    return {
        "major_version": 1,
        "minor_version": 0,
        "timestamp": 1400000000,
        "prev_hash": "a" * 64,
        "nonce": 12345,
        "orphan_status": False,
        "height": 1,
        "depth": 99,
        "hash": "b" * 64,
        "difficulty": "1",
        "reward": 17592186044415,
        "alias_info": "",
    }
