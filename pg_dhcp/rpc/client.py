"""
Client for the administrative RPC interface of a running DHCP server.

Usage:
    with RPCClient.connect(RPCConfig(address="127.0.0.1:8677")) as client:
        for stat in client.server.get_pool_stats():
            print(stat.network_name, stat.free)
"""

import os
from dataclasses import dataclass
from typing import Any

from ..const import DEFAULT_RPC_ADDRESS, DEFAULT_RPC_TIMEOUT
from ..logging import get_logger
from ..models.stats import PoolStat, StatusResp
from .channel import JSONRPCChannel, RPCChannel, RPCError


logger = get_logger("rpc.client")


@dataclass
class RPCConfig:
    """RPC connection settings."""

    address: str = DEFAULT_RPC_ADDRESS
    timeout: float = DEFAULT_RPC_TIMEOUT

    @classmethod
    def from_env(cls) -> "RPCConfig":
        """Build settings from PG_DHCP_RPC_ADDRESS / PG_DHCP_RPC_TIMEOUT."""
        config = cls()
        address = os.environ.get("PG_DHCP_RPC_ADDRESS")
        if address:
            config.address = address
        timeout = os.environ.get("PG_DHCP_RPC_TIMEOUT")
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid PG_DHCP_RPC_TIMEOUT: {timeout!r}")
        return config


class ServerRPCRequest:
    """Read-only queries against the server's "Server" RPC service."""

    def __init__(self, client: "RPCClient"):
        self.client = client

    def get_pool_stats(self) -> list[PoolStat]:
        """
        Get lease statistics for every pool.

        Raises:
            RPCError: If the call fails
        """
        reply = self.client.call("Server.GetPoolStats", 0)
        if reply is None:
            return []
        if not isinstance(reply, list):
            raise RPCError("Server.GetPoolStats", f"expected a list, got {type(reply).__name__}")
        try:
            return [PoolStat.from_dict(item) for item in reply]
        except (AttributeError, TypeError, ValueError) as e:
            raise RPCError("Server.GetPoolStats", f"malformed pool statistic: {e}") from e

    def mem_status(self) -> StatusResp:
        """
        Get memory and process status of the server.

        Raises:
            RPCError: If the call fails
        """
        reply = self.client.call("Server.MemStatus", 0)
        if reply is not None and not isinstance(reply, dict):
            raise RPCError("Server.MemStatus", f"expected an object, got {type(reply).__name__}")
        try:
            return StatusResp.from_dict(reply)
        except (AttributeError, TypeError, ValueError) as e:
            raise RPCError("Server.MemStatus", f"malformed status: {e}") from e


class RPCClient:
    """Owns an RPC channel and exposes the server request groups."""

    def __init__(self, channel: RPCChannel):
        self.channel = channel
        self.server = ServerRPCRequest(self)

    @classmethod
    def connect(cls, config: RPCConfig | None = None) -> "RPCClient":
        """Create a client over a JSON-RPC socket channel."""
        config = config or RPCConfig()
        return cls(JSONRPCChannel(config.address, config.timeout))

    def call(self, method: str, params: Any) -> Any:
        logger.debug(f"Calling {method}")
        return self.channel.call(method, params)

    def close(self) -> None:
        self.channel.close()

    def __enter__(self) -> "RPCClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
