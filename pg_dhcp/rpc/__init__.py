"""
RPC client for a running DHCP server.
"""

from .channel import JSONRPCChannel, RPCChannel, RPCError
from .client import RPCClient, RPCConfig, ServerRPCRequest

__all__ = [
    "JSONRPCChannel",
    "RPCChannel",
    "RPCClient",
    "RPCConfig",
    "RPCError",
    "ServerRPCRequest",
]
