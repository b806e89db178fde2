"""
Synchronous RPC channels.

JSONRPCChannel speaks the line-delimited JSON-RPC 1.0 codec of Go's
net/rpc/jsonrpc over a TCP or Unix socket, using the standard library only.
"""

import itertools
import json
import socket
from typing import Any, BinaryIO, Protocol

from ..const import DEFAULT_RPC_TIMEOUT
from ..logging import get_logger


logger = get_logger("rpc.channel")


class RPCError(Exception):
    """Exception raised when a remote call fails."""

    def __init__(self, method: str, message: str):
        self.method = method
        super().__init__(f"RPC call {method} failed: {message}")


class RPCChannel(Protocol):
    """A named-method request/response channel."""

    def call(self, method: str, params: Any) -> Any:
        """Invoke method with params and return the decoded result."""
        ...

    def close(self) -> None:
        ...


def parse_address(address: str) -> tuple[int, Any]:
    """
    Split an address into a socket family and a connect() argument.

    "host:port" is TCP; anything containing a slash, or without a port,
    is treated as a Unix socket path.
    """
    host, sep, port = address.rpartition(":")
    if "/" in address or not sep or not port.isdigit():
        return socket.AF_UNIX, address
    return socket.AF_INET, (host or "127.0.0.1", int(port))


class JSONRPCChannel:
    """
    JSON-RPC client channel.

    Connects lazily on the first call. Any transport or decoding failure
    drops the connection so the next call reconnects.
    """

    def __init__(self, address: str, timeout: float = DEFAULT_RPC_TIMEOUT):
        self.address = address
        self.timeout = timeout
        self._sock: socket.socket | None = None
        self._file: BinaryIO | None = None
        self._ids = itertools.count()

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def _connect(self) -> None:
        family, target = parse_address(self.address)
        logger.debug(f"Connecting to RPC server at {self.address}")
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect(target)
        except OSError:
            sock.close()
            raise
        self._sock = sock
        self._file = sock.makefile("rb")

    def close(self) -> None:
        """Close the connection if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def call(self, method: str, params: Any) -> Any:
        """
        Invoke a remote method.

        Raises:
            RPCError: If the call cannot be delivered, the reply is
                malformed, or the server reports an error
        """
        request_id = next(self._ids)
        request = {"method": method, "params": [params], "id": request_id}

        try:
            if self._sock is None:
                self._connect()
            assert self._sock is not None and self._file is not None
            self._sock.sendall(json.dumps(request).encode() + b"\n")
            line = self._file.readline()
            if not line:
                raise ConnectionError("connection closed by server")
            response = json.loads(line)
        except (OSError, ValueError) as e:
            self.close()
            raise RPCError(method, str(e)) from e

        if not isinstance(response, dict):
            self.close()
            raise RPCError(method, "malformed response")

        if response.get("id") != request_id:
            self.close()
            raise RPCError(method, f"response id {response.get('id')!r} does not match {request_id}")

        error = response.get("error")
        if error is not None:
            raise RPCError(method, str(error))

        return response.get("result")

    def __enter__(self) -> "JSONRPCChannel":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
