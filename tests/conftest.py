"""
Pytest configuration and fixtures.
"""

import json
import logging
import socket
import threading
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example configuration shipped with the project."""
    return Path(__file__).parent.parent / "dhcp.example.conf"


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging() so they don't outlive a test."""
    yield
    root = logging.getLogger("pg_dhcp")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()


Handler = Callable[[dict[str, Any]], dict[str, Any]]


@pytest.fixture
def rpc_server() -> Iterator[Callable[[Handler], tuple[str, list[dict[str, Any]]]]]:
    """
    Start a single-connection JSON-RPC server on localhost.

    The returned factory takes a handler mapping a decoded request to a
    response object and returns the server address and the list that
    collects received requests.
    """
    started: list[tuple[socket.socket, threading.Thread]] = []

    def start(handler: Handler) -> tuple[str, list[dict[str, Any]]]:
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        listener.settimeout(5)
        requests: list[dict[str, Any]] = []

        def serve() -> None:
            try:
                conn, _ = listener.accept()
            except OSError:
                return
            with conn, conn.makefile("rb") as f:
                for line in f:
                    request = json.loads(line)
                    requests.append(request)
                    conn.sendall(json.dumps(handler(request)).encode() + b"\n")

        thread = threading.Thread(target=serve, daemon=True)
        thread.start()
        started.append((listener, thread))
        host, port = listener.getsockname()
        return f"{host}:{port}", requests

    yield start

    for listener, thread in started:
        listener.close()
        thread.join(timeout=5)
