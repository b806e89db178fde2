"""
Application constants and metadata.
"""

# Application info
APP_NAME = "pg-dhcp"
APP_VERSION = "0.1.0"

# Lexer input
DEFAULT_CHUNK_SIZE = 4096

# RPC defaults
DEFAULT_RPC_ADDRESS = "/var/run/pg-dhcp/rpc.sock"
DEFAULT_RPC_TIMEOUT = 5.0
