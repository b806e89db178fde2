"""
pg-dhcp configuration lexer and server RPC client.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
