"""
Token definitions and the reserved word table for the DHCP configuration
dialect.

Example config:
    global
        server-identifier 10.0.0.1
        registered
            default-lease-time 86400
        end
    end

    network Lab
        unregistered
            subnet 10.0.1.0/24
                range 10.0.1.10 10.0.1.200
                option router 10.0.1.1
            end
        end
    end
"""

from dataclasses import dataclass
from enum import Enum, auto
from ipaddress import IPv4Address


class TokenType(Enum):
    """Token types produced by the lexer."""

    # Special
    EOF = auto()           # end of input
    ILLEGAL = auto()       # malformed literal

    # Literals
    STRING = auto()        # "quoted string"
    NUMBER = auto()        # 86400
    IP_ADDRESS = auto()    # 10.0.0.1, also each half of 10.0.0.0/24
    COMMENT = auto()       # # text up to end of line
    IDENTIFIER = auto()    # anything that is not a reserved word

    # Keywords
    GLOBAL = auto()
    NETWORK = auto()
    SUBNET = auto()
    POOL = auto()
    RANGE = auto()
    OPTION = auto()
    HOST = auto()
    REGISTERED = auto()
    UNREGISTERED = auto()
    SERVER_IDENTIFIER = auto()
    DEFAULT_LEASE_TIME = auto()
    MAX_LEASE_TIME = auto()
    FREE_LEASE_AFTER = auto()
    INCLUDE = auto()
    LOCAL = auto()
    END = auto()

    @property
    def is_keyword(self) -> bool:
        """Check if this type is a reserved word."""
        return self in KEYWORDS.values()


KEYWORDS: dict[str, TokenType] = {
    "global": TokenType.GLOBAL,
    "network": TokenType.NETWORK,
    "subnet": TokenType.SUBNET,
    "pool": TokenType.POOL,
    "range": TokenType.RANGE,
    "option": TokenType.OPTION,
    "host": TokenType.HOST,
    "registered": TokenType.REGISTERED,
    "unregistered": TokenType.UNREGISTERED,
    "server-identifier": TokenType.SERVER_IDENTIFIER,
    "default-lease-time": TokenType.DEFAULT_LEASE_TIME,
    "max-lease-time": TokenType.MAX_LEASE_TIME,
    "free-lease-after": TokenType.FREE_LEASE_AFTER,
    "include": TokenType.INCLUDE,
    "local": TokenType.LOCAL,
    "end": TokenType.END,
}


def lookup(ident: str) -> TokenType:
    """Resolve identifier text to its reserved word type, or IDENTIFIER."""
    return KEYWORDS.get(ident, TokenType.IDENTIFIER)


TokenValue = str | int | IPv4Address | None


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: TokenValue
    line: int
    raw: str = ""  # Original text representation

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, line {self.line})"
