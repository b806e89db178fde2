"""
Lexer (tokenizer) for the DHCP server configuration dialect.

Supports:
- Identifiers and reserved words (resolved through a lookup table)
- Quoted strings (double quotes, no escape sequences)
- Integers, dotted-quad IPv4 addresses and CIDR network/mask pairs
- Single-line (#) comments, kept in the token stream
- One token of pushback for the parser

Input is classified one raw byte at a time. Only ASCII bytes are ever
treated as letters, digits or whitespace.
"""

import io
from collections import deque
from collections.abc import Callable, Iterator
from ipaddress import IPv4Address, IPv4Interface
from pathlib import Path
from typing import BinaryIO, NamedTuple

from ..logging import get_logger
from .source import ByteReader
from .tokens import Token, TokenType, TokenValue, lookup as keyword_lookup


logger = get_logger("config.lexer")

DIGITS = frozenset(b"0123456789")
LETTERS = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
WHITESPACE = frozenset(b" \t\n\v\f\r")

QUOTE = ord('"')
HASH = ord("#")
NEWLINE = ord("\n")
DOT = ord(".")
SLASH = ord("/")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _decode(buf: bytes | bytearray) -> str:
    return bytes(buf).decode("utf-8", "surrogateescape")


class LexerError(Exception):
    """Exception raised when the token stream is used incorrectly."""

    def __init__(self, message: str, line: int):
        self.line = line
        super().__init__(f"Line {line}: {message}")


class _Lexeme(NamedTuple):
    """A scanned token that has not been stamped with a line number yet."""

    type: TokenType
    value: TokenValue
    raw: str


def _illegal(raw: str) -> _Lexeme:
    return _Lexeme(TokenType.ILLEGAL, None, raw)


class Lexer:
    """
    Pull-based tokenizer over a binary stream.

    Each call to next() returns exactly one token. Malformed literals come
    back as ILLEGAL tokens rather than exceptions, so the parser decides
    whether to abort. The lexer does not close its source.

    Usage:
        with open("dhcp.conf", "rb") as f:
            lexer = Lexer(f)
            tok = lexer.next()
            if tok.type != TokenType.GLOBAL:
                lexer.unread()
    """

    def __init__(
        self,
        source: BinaryIO | ByteReader,
        lookup: Callable[[str], TokenType] = keyword_lookup,
    ):
        self.reader = source if isinstance(source, ByteReader) else ByteReader(source)
        self.lookup = lookup
        self._line = 1
        self._buffer: deque[Token] = deque()
        self._prev: Token | None = None
        self._read_prev = False

    @classmethod
    def from_bytes(
        cls,
        data: bytes | str,
        lookup: Callable[[str], TokenType] = keyword_lookup,
    ) -> "Lexer":
        """Create a lexer over an in-memory configuration text."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return cls(io.BytesIO(data), lookup)

    @property
    def line(self) -> int:
        """Current line number (1-based)."""
        return self._line

    def unread(self) -> None:
        """
        Make the next call to next() return the previous token again.

        Only one token can be pushed back.

        Raises:
            LexerError: If no token has been read yet or a token is
                already pushed back
        """
        if self._prev is None:
            raise LexerError("unread called before any token was read", self._line)
        if self._read_prev:
            raise LexerError("unread called twice without reading a token", self._line)
        self._read_prev = True

    def next(self) -> Token:
        """Get the next token from the source."""
        if self._read_prev:
            self._read_prev = False
            return self._prev  # type: ignore[return-value]

        if self._buffer:
            tok = self._buffer.popleft()
            self._prev = tok
            return tok

        # Every token from a single scan carries the line at which it completed
        tokens = [Token(lx.type, lx.value, self._line, lx.raw) for lx in self._classify()]

        for tok in tokens:
            if tok.type == TokenType.ILLEGAL:
                logger.debug(f"Illegal token {tok.raw!r} on line {tok.line}")

        self._buffer.extend(tokens[1:])
        self._prev = tokens[0]
        return tokens[0]

    def all(self) -> list[Token]:
        """Read every remaining token up to, but not including, EOF."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next()
            if tok.type == TokenType.EOF:
                return
            yield tok

    def _classify(self) -> tuple[_Lexeme, ...]:
        """Skip insignificant bytes and dispatch to a sub-scanner."""
        while True:
            b = self.reader.read_byte()
            if b is None:
                return (_Lexeme(TokenType.EOF, None, ""),)

            if b == QUOTE:
                return self._scan_string()
            if b in DIGITS:
                self.reader.unread_byte()
                return self._scan_numeric()
            if b == NEWLINE:
                self._line += 1
            elif b == HASH:
                return self._scan_comment()
            elif b in LETTERS:
                self.reader.unread_byte()
                return self._scan_identifier()

    def _scan_string(self) -> tuple[_Lexeme, ...]:
        """Read a string literal. The opening quote is already consumed."""
        buf = bytearray()
        while True:
            b = self.reader.read_byte()
            if b is None:
                return (_illegal('"' + _decode(buf)),)
            if b == QUOTE:
                break
            buf.append(b)

        value = _decode(buf)
        return (_Lexeme(TokenType.STRING, value, f'"{value}"'),)

    def _scan_comment(self) -> tuple[_Lexeme, ...]:
        """Read the rest of the line after '#', leaving the newline unread."""
        buf = bytearray()
        while True:
            b = self.reader.read_byte()
            if b is None:
                break
            if b == NEWLINE:
                self.reader.unread_byte()
                break
            buf.append(b)

        value = _decode(buf)
        return (_Lexeme(TokenType.COMMENT, value, "#" + value),)

    def _scan_numeric(self) -> tuple[_Lexeme, ...]:
        """
        Read an integer, IPv4 address or CIDR literal.

        The literal is a run of digits, dots and slashes. Its shape picks
        the interpretation:
            a.b.c.d/n  -> two IP_ADDRESS tokens: address, then netmask
            a.b.c.d    -> IP_ADDRESS
            digits     -> NUMBER (signed 64-bit)
        Anything else, or a literal that fails to parse, is ILLEGAL.
        """
        buf = bytearray()
        dot_count = 0
        has_slash = False

        while True:
            b = self.reader.read_byte()
            if b is None:
                break
            if b in DIGITS:
                buf.append(b)
            elif b == DOT:
                buf.append(b)
                dot_count += 1
            elif b == SLASH:
                buf.append(b)
                has_slash = True
            else:
                self.reader.unread_byte()
                break

        text = buf.decode("ascii")

        if has_slash and dot_count == 3:
            try:
                iface = IPv4Interface(text)
            except ValueError:
                return (_illegal(text),)
            address, prefix = text.split("/", 1)
            return (
                _Lexeme(TokenType.IP_ADDRESS, iface.ip, address),
                _Lexeme(TokenType.IP_ADDRESS, iface.netmask, "/" + prefix),
            )

        if not has_slash and dot_count == 3:
            try:
                return (_Lexeme(TokenType.IP_ADDRESS, IPv4Address(text), text),)
            except ValueError:
                return (_illegal(text),)

        if not has_slash and dot_count == 0:
            try:
                num = int(text)
            except ValueError:
                return (_illegal(text),)
            if not INT64_MIN <= num <= INT64_MAX:
                return (_illegal(text),)
            return (_Lexeme(TokenType.NUMBER, num, text),)

        return (_illegal(text),)

    def _scan_identifier(self) -> tuple[_Lexeme, ...]:
        """Read a maximal run of non-whitespace bytes and resolve its type."""
        buf = bytearray()
        while True:
            b = self.reader.read_byte()
            if b is None:
                break
            if b in WHITESPACE:
                self.reader.unread_byte()
                break
            buf.append(b)

        text = _decode(buf)
        return (_Lexeme(self.lookup(text), text, text),)


def tokenize(data: bytes | str) -> list[Token]:
    """Convenience function to tokenize an in-memory configuration."""
    return Lexer.from_bytes(data).all()


def tokenize_file(path: str | Path) -> list[Token]:
    """
    Tokenize a configuration file.

    Args:
        path: Path to the configuration file

    Returns:
        All tokens except the terminating EOF
    """
    with open(path, "rb") as f:
        return Lexer(f).all()
