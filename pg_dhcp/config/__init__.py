"""
Lexical analysis of the DHCP server configuration dialect.
"""

from .lexer import Lexer, LexerError, tokenize, tokenize_file
from .source import ByteReader
from .tokens import KEYWORDS, Token, TokenType, lookup

__all__ = [
    "ByteReader",
    "KEYWORDS",
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "lookup",
    "tokenize",
    "tokenize_file",
]
