"""
Tests for token types and the reserved word table.
"""

from pg_dhcp.config.tokens import KEYWORDS, Token, TokenType, lookup


def test_lookup_keywords() -> None:
    for text, token_type in KEYWORDS.items():
        assert lookup(text) is token_type


def test_lookup_identifier() -> None:
    assert lookup("domain-name") is TokenType.IDENTIFIER
    assert lookup("Global") is TokenType.IDENTIFIER


def test_keywords_are_distinct() -> None:
    assert len(set(KEYWORDS.values())) == len(KEYWORDS)


def test_is_keyword() -> None:
    assert TokenType.SUBNET.is_keyword
    assert TokenType.END.is_keyword
    assert not TokenType.IDENTIFIER.is_keyword
    assert not TokenType.IP_ADDRESS.is_keyword
    assert not TokenType.EOF.is_keyword


def test_token_repr() -> None:
    tok = Token(TokenType.NUMBER, 42, 3, "42")
    assert repr(tok) == "Token(NUMBER, 42, line 3)"
