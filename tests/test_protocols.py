"""Grammars and token sources satisfy the published protocols."""

from grammars import MergingScreener, QueryGrammar
from tokensift import Lexer, LexerGrammar, RegexGrammar, Screener, Token, TokenSource


class ListSource:
    """A token source that is not a Lexer."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens

    def token_at(self, index: int) -> Token | None:
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def __len__(self) -> int:
        return len(self._tokens)


def test_grammars_are_lexer_grammars() -> None:
    assert isinstance(QueryGrammar(), LexerGrammar)
    assert isinstance(RegexGrammar(catchable=(r"a",)), LexerGrammar)


def test_lexer_is_token_source() -> None:
    assert isinstance(Lexer("a", QueryGrammar()), TokenSource)


def test_screener_over_custom_source() -> None:
    source = ListSource([Token(7, "x", 0), Token(8, "y", 2), Token(0, "", 3)])
    assert isinstance(source, TokenSource)

    screener = Screener("x y", source)
    assert screener.is_token(7)
    assert screener.peek_until_any([0]) == Token(0, "", 3)
    assert screener.skip_while(7)
    assert screener.get_token() == Token(8, "y", 2)


def test_merging_screener_wraps_lexer() -> None:
    screener = MergingScreener("ORDER BY x", Lexer("ORDER BY x", QueryGrammar()))
    assert screener.get_token().value == "ORDER BY"
    assert screener.peek().value == "x"
