"""Parse ``SELECT cols FROM table`` with a grammar class and a screener."""

from collections.abc import Sequence
from enum import IntEnum

from tokensift import END_OF_STRING, BaseGrammar, Lexer, Screener


class Kind(IntEnum):
    END = END_OF_STRING
    KEYWORD = 1
    IDENT = 2
    COMMA = 3


class SelectGrammar(BaseGrammar):
    def catchable_patterns(self) -> Sequence[str]:
        return (r"[a-z_][a-z0-9_]*", r",")

    def non_catchable_patterns(self) -> Sequence[str]:
        return (r"\s+",)

    def classify(self, value: str) -> tuple[int, str]:
        if value == ",":
            return Kind.COMMA, value
        if value.upper() in {"SELECT", "FROM"}:
            return Kind.KEYWORD, value.upper()
        return Kind.IDENT, value


def parse_select(query: str) -> tuple[list[str], str]:
    screener = Screener(query, Lexer(query, SelectGrammar()))
    if not screener.is_token(Kind.KEYWORD):
        raise SyntaxError(f"expected SELECT in {query!r}")

    columns = []
    while screener.move_next() and screener.is_token(Kind.IDENT):
        columns.append(screener.get_token().value)
        screener.move_next()
        if not screener.is_token(Kind.COMMA):
            break

    if not screener.is_token(Kind.KEYWORD) or not screener.is_next_token(Kind.IDENT):
        token = screener.get_token()
        position = token.position if token is not None else len(query)
        raise SyntaxError(f"expected FROM <table> after {screener.get_input_until_position(position)!r}")
    return columns, screener.peek().value


print(parse_select("select id, name from users"))
