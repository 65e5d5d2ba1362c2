"""Grammars shared by the test suite."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import IntEnum

from tokensift import END_OF_STRING, BaseGrammar, BaseScreener, Token


class Kind(IntEnum):
    END = END_OF_STRING
    KEYWORD = 1
    IDENT = 2
    NUMBER = 3
    STRING = 4
    SYMBOL = 5


KEYWORDS = frozenset({"SELECT", "FROM", "WHERE", "AND", "OR", "ORDER", "BY"})


class QueryGrammar(BaseGrammar):
    """Small SQL-like query language."""

    __slots__ = ()

    def catchable_patterns(self) -> Sequence[str]:
        return (
            r"[^\W\d][\w.]*",
            r"\d+(?:\.\d+)?",
            r"'(?:[^']|'')*'",
            r"[(),=<>*]",
        )

    def non_catchable_patterns(self) -> Sequence[str]:
        return (r"\s+", r"--[^\n]*")

    def classify(self, value: str) -> tuple[int, str]:
        upper = value.upper()
        if upper in KEYWORDS:
            return Kind.KEYWORD, upper
        if value[0].isdigit():
            return Kind.NUMBER, value
        if value[0] == "'":
            return Kind.STRING, value[1:-1].replace("''", "'")
        if value[0] in "(),=<>*":
            return Kind.SYMBOL, value
        return Kind.IDENT, value


class CaseSensitiveGrammar(QueryGrammar):
    """Lowercase words only, matched case-sensitively."""

    __slots__ = ()

    def catchable_patterns(self) -> Sequence[str]:
        return (r"[a-z]+",)

    def pattern_modifiers(self) -> re.RegexFlag:
        return re.RegexFlag(0)


class MergingScreener(BaseScreener):
    """Folds ``ORDER BY`` into one keyword token."""

    def __init__(self, source: str, lexer) -> None:
        super().__init__(source, lexer)
        self._logical = tuple(self._merge(lexer.tokens))

    @staticmethod
    def _merge(tokens: tuple[Token, ...]):
        index = 0
        while index < len(tokens):
            token = tokens[index]
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if token.value == "ORDER" and following is not None and following.value == "BY":
                yield Token(Kind.KEYWORD, "ORDER BY", token.position)
                index += 2
            else:
                yield token
                index += 1

    def fetch_token(self, index: int) -> Token | None:
        if 0 <= index < len(self._logical):
            return self._logical[index]
        return None
