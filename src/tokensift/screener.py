"""Look-ahead cursor between lexer and parser.

A screener keeps two integers over a token source:

- position: index of the committed current token (starts at 0)
- peek: forward offset from position used for speculative look-ahead
  (starts at 1, reset to 1 whenever the committed position advances)

All reads go through fetch_token(index), which a concrete screener may
override to reinterpret the token stream (for example merging adjacent
tokens). There is no "done" flag: fetch_token returning None past the last
token is the terminal signal, and every predicate treats None as false.

Thread Safety:
Screeners are single-owner. Do not share one across threads.

Example:
    >>> screener = Screener(query, Lexer(query, SqlGrammar()))
    >>> screener.is_token(Kind.KEYWORD)
    True
    >>> screener.peek_until_any([Kind.KEYWORD])
    Token(KEYWORD, 'FROM', @9)
    >>> screener.get_token()  # peeking does not move the cursor
    Token(KEYWORD, 'SELECT', @0)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokensift.protocols import TokenSource
    from tokensift.tokens import Token


class BaseScreener(ABC):
    """Peekable cursor over a token source.

    Subclasses implement fetch_token. The mapping from index to token must
    be a pure function of the index and the (immutable) token source.
    """

    __slots__ = ("_source", "_lexer", "_position", "_peek")

    def __init__(self, source: str, lexer: TokenSource) -> None:
        """Initialize screener.

        Args:
            source: The original input string (for prefix queries)
            lexer: The token source to read from
        """
        self._source = source
        self._lexer = lexer
        self._position = 0
        self._peek = 1

    @abstractmethod
    def fetch_token(self, index: int) -> Token | None:
        """Return the logical token at index, or None past the end."""

    # =========================================================================
    # Cursor state
    # =========================================================================

    def reset(self) -> BaseScreener:
        """Move back to the first token and reset the peek pointer."""
        self._peek = 1
        self._position = 0
        return self

    def reset_peek(self) -> BaseScreener:
        """Reset the peek pointer to 1."""
        self._peek = 1
        return self

    def reset_position(self, position: int = 0) -> BaseScreener:
        """Place the cursor on a token index.

        The peek pointer is left untouched; call reset_peek as well when
        the old look-ahead should be discarded.
        """
        self._position = position
        return self

    @property
    def position(self) -> int:
        return self._position

    @property
    def peek_offset(self) -> int:
        return self._peek

    @property
    def source(self) -> str:
        return self._source

    @property
    def lexer(self) -> TokenSource:
        return self._lexer

    def get_input_until_position(self, position: int) -> str:
        """The first ``position`` characters of the original input."""
        return self._source[: max(position, 0)]

    # =========================================================================
    # Reading
    # =========================================================================

    def get_token(self) -> Token | None:
        """The current token."""
        return self.fetch_token(self._position)

    def get_next_token(self) -> Token | None:
        """The token under the peek pointer, without moving it."""
        return self.fetch_token(self._position + self._peek)

    def move_next(self) -> bool:
        """Advance to the next token.

        Returns:
            False if there's no more token to read, otherwise True
        """
        self._peek = 1
        self._position += 1
        return self.fetch_token(self._position) is not None

    def peek(self) -> Token | None:
        """Return the token under the peek pointer and move the pointer on.

        The pointer only moves when a token was found, so peeking past the
        end keeps returning None.
        """
        token = self.fetch_token(self._position + self._peek)
        if token is not None:
            self._peek += 1
        return token

    # =========================================================================
    # Predicates
    # =========================================================================

    def is_token(self, token_type: int) -> bool:
        token = self.fetch_token(self._position)
        return token is not None and token.type == token_type

    def is_token_any(self, token_types: Collection[int]) -> bool:
        token = self.fetch_token(self._position)
        return token is not None and token.type in token_types

    def is_next_token(self, token_type: int) -> bool:
        """Check the token under the peek pointer. The pointer is not moved."""
        token = self.fetch_token(self._position + self._peek)
        return token is not None and token.type == token_type

    def is_next_token_any(self, token_types: Collection[int]) -> bool:
        """Check the token under the peek pointer. The pointer is not moved."""
        token = self.fetch_token(self._position + self._peek)
        return token is not None and token.type in token_types

    # =========================================================================
    # Combinators
    # =========================================================================

    def skip_until(self, token_type: int) -> bool:
        """Advance until the current token has the given type.

        Returns:
            False if the end was reached without a match, otherwise True
        """
        self._peek = 1
        token = self.fetch_token(self._position)
        while token is not None and token.type != token_type:
            self._position += 1
            token = self.fetch_token(self._position)
        return token is not None

    def skip_while(self, token_type: int) -> bool:
        """Advance while the current token has the given type.

        Returns:
            False if the end was reached, otherwise True
        """
        self._peek = 1
        token = self.fetch_token(self._position)
        while token is not None and token.type == token_type:
            self._position += 1
            token = self.fetch_token(self._position)
        return token is not None

    def peek_until_any(self, token_types: Collection[int]) -> Token | None:
        """Peek forward to the first token with one of the given types."""
        token = self.peek()
        while token is not None and token.type not in token_types:
            token = self.peek()
        return token

    def peek_while_any(self, token_types: Collection[int]) -> Token | None:
        """Peek forward past tokens with the given types.

        Returns:
            The first peeked token outside token_types, or None at the end
        """
        token = self.peek()
        while token is not None and token.type in token_types:
            token = self.peek()
        return token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._position}, peek={self._peek})"


class Screener(BaseScreener):
    """Screener reading the token source as-is."""

    __slots__ = ()

    def fetch_token(self, index: int) -> Token | None:
        return self._lexer.token_at(index)
