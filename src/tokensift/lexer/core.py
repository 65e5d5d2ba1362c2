"""Regex-driven lexer with an eager, single-pass scan.

The whole input is scanned at construction. The combined pattern of the
grammar (see patterns.py) is run over the input with finditer:

1. Empty matches are skipped.
2. Matches of a catchable alternative are classified and become tokens.
3. Matches of a non-catchable alternative are dropped.
4. Gaps between matches are unmatched input, handled per ScanConfig.
5. An END_OF_STRING token closes the sequence at len(source).

Thread Safety:
Lexer instances are single-owner. The token tuple is immutable once built;
only the navigation cursor mutates.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from tokensift.config import ScanConfig, get_scan_config
from tokensift.errors import UnrecognizedInputError
from tokensift.lexer.patterns import PatternCache, get_pattern_cache, grammar_name
from tokensift.tokens import END_OF_STRING, Token
from tokensift.utils.logger import get_logger

if TYPE_CHECKING:
    from tokensift.lexer.patterns import CompiledPattern
    from tokensift.protocols import LexerGrammar

logger = get_logger(__name__)


class Lexer:
    """Scans a string into an indexable tuple of tokens.

    Usage:
        >>> lexer = Lexer("SELECT a FROM b", SqlGrammar())
        >>> lexer.get_token()
        Token(KEYWORD, 'SELECT', @0)
        >>> lexer.move_next()
        True
        >>> lexer.get_token()
        Token(IDENT, 'a', @7)

    """

    __slots__ = ("_source", "_grammar", "_tokens", "_position")

    def __init__(
        self,
        source: str,
        grammar: LexerGrammar,
        *,
        cache: PatternCache | None = None,
    ) -> None:
        """Initialize the lexer and scan source immediately.

        Args:
            source: The input to tokenize
            grammar: Pattern grammar and classifier
            cache: Pattern cache to use (defaults to the process-wide cache)

        Raises:
            PatternCompileError: If the grammar's patterns are invalid
            UnrecognizedInputError: Only under ScanConfig(unmatched="raise")
        """
        self._source = source
        self._grammar = grammar
        self._position = 0

        if cache is None:
            cache = get_pattern_cache()
        compiled = cache.get_or_compile(grammar)
        self._tokens: tuple[Token, ...] = tuple(
            self._scan(compiled, get_scan_config())
        )

    def _scan(self, compiled: CompiledPattern, config: ScanConfig) -> Iterator[Token]:
        source = self._source
        classify = self._grammar.classify
        catchable_groups = compiled.catchable_groups
        last_end = 0

        for match in compiled.regex.finditer(source):
            start, end = match.span()
            if start == end:
                continue
            if start > last_end:
                yield from self._unmatched(source[last_end:start], last_end, config)
            last_end = end

            if match.lastindex in catchable_groups:
                token_type, value = classify(match.group())
                yield Token(token_type, value, start)

        if last_end < len(source):
            yield from self._unmatched(source[last_end:], last_end, config)

        yield Token(END_OF_STRING, "", len(source))

    def _unmatched(self, text: str, position: int, config: ScanConfig) -> Iterator[Token]:
        if config.unmatched == "token":
            yield Token(config.unmatched_type, text, position)
        elif config.unmatched == "raise":
            raise UnrecognizedInputError(text, position)
        else:
            logger.debug(
                "Discarding unmatched input %r at %d (%s)",
                text,
                position,
                grammar_name(self._grammar),
            )

    # =========================================================================
    # Navigation
    # =========================================================================

    def reset(self) -> Lexer:
        """Move the cursor back to the first token."""
        self._position = 0
        return self

    def reset_position(self, position: int = 0) -> Lexer:
        """Place the cursor on the given token index."""
        self._position = position
        return self

    @property
    def position(self) -> int:
        """Index of the current token."""
        return self._position

    def get_token(self) -> Token | None:
        """Token under the cursor, or None when out of range."""
        return self.token_at(self._position)

    def move_next(self) -> bool:
        """Advance the cursor; True if a token exists at the new position."""
        self._position += 1
        return self.token_at(self._position) is not None

    def token_at(self, index: int) -> Token | None:
        """Token at index, or None when out of range (negative included)."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def source(self) -> str:
        return self._source

    @property
    def grammar(self) -> LexerGrammar:
        return self._grammar

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All tokens, END_OF_STRING included."""
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"Lexer({len(self._tokens)} tokens, position={self._position})"
