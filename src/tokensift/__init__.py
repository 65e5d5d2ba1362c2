"""tokensift: regex lexer and look-ahead screener for top-down parsers.

A grammar declares catchable patterns (matches become tokens), non-catchable
patterns (matches are skipped) and a classifier. The Lexer scans the whole
input eagerly into an indexable token tuple ending with an END_OF_STRING
sentinel. A Screener wraps the lexer with a committed cursor and a peek
pointer for look-ahead, skipping and token remapping.

Quick Start:
    >>> import re
    >>> from tokensift import Lexer, RegexGrammar, Screener
    >>> KEYWORD, IDENT = 1, 2
    >>> grammar = RegexGrammar(
    ...     catchable=(r"[a-z_][a-z0-9_]*",),
    ...     non_catchable=(r"\\s+",),
    ...     classifier=lambda v: (
    ...         (KEYWORD, v.upper()) if v.upper() in {"SELECT", "FROM"} else (IDENT, v)
    ...     ),
    ... )
    >>> query = "select a from b"
    >>> screener = Screener(query, Lexer(query, grammar))
    >>> screener.get_token()
    Token(1, 'SELECT', @0)
    >>> screener.peek_until_any([KEYWORD])
    Token(1, 'FROM', @9)

Custom screeners:
    Subclass BaseScreener and implement fetch_token(index) to merge or
    reinterpret tokens without changing the navigation contract.
"""

from tokensift.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from tokensift.errors import (
    LexerConfigurationError,
    PatternCompileError,
    TokenSiftError,
    UnrecognizedInputError,
)
from tokensift.grammar import BaseGrammar, RegexGrammar
from tokensift.lexer import CompiledPattern, Lexer, PatternCache, get_pattern_cache
from tokensift.protocols import LexerGrammar, TokenSource
from tokensift.screener import BaseScreener, Screener
from tokensift.tokens import END_OF_STRING, UNRECOGNIZED, Token

__version__ = "0.1.0"


def tokenize(source: str, grammar: LexerGrammar) -> tuple[Token, ...]:
    """Scan source with grammar and return all tokens.

    Args:
        source: The input to tokenize
        grammar: Pattern grammar and classifier

    Returns:
        Token tuple ending with the END_OF_STRING sentinel
    """
    return Lexer(source, grammar).tokens


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "tokenize",
    # Tokens
    "END_OF_STRING",
    "UNRECOGNIZED",
    "Token",
    # Grammars
    "BaseGrammar",
    "LexerGrammar",
    "RegexGrammar",
    # Lexer
    "CompiledPattern",
    "Lexer",
    "PatternCache",
    "get_pattern_cache",
    # Screener
    "BaseScreener",
    "Screener",
    "TokenSource",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "LexerConfigurationError",
    "PatternCompileError",
    "TokenSiftError",
    "UnrecognizedInputError",
]
