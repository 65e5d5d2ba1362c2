"""Regex-driven lexer for tokensift.

lexer/
├── __init__.py          # Re-exports Lexer, PatternCache, CompiledPattern
├── core.py              # Lexer class (eager scan + navigation)
└── patterns.py          # Combined-pattern construction, per-grammar cache

Usage:
    >>> from tokensift.lexer import Lexer
    >>> lexer = Lexer("SELECT a FROM b", SqlGrammar())
    >>> for token in lexer:
    ...     print(token)
Token(KEYWORD, 'SELECT', @0)
Token(IDENT, 'a', @7)
Token(KEYWORD, 'FROM', @9)
Token(IDENT, 'b', @14)
Token(0, '', @15)

"""

from tokensift.lexer.core import Lexer
from tokensift.lexer.patterns import (
    CompiledPattern,
    PatternCache,
    compile_grammar,
    get_pattern_cache,
)

__all__ = [
    "CompiledPattern",
    "Lexer",
    "PatternCache",
    "compile_grammar",
    "get_pattern_cache",
]
