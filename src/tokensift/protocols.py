"""Protocols for tokensift.

Defines the contracts a concrete grammar and a token source must satisfy.
The lexer and screener hold values of these types instead of requiring
subclassing.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tokensift.tokens import Token


@runtime_checkable
class LexerGrammar(Protocol):
    """Pattern grammar and classification logic for one language.

    Thread Safety:
        Implementations must be stateless. Pattern declarations are treated
        as fixed per grammar and their compiled form is cached.

    """

    def catchable_patterns(self) -> Sequence[str]:
        """Pattern fragments whose matches become tokens, in priority order."""
        ...

    def non_catchable_patterns(self) -> Sequence[str]:
        """Pattern fragments whose matches are consumed and dropped."""
        ...

    def classify(self, value: str) -> tuple[int, str]:
        """Map matched text to its token type and final value.

        Must be pure. The returned value may differ from the input (case
        folding, unquoting); the token position still comes from the match.
        """
        ...

    def pattern_modifiers(self) -> re.RegexFlag:
        """Flags applied to the combined pattern (usually re.IGNORECASE)."""
        ...


@runtime_checkable
class TokenSource(Protocol):
    """Index-addressable token sequence a screener can wrap."""

    def token_at(self, index: int) -> Token | None:
        """Return the token at index, or None when out of range."""
        ...

    def __len__(self) -> int: ...
