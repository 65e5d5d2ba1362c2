"""Combined-pattern construction and the per-grammar pattern cache.

A grammar declares two ordered lists of regex fragments. They are joined
into one alternation:

    (c1)|(c2)|...|(?:n1)|(?:n2)|...

Catchable fragments become capturing alternatives, non-catchable fragments
non-capturing ones. The group number of each top-level catchable
alternative is recorded; a match is catchable iff ``match.lastindex`` is one
of those numbers. Groups nested inside a fragment close before the wrapping
group, so fragments may use their own groups freely.

Thread Safety:
PatternCache guards compile-and-store with a lock, so concurrent first use
of a grammar compiles its pattern exactly once. Lookups of an existing
entry take no lock.

"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tokensift.errors import PatternCompileError
from tokensift.utils.logger import get_logger

if TYPE_CHECKING:
    from tokensift.protocols import LexerGrammar

logger = get_logger(__name__)

# (grammar type, catchable fragments, non-catchable fragments, flags)
PatternKey = tuple[type, tuple[str, ...], tuple[str, ...], int]


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A grammar's combined pattern, ready for scanning.

    Attributes:
        regex: The compiled alternation
        catchable_groups: Group numbers of the top-level catchable alternatives
        source: The combined pattern string

    """

    regex: re.Pattern[str]
    catchable_groups: frozenset[int]
    source: str


def grammar_name(grammar: LexerGrammar) -> str:
    """Qualified name of a grammar's type, for messages."""
    cls = type(grammar)
    return f"{cls.__module__}.{cls.__qualname__}"


def _declared_fragments(
    grammar: LexerGrammar,
) -> tuple[tuple[str, ...], tuple[str, ...], int]:
    name = grammar_name(grammar)
    catchable = tuple(grammar.catchable_patterns())
    non_catchable = tuple(grammar.non_catchable_patterns())

    if not catchable:
        raise PatternCompileError(name, "grammar declares no catchable patterns")
    for fragment in catchable + non_catchable:
        if not isinstance(fragment, str):
            raise PatternCompileError(
                name, f"pattern fragments must be str, got {type(fragment).__name__}"
            )

    return catchable, non_catchable, int(grammar.pattern_modifiers())


def pattern_key(grammar: LexerGrammar) -> PatternKey:
    """Cache key for a grammar: its type plus its declared fragments.

    Keying on the type keeps grammars of different types apart even if they
    happen to declare identical fragments; keying on the fragments keeps
    data-driven grammars of one type apart.
    """
    catchable, non_catchable, flags = _declared_fragments(grammar)
    return type(grammar), catchable, non_catchable, flags


def _count_groups(name: str, fragment: str, flags: int) -> int:
    try:
        return re.compile(fragment, flags).groups
    except re.error as exc:
        raise PatternCompileError(name, str(exc), fragment) from exc


def compile_grammar(grammar: LexerGrammar) -> CompiledPattern:
    """Build and compile the combined pattern for a grammar.

    Args:
        grammar: The grammar whose fragments to combine

    Returns:
        CompiledPattern for scanning

    Raises:
        PatternCompileError: If a fragment or the combined pattern is invalid
    """
    name = grammar_name(grammar)
    catchable, non_catchable, flags = _declared_fragments(grammar)

    parts: list[str] = []
    groups: set[int] = set()
    next_group = 1
    for fragment in catchable:
        inner = _count_groups(name, fragment, flags)
        parts.append(f"({fragment})")
        groups.add(next_group)
        next_group += 1 + inner
    for fragment in non_catchable:
        _count_groups(name, fragment, flags)
        parts.append(f"(?:{fragment})")

    source = "|".join(parts)
    try:
        regex = re.compile(source, flags)
    except re.error as exc:
        raise PatternCompileError(name, str(exc), source) from exc

    logger.debug(
        "Compiled pattern for %s (%d catchable, %d non-catchable)",
        name,
        len(catchable),
        len(non_catchable),
    )
    return CompiledPattern(regex=regex, catchable_groups=frozenset(groups), source=source)


class PatternCache:
    """Compiled patterns keyed per grammar.

    Thread Safety:
        Compile-and-store runs under a lock with a second lookup inside it,
        so each key is compiled once even under concurrent first use.
        Compiled patterns are immutable and safe to share.

    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._entries: dict[PatternKey, CompiledPattern] = {}
        self._lock = threading.Lock()

    def get_or_compile(self, grammar: LexerGrammar) -> CompiledPattern:
        """Return the cached pattern for grammar, compiling it on first use.

        Raises:
            PatternCompileError: If the grammar's patterns are invalid
        """
        key = pattern_key(grammar)
        compiled = self._entries.get(key)
        if compiled is not None:
            return compiled

        with self._lock:
            compiled = self._entries.get(key)
            if compiled is None:
                compiled = compile_grammar(grammar)
                self._entries[key] = compiled
        return compiled

    def clear(self) -> None:
        """Drop all cached patterns."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, grammar: LexerGrammar) -> bool:
        return pattern_key(grammar) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_DEFAULT_CACHE = PatternCache()


def get_pattern_cache() -> PatternCache:
    """Return the process-wide default pattern cache."""
    return _DEFAULT_CACHE


__all__ = [
    "CompiledPattern",
    "PatternCache",
    "PatternKey",
    "compile_grammar",
    "get_pattern_cache",
    "grammar_name",
    "pattern_key",
]
