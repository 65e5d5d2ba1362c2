"""Grammar helpers.

BaseGrammar supplies the default pattern modifiers so concrete grammar
classes only declare their fragments and classifier. RegexGrammar builds a
grammar from plain data for small languages that do not warrant a class.

Example:
    >>> grammar = RegexGrammar(
    ...     catchable=(r"[a-z_][a-z0-9_]*", r"\\d+"),
    ...     non_catchable=(r"\\s+",),
    ...     classifier=lambda v: (2 if v.isdigit() else 1, v),
    ... )
    >>> [t.value for t in Lexer("a 12", grammar)]
    ['a', '12', '']
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass


class BaseGrammar:
    """Convenience base for grammar classes.

    Subclasses override catchable_patterns, non_catchable_patterns and
    classify. pattern_modifiers defaults to case-insensitive matching.
    """

    __slots__ = ()

    def catchable_patterns(self) -> Sequence[str]:
        raise NotImplementedError

    def non_catchable_patterns(self) -> Sequence[str]:
        raise NotImplementedError

    def classify(self, value: str) -> tuple[int, str]:
        raise NotImplementedError

    def pattern_modifiers(self) -> re.RegexFlag:
        return re.IGNORECASE


@dataclass(frozen=True, slots=True)
class RegexGrammar:
    """Grammar declared from data.

    Attributes:
        catchable: Fragments whose matches become tokens
        non_catchable: Fragments whose matches are skipped
        classifier: Pure function returning (type, value) for a match
        modifiers: Flags for the combined pattern

    Thread Safety:
        Frozen dataclass. The classifier must be pure.

    """

    catchable: tuple[str, ...]
    non_catchable: tuple[str, ...] = ()
    classifier: Callable[[str], tuple[int, str]] | None = None
    modifiers: re.RegexFlag = re.IGNORECASE

    def catchable_patterns(self) -> Sequence[str]:
        return self.catchable

    def non_catchable_patterns(self) -> Sequence[str]:
        return self.non_catchable

    def classify(self, value: str) -> tuple[int, str]:
        # Without a classifier, every match gets type 1 so it never
        # collides with END_OF_STRING.
        if self.classifier is None:
            return 1, value
        return self.classifier(value)

    def pattern_modifiers(self) -> re.RegexFlag:
        return self.modifiers
