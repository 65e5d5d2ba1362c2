"""Exception classes for tokensift.

Configuration errors are fatal: they describe a broken grammar declaration,
not bad input. Reading past the end of a token sequence is never an error;
lexers and screeners return None instead.
"""

from __future__ import annotations


class TokenSiftError(Exception):
    """Base exception for all tokensift errors.

    Subclass this for specific error categories.
    """

    pass


class LexerConfigurationError(TokenSiftError):
    """A grammar declares patterns that cannot be used for scanning.

    Raised at lexer construction, never while navigating tokens.
    """

    pass


class PatternCompileError(LexerConfigurationError):
    """Grammar pattern fragments failed to compile into one pattern."""

    def __init__(
        self,
        grammar_name: str,
        message: str,
        pattern: str | None = None,
    ) -> None:
        """Initialize pattern compile error.

        Args:
            grammar_name: Qualified name of the grammar type
            message: Description of the failure
            pattern: The fragment or combined pattern that failed (optional)
        """
        self.grammar_name = grammar_name
        self.message = message
        self.pattern = pattern

        detail = f" in pattern {pattern!r}" if pattern is not None else ""
        super().__init__(f"Grammar '{grammar_name}'{detail}: {message}")


class UnrecognizedInputError(TokenSiftError):
    """Input contains characters matched by no pattern.

    Only raised when the active ScanConfig uses ``unmatched="raise"``;
    the default policy discards such characters silently.
    """

    def __init__(self, text: str, position: int) -> None:
        """Initialize unrecognized input error.

        Args:
            text: The unmatched run of characters
            position: Character offset of the run in the input
        """
        self.text = text
        self.position = position
        super().__init__(f"Unrecognized input {text!r} at position {position}")
