"""Token definition for the tokensift lexer.

The lexer produces an ordered tuple of Token objects that screeners and
parsers consume. Each Token has a type code, a string value, and the
character offset where the match started.

Token types are plain integers whose domain belongs to the consuming
grammar (an IntEnum works well). Two codes are reserved here:

- END_OF_STRING (0): sentinel appended after the last real match.
- UNRECOGNIZED (-1): default type for unmatched input when the active
  ScanConfig asks for it to be surfaced instead of discarded.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

END_OF_STRING = 0
UNRECOGNIZED = -1


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: Classification code defined by the grammar
        value: The matched text, possibly rewritten by the classifier
        position: Character offset of the match start in the input

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: int
    value: str
    position: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        kind = getattr(self.type, "name", self.type)
        return f"Token({kind}, {val!r}, @{self.position})"

    @property
    def end(self) -> int:
        """Offset just past the value.

        Only meaningful when the classifier did not change the value's length.
        """
        return self.position + len(self.value)

    @property
    def is_end_of_string(self) -> bool:
        """True for the END_OF_STRING sentinel."""
        return self.type == END_OF_STRING
