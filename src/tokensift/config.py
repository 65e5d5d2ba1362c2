"""ContextVar-based scan configuration for tokensift.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The lexer reads the active config once per scan.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from tokensift.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(unmatched="token")):
        lexer = Lexer("SELECT a ? b", grammar)
        # "?" becomes an UNRECOGNIZED token instead of being dropped

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from tokensift.tokens import UNRECOGNIZED

UNMATCHED_POLICIES = frozenset({"discard", "token", "raise"})


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        unmatched: What to do with input characters matched by no pattern.
            "discard" drops them silently, "token" emits one token per
            unmatched run, "raise" raises UnrecognizedInputError.
        unmatched_type: Token type used by the "token" policy.

    """

    unmatched: str = "discard"
    unmatched_type: int = UNRECOGNIZED

    def __post_init__(self) -> None:
        if self.unmatched not in UNMATCHED_POLICIES:
            raise ValueError(
                f"unmatched must be one of {sorted(UNMATCHED_POLICIES)}, "
                f"got {self.unmatched!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"unmatched": "token", "other": 1})
            >>> config.unmatched
            'token'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Example:
        >>> with scan_config_context(ScanConfig(unmatched="raise")):
        ...     Lexer("a ? b", grammar)
        Traceback (most recent call last):
        UnrecognizedInputError: Unrecognized input '?' at position 2

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "UNMATCHED_POLICIES",
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
