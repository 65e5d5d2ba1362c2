"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior, and the unmatched
input policies the lexer applies.
"""

from threading import Thread

import pytest

from grammars import Kind, QueryGrammar
from tokensift import (
    END_OF_STRING,
    UNRECOGNIZED,
    Lexer,
    ScanConfig,
    Token,
    UnrecognizedInputError,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


@pytest.fixture(autouse=True)
def _default_config():
    reset_scan_config()
    yield
    reset_scan_config()


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.unmatched == "discard"
        assert config.unmatched_type == UNRECOGNIZED

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.unmatched = "token"  # type: ignore[misc]

    def test_invalid_policy(self) -> None:
        with pytest.raises(ValueError, match="unmatched must be one of"):
            ScanConfig(unmatched="ignore")

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"unmatched": "token", "unmatched_type": 99, "x": 1})
        assert config == ScanConfig(unmatched="token", unmatched_type=99)

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ValueError):
            ScanConfig.from_dict({"unmatched": "nope"})


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        custom = ScanConfig(unmatched="token")
        set_scan_config(custom)
        assert get_scan_config() is custom
        reset_scan_config()
        assert get_scan_config() == ScanConfig()

    def test_context_manager_restores(self) -> None:
        outer = ScanConfig(unmatched="token")
        set_scan_config(outer)
        with scan_config_context(ScanConfig(unmatched="raise")):
            assert get_scan_config().unmatched == "raise"
        assert get_scan_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(unmatched="raise")):
                raise RuntimeError("boom")
        assert get_scan_config() == ScanConfig()

    def test_thread_isolation(self) -> None:
        """Config set in one thread is invisible to another."""
        seen: dict[str, str] = {}

        def worker() -> None:
            set_scan_config(ScanConfig(unmatched="raise"))
            seen["worker_after"] = get_scan_config().unmatched

        set_scan_config(ScanConfig(unmatched="token"))
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == {"worker_after": "raise"}
        assert get_scan_config().unmatched == "token"


class TestUnmatchedPolicies:
    """The lexer applies the active policy to unmatched input."""

    SOURCE = "a ?? b !"

    def test_discard(self) -> None:
        tokens = Lexer(self.SOURCE, QueryGrammar()).tokens
        assert [t.value for t in tokens] == ["a", "b", ""]

    def test_token(self) -> None:
        with scan_config_context(ScanConfig(unmatched="token")):
            tokens = Lexer(self.SOURCE, QueryGrammar()).tokens
        assert tokens == (
            Token(Kind.IDENT, "a", 0),
            Token(UNRECOGNIZED, "??", 2),
            Token(Kind.IDENT, "b", 5),
            Token(UNRECOGNIZED, "!", 7),
            Token(END_OF_STRING, "", 8),
        )

    def test_token_custom_type(self) -> None:
        with scan_config_context(ScanConfig(unmatched="token", unmatched_type=42)):
            tokens = Lexer("?", QueryGrammar()).tokens
        assert tokens[0] == Token(42, "?", 0)

    def test_raise(self) -> None:
        with scan_config_context(ScanConfig(unmatched="raise")):
            with pytest.raises(UnrecognizedInputError) as exc_info:
                Lexer(self.SOURCE, QueryGrammar())
        assert exc_info.value.text == "??"
        assert exc_info.value.position == 2

    def test_raise_clean_input(self) -> None:
        with scan_config_context(ScanConfig(unmatched="raise")):
            tokens = Lexer("SELECT a", QueryGrammar()).tokens
        assert len(tokens) == 3

    def test_config_read_at_construction(self) -> None:
        """Tokens are fixed once the lexer exists."""
        with scan_config_context(ScanConfig(unmatched="token")):
            lexer = Lexer("?", QueryGrammar())
        assert lexer.tokens[0].type == UNRECOGNIZED
