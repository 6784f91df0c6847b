"""Tests for PromptConfig and Outcome values."""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from question.core.config import MISSING, Outcome, PromptConfig
from question.core.errors import ConfigurationError, Timeout


class TestPromptConfig:
    """Test configuration values."""

    @pytest.mark.unit
    def test_defaults(self):
        config = PromptConfig(message="Name? ")

        assert config.help is None
        assert config.default is MISSING
        assert not config.has_default
        assert len(config.rules) == 0
        assert config.attempts is None
        assert config.timeout is None
        assert config.feedback is None
        assert config.repeat_message
        assert config.repeat_help
        assert config.show_parse_errors
        assert config.parser("raw") == "raw"

    @pytest.mark.unit
    def test_is_frozen(self):
        config = PromptConfig(message="Name? ")
        with pytest.raises(FrozenInstanceError):
            config.message = "Other? "

    @pytest.mark.unit
    def test_evolve_returns_new_value(self):
        config = PromptConfig(message="Name? ")
        changed = config.evolve(attempts=3)

        assert changed.attempts == 3
        assert config.attempts is None

    @pytest.mark.unit
    def test_evolve_converts_timedelta(self):
        config = PromptConfig(message="Name? ").evolve(timeout=timedelta(milliseconds=1500))
        assert config.timeout == 1.5

    @pytest.mark.unit
    def test_none_is_a_valid_default(self):
        config = PromptConfig(message="Name? ", default=None)
        assert config.has_default

    @pytest.mark.unit
    def test_empty_message_is_accepted_at_build_time(self):
        config = PromptConfig()
        with pytest.raises(ConfigurationError, match="message"):
            config.check()

    @pytest.mark.unit
    @pytest.mark.parametrize("attempts", [0, -1, True, 1.5])
    def test_invalid_attempts(self, attempts):
        with pytest.raises(ConfigurationError, match="Attempts"):
            PromptConfig(message="x", attempts=attempts).check()

    @pytest.mark.unit
    def test_negative_timeout(self):
        with pytest.raises(ConfigurationError, match="Timeout"):
            PromptConfig(message="x", timeout=-1.0).check()

    @pytest.mark.unit
    @pytest.mark.parametrize("timeout", ["soon", True, [1]])
    def test_timeout_must_be_a_number(self, timeout):
        config = PromptConfig(message="x").evolve(timeout=timeout)
        assert config.timeout == timeout
        with pytest.raises(ConfigurationError, match="number of seconds"):
            config.check()

    @pytest.mark.unit
    def test_parser_must_be_callable(self):
        with pytest.raises(ConfigurationError, match="Parser"):
            PromptConfig(message="x", parser="int").check()

    @pytest.mark.unit
    def test_valid_configuration_passes_check(self):
        PromptConfig(message="x", attempts=1, timeout=0).check()


class TestOutcome:
    """Test Outcome values."""

    @pytest.mark.unit
    def test_success(self):
        outcome = Outcome.success(42)
        assert outcome.ok
        assert outcome.value == 42
        assert outcome.unwrap() == 42

    @pytest.mark.unit
    def test_failure(self):
        error = Timeout(1.0)
        outcome = Outcome.failure(error)

        assert not outcome.ok
        assert outcome.error is error
        with pytest.raises(Timeout) as exc_info:
            outcome.unwrap()
        assert exc_info.value is error

    @pytest.mark.unit
    def test_missing_is_falsy_singleton(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"
        assert type(MISSING)() is MISSING
