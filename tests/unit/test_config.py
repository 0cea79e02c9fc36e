"""Unit tests for configuration settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from bank_account.config import Settings
from bank_account.domain.models import WithdrawPolicy
from bank_account.domain.validation import EmailPrefixRule


class TestSettings:
    """Tests for Settings."""

    def test_default_settings(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.withdraw_policy is WithdrawPolicy.STRICT
        assert settings.email_prefix_rule is EmailPrefixRule.ALNUM

    def test_custom_settings_from_env(self) -> None:
        """Test settings can be configured via environment variables."""
        env_vars = {
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "console",
            "WITHDRAW_POLICY": "zero_tolerant",
            "EMAIL_PREFIX_RULE": "alnum_dot_underscore",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.log_level == "DEBUG"
            assert settings.log_format == "console"
            assert settings.withdraw_policy is WithdrawPolicy.ZERO_TOLERANT
            assert settings.email_prefix_rule is EmailPrefixRule.ALNUM_DOT_UNDERSCORE

    def test_env_vars_are_case_insensitive(self) -> None:
        """Test lowercase environment variable names are accepted."""
        with patch.dict(os.environ, {"withdraw_policy": "zero_tolerant"}, clear=False):
            settings = Settings()

            assert settings.withdraw_policy is WithdrawPolicy.ZERO_TOLERANT

    def test_unknown_withdraw_policy_rejected(self) -> None:
        """Test invalid policy values fail validation."""
        with patch.dict(os.environ, {"WITHDRAW_POLICY": "lenient"}, clear=False):
            with pytest.raises(ValidationError):
                Settings()

    def test_invalid_log_format_rejected(self) -> None:
        """Test log_format only accepts json or console."""
        with pytest.raises(ValidationError):
            Settings(log_format="xml")  # type: ignore[arg-type]
