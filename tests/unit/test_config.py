"""Tests for ChainConfig."""

import pytest

from error_chain import ChainConfig
from error_chain.errors import ChainConfigurationError
from error_chain.telemetry import LogLevel


class TestChainConfig:
    """Tests for ChainConfig."""

    def test_defaults(self) -> None:
        """Test default configuration."""
        config = ChainConfig()
        assert config.log_level is LogLevel.INFO
        assert config.log_format == "text"

    def test_invalid_format(self) -> None:
        """Test unknown formats are rejected."""
        with pytest.raises(ChainConfigurationError) as exc_info:
            ChainConfig(log_format="xml")
        assert exc_info.value.context.hint == "Use one of text, json"

    def test_from_env(self) -> None:
        """Test reading configuration from the environment."""
        config = ChainConfig.from_env(
            {"ERROR_CHAIN_LOG_LEVEL": "debug", "ERROR_CHAIN_LOG_FORMAT": " JSON "}
        )
        assert config.log_level is LogLevel.DEBUG
        assert config.log_format == "json"

    def test_from_env_unset(self) -> None:
        """Test unset variables keep defaults."""
        assert ChainConfig.from_env({}) == ChainConfig()

    def test_from_env_invalid_level(self) -> None:
        """Test unknown levels are rejected."""
        with pytest.raises(ChainConfigurationError) as exc_info:
            ChainConfig.from_env({"ERROR_CHAIN_LOG_LEVEL": "verbose"})
        assert exc_info.value.context.details == {"ERROR_CHAIN_LOG_LEVEL": "verbose"}

    def test_from_os_environ(self, monkeypatch) -> None:
        """Test os.environ is used by default."""
        monkeypatch.setenv("ERROR_CHAIN_LOG_LEVEL", "WARNING")
        monkeypatch.delenv("ERROR_CHAIN_LOG_FORMAT", raising=False)
        assert ChainConfig.from_env().log_level is LogLevel.WARNING
