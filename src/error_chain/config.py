"""
Configuration for error-chain-python.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from error_chain.errors import ChainConfigurationError, ErrorContext
from error_chain.telemetry.logger import ChainLogger, LogLevel

_LOG_FORMATS = ("text", "json")


@dataclass
class ChainConfig:
    """Configuration for an error dispatch session.

    Attributes:
        log_level: Minimum level of emitted log records
        log_format: Log output format ('text' or 'json')
    """

    log_level: LogLevel = LogLevel.INFO
    log_format: str = "text"

    def __post_init__(self) -> None:
        if self.log_format not in _LOG_FORMATS:
            raise ChainConfigurationError(
                f"Unknown log format: {self.log_format!r}",
                ErrorContext(
                    source="config",
                    details={"log_format": self.log_format},
                    hint=f"Use one of {', '.join(_LOG_FORMATS)}",
                ),
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ChainConfig:
        """Create config from environment variables.

        Reads ERROR_CHAIN_LOG_LEVEL and ERROR_CHAIN_LOG_FORMAT. Unset
        variables keep their defaults.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            ChainConfig instance

        Raises:
            ChainConfigurationError: If a variable has an invalid value
        """
        env = os.environ if environ is None else environ

        level = LogLevel.INFO
        level_str = env.get("ERROR_CHAIN_LOG_LEVEL")
        if level_str:
            try:
                level = LogLevel(level_str.strip().upper())
            except ValueError:
                raise ChainConfigurationError(
                    f"Unknown log level: {level_str!r}",
                    ErrorContext(
                        source="config",
                        details={"ERROR_CHAIN_LOG_LEVEL": level_str},
                        hint=f"Use one of {', '.join(lvl.value for lvl in LogLevel)}",
                    ),
                ) from None

        log_format = env.get("ERROR_CHAIN_LOG_FORMAT", "text").strip().lower()
        return cls(log_level=level, log_format=log_format)

    def apply(self) -> None:
        """Configure logging from this config."""
        ChainLogger.configure(level=self.log_level, format=self.log_format)
