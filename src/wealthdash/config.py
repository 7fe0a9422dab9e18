"""
WealthDash configuration management.

Supports loading from YAML files, environment variables, and keyword overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from wealthdash.analyzers.currency import BASE_CURRENCY, CURRENCIES
from wealthdash.analyzers.valuation import DEFAULT_NET_WORTH_BASELINE
from wealthdash.exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class WealthDashConfig(BaseModel):
    """Root configuration for WealthDash."""

    display_currency: str = Field(default=BASE_CURRENCY, description="Currency used for displayed totals")
    net_worth_baseline: float = Field(
        default=DEFAULT_NET_WORTH_BASELINE,
        description="Starting net worth assumed when no accounts or holdings are linked",
    )
    log_level: str = Field(default="WARNING")

    @field_validator("display_currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        code = value.strip().upper()
        if code not in CURRENCIES:
            raise ValueError(f"unsupported currency code {value!r}")
        return code

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def load(cls, config_path: str | None = None, **overrides: Any) -> WealthDashConfig:
        """Load configuration from file, env vars, and overrides.

        Priority: overrides > env vars > config file > defaults.

        Raises:
            ConfigurationError: The merged settings are invalid.
        """
        data: dict[str, Any] = {}

        # 1. Load from YAML file if provided
        if config_path:
            path = Path(config_path)
            if path.exists():
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
                    if not isinstance(data, dict):
                        raise ConfigurationError(
                            f"Config file {path} must contain a mapping, got {type(data).__name__}"
                        )

        # 2. Override from environment variables
        env_currency = os.environ.get("WEALTHDASH_CURRENCY")
        env_baseline = os.environ.get("WEALTHDASH_NET_WORTH_BASELINE")
        env_level = os.environ.get("WEALTHDASH_LOG_LEVEL")

        if env_currency:
            data["display_currency"] = env_currency
        if env_baseline:
            data["net_worth_baseline"] = env_baseline
        if env_level:
            data["log_level"] = env_level

        # 3. Apply keyword overrides
        data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls.model_validate(data)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc
