"""Parser configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class SentinelConfig(BaseSettings):
    """Octal sentinel guard applied by the radix dispatcher."""

    model_config = {"env_prefix": "NUMERALSYS_SENTINEL_"}

    enabled: bool = True
    octal_value: int = 8393601


class LoggingConfig(BaseSettings):
    """Logging output configuration."""

    model_config = {"env_prefix": "NUMERALSYS_LOG_"}

    level: str = "WARNING"
    format: Literal["text", "json"] = "text"


class ParserSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "NUMERALSYS_"}

    sentinel: SentinelConfig = Field(default_factory=SentinelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
