"""Configuration settings and loading."""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from httpdiff.errors import ConfigValidationError, ErrorContext


class DiffConfig(BaseSettings):
    """Configuration for sending requests and reading bodies."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPDIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout: float = 30.0
    follow_redirects: bool = False
    verify_ssl: bool = True
    body_encoding: str = "utf-8"

    @field_validator("body_encoding", mode="before")
    @classmethod
    def validate_body_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except (LookupError, TypeError):
            raise ConfigValidationError(
                message=f"Unknown body encoding: {v!r}",
                field="body_encoding",
                value=v,
                context=ErrorContext(extra={"example": "utf-8"}),
            ) from None
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ConfigValidationError(
                message=f"timeout must be positive, got {v}",
                field="timeout",
                value=v,
            )
        return v


def load_config(config_path: str | Path | None = None) -> DiffConfig:
    """Load configuration from file and environment.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}

    if not isinstance(config_data, dict):
        raise ConfigValidationError(
            message=f"Config file must contain a mapping, got {type(config_data).__name__}",
            value=config_data,
            context=ErrorContext(extra={"path": str(config_path)}),
        )

    config_data.update(_get_env_overrides())

    return DiffConfig(**config_data)


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "HTTPDIFF_TIMEOUT": ("timeout", float),
        "HTTPDIFF_FOLLOW_REDIRECTS": ("follow_redirects", _parse_bool),
        "HTTPDIFF_VERIFY_SSL": ("verify_ssl", _parse_bool),
        "HTTPDIFF_BODY_ENCODING": "body_encoding",
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                overrides[key] = converter(value)
            else:
                overrides[config_key] = value

    return overrides


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")
