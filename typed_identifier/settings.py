"""typed_identifier configuration settings using Pydantic.

Loads settings from:
1. an optional YAML file (``TypedIdentifierSettings.from_yaml``)
2. environment variables prefixed ``TYPED_IDENTIFIER_`` (and ``.env``)
3. default values
"""

from __future__ import annotations

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()


class TypedIdentifierSettings(BaseSettings):
    """Central configuration for the identifier engine."""

    model_config = SettingsConfigDict(
        env_prefix="TYPED_IDENTIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Scheme catalogue ---
    schemes_path: Path | None = Field(
        default=None,
        description="YAML or JSON scheme catalogue; built-ins only when unset",
    )
    include_builtin_schemes: bool = Field(
        default=True,
        description="Seed the registry with built-in schemes before applying schemes_path",
    )

    # --- Resolution ---
    strict: bool = Field(
        default=False,
        description="Raise on rejected resolutions instead of returning them",
    )

    # --- Logging ---
    log_level: str = "INFO"
    log_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        value = v.strip().upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return value

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> TypedIdentifierSettings:
        """Load settings from a YAML file; defaults when the file is missing."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            return cls()

        with open(yaml_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)


# Global settings instance
_settings: TypedIdentifierSettings | None = None


def get_settings() -> TypedIdentifierSettings:
    """Get or create the global settings instance"""
    global _settings
    if _settings is None:
        _settings = TypedIdentifierSettings()
    return _settings


def reload_settings(yaml_path: str | Path | None = None) -> TypedIdentifierSettings:
    """Rebuild settings from the environment, or from *yaml_path* if given"""
    global _settings
    _settings = TypedIdentifierSettings.from_yaml(yaml_path) if yaml_path else TypedIdentifierSettings()
    return _settings
