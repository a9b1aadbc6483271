"""
Configuration management for hrefscan using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError

# --- Setup Logging ---
log = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Run settings; CLI flags override a YAML file, which overrides the environment."""

    style: str = Field(default="a", description="CSS selector choosing which elements to read.")
    url: str | None = Field(default=None, description="Base string prefixed to every emitted link.")
    attribute: str = Field(default="href", description="Attribute holding the link value.")
    parser: str = Field(default="html5lib", description="BeautifulSoup tree builder name.")
    log_level: LogLevel = Field(default="WARNING", description="Logging level for stderr diagnostics.")

    model_config = SettingsConfigDict(env_prefix="HREFSCAN_", case_sensitive=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("attribute", "parser")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @classmethod
    def from_yaml(cls, path: Path) -> Settings:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise ConfigurationError(f"configuration file not found or is not a file: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"cannot read configuration file {path}: {e}") from e
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.load({})
        if not isinstance(yaml_data, dict):
            raise ConfigurationError(f"configuration file {path} must contain a mapping")
        return cls.load(yaml_data)

    @classmethod
    def load(cls, data: dict[str, Any]) -> Settings:
        """Validate ``data`` on top of environment settings."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid configuration: {_summarize(e)}") from e

    def merged(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied and validated."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return type(self).load({**self.model_dump(), **updates})


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
    )
