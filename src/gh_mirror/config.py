"""Configuration loading and validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

VISIBILITIES = ("public", "private", "internal")


def _split_csv(value: Any) -> Any:
    """Split a comma-separated string into a list of non-blank entries."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class FilterConfig(BaseModel):
    """Repository selection criteria.

    Empty lists and False disable the corresponding check.
    """

    include_topics: list[str] = Field(default_factory=list)
    exclude_topics: list[str] = Field(default_factory=list)
    exclude_archived: bool = False
    visibility: list[str] = Field(default_factory=list)

    @field_validator("include_topics", "exclude_topics", "visibility", mode="before")
    @classmethod
    def split_comma_separated(cls, v: Any) -> Any:
        """Accept "a,b" as well as ["a", "b"]."""
        return _split_csv(v)

    @field_validator("visibility")
    @classmethod
    def validate_visibility(cls, v: list[str]) -> list[str]:
        """Validate that visibilities are known values."""
        for visibility in v:
            if visibility not in VISIBILITIES:
                msg = f"Invalid visibility '{visibility}': expected one of {', '.join(VISIBILITIES)}"
                raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration section."""

    verbose: bool = False
    json_format: bool = False


class Config(BaseModel):
    """Root configuration model."""

    filters: FilterConfig = Field(default_factory=FilterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated Config object. An empty file yields all defaults.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValidationError: If the config is invalid.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    return Config.model_validate(raw_config or {})
