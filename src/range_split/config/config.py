"""Runtime settings."""

from __future__ import annotations

import os
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from range_split.utils.logging import (
    DEFAULT_SERVICE_NAME,
    _coerce_level,
    configure_logging,
)


class RangeSplitSettings(BaseModel):
    """
    Logging settings for applications embedding range-split.

    Splitting and validation behave the same regardless of these values.
    """

    log_level: str = Field("INFO", description="Log level name (DEBUG, INFO, ...)")
    log_json: bool = Field(True, description="Render logs as JSON instead of console text")
    service_name: str = Field(
        DEFAULT_SERVICE_NAME,
        min_length=1,
        description="service_name bound on every log event",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        _coerce_level(v)
        return v.upper()

    @classmethod
    def from_env(cls) -> "RangeSplitSettings":
        return cls(
            log_level=os.getenv("RANGE_SPLIT_LOG_LEVEL", "INFO"),
            log_json=os.getenv("RANGE_SPLIT_LOG_JSON", "true"),
            service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        )

    @classmethod
    def from_yaml(cls, path: str) -> "RangeSplitSettings":
        """Load settings from YAML file."""
        import yaml
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RangeSplitSettings":
        return cls(**data)

    def configure_logging(self) -> None:
        """Apply these settings to structlog and stdlib logging."""
        configure_logging(
            self.log_level,
            json_output=self.log_json,
            service_name=self.service_name,
        )
