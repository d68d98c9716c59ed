"""Configuration settings for goalstack."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Planner configuration loaded from environment variables or overrides."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, populate_by_name=True
    )

    detect_cycles: bool = Field(default=False, validation_alias="GOALSTACK_DETECT_CYCLES")
    max_depth: int = Field(default=100, ge=1, validation_alias="GOALSTACK_MAX_DEPTH")
    log_level: str = Field(default="WARNING", validation_alias="GOALSTACK_LOG_LEVEL")
    trace_dir: str | None = Field(default=None, validation_alias="GOALSTACK_TRACE_DIR")
