"""Runtime configuration for Slime Finder."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SLIME_FINDER_", env_file=".env", extra="ignore")

    app_name: str = "slime-finder"
    log_level: str = "INFO"
    worker_count: int = Field(
        default_factory=lambda: os.cpu_count() or 1,
        ge=1,
        description="Number of search worker threads.",
    )
    section_queue_size: int = Field(default=8, ge=1, description="Capacity of the pending section queue.")
    result_queue_size: int = Field(default=8, ge=1, description="Capacity of the result batch queue.")


settings = Settings()
