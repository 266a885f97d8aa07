"""
Configuration for the query schema tools.

All settings can be overridden with QUERY_SCHEMA_* environment variables.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Schema parser configuration."""

    # Schema file used when the CLI is called without a path
    schema_path: str = Field(default="schema.graphql")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = Field(
        default="text", description="Log line format (text or json)"
    )

    model_config = {"env_prefix": "QUERY_SCHEMA_"}


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
