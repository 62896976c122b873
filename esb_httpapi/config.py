"""
Compiler configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompilerConfig(BaseSettings):
    """
    Configuration management for the httpApi compiler CLI.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default="", description="Logging YAML path (empty: packaged default)"
    )

    # Path settings
    SERVICE_CONFIG_PATH: str = Field(
        default="serverless.yml", description="Service definition file path"
    )
    ROUTING_YML_PATH: str = Field(
        default=".esb/config/routing.yml", description="Rendered routing manifest path"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = CompilerConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
