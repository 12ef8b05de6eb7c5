"""
Harness configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppConfig(BaseSettings):
    """
    Common application settings.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(default="logging.yml", description="YAML logging config path")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


class HarnessConfig(BaseAppConfig):
    """
    Configuration management for wrapped handler invocations.
    """

    # Context synthesis
    STRICT_PARAMS: bool = Field(
        default=False, description="Fail on unresolved wildcards instead of filling placeholders"
    )
    DATABASE_EVENT_MARKER: str = Field(
        default="firebase.database", description="Substring identifying database event types"
    )

    # Mocked runtime configuration (JSON object)
    CLOUD_RUNTIME_CONFIG: str = Field(default="", description="Runtime config JSON blob")

    # Session defaults
    DEFAULT_PROJECT_ID: str = Field(default="demo-project", description="Project ID")
    DEFAULT_DATABASE_URL: str = Field(
        default="https://demo-project.firebaseio.com", description="Database instance URL"
    )


def load_settings() -> HarnessConfig:
    """Read settings from the current environment."""
    return HarnessConfig()
