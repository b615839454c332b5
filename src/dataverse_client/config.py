# dataverse_client/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_USER_AGENT


class DataverseSettings(BaseSettings):
    """
    Connection settings for a single Dataverse installation.

    Loaded from environment variables (prefixed with 'DATAVERSE_') or a .env /
    secrets.env file. The instance is frozen: it is shared read-only by every
    endpoint client, and per-session overrides are made with `model_copy`.

    All durations are in milliseconds, matching the way Dataverse deployments
    usually document them.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="DATAVERSE_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    base_url: str = Field(
        default="http://localhost:8080",
        description="Root URL of the Dataverse installation",
    )
    api_token: str | None = Field(
        default=None, description="API token; requests are anonymous if unset"
    )
    unblock_key: str | None = Field(
        default=None,
        description="Unblock key for admin endpoints called from non-localhost",
    )
    builtin_user_key: str | None = Field(
        default=None, description="Value of the BuiltinUsers.KEY setting"
    )

    # --- Transport ---
    connection_timeout: int = Field(
        default=5000, ge=0, description="Connect timeout in milliseconds"
    )
    read_timeout: int = Field(
        default=300000, ge=0, description="Read timeout in milliseconds"
    )
    api_version: str = Field(default="1", description="Native API version")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header for requests"
    )

    # --- Lock handling ---
    locked_retry_times: int = Field(
        default=10,
        ge=0,
        description="How often a request is retried while the dataset is locked",
    )
    locked_retry_interval: int = Field(
        default=500, ge=0, description="Pause between lock retries in milliseconds"
    )


@lru_cache
def get_settings() -> DataverseSettings:
    """
    Provides access to the settings loaded from the environment.

    The instance is cached; call `get_settings.cache_clear()` after changing
    the environment.

    Returns:
        DataverseSettings: The settings instance.
    """
    return DataverseSettings()
