from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sign_latency.const import (
    DEFAULT_BASE_URL, DEFAULT_ITERATIONS, DEFAULT_PAYLOAD, DEFAULT_ENV_FILE,
    DEFAULT_LOG_LEVEL, LIBRARY_LOG_LEVELS,
    ENV_API_PRIVATE_KEY, ENV_API_PUBLIC_KEY, ENV_ORGANIZATION_ID, ENV_SIGN_WITH,
    ENV_ITERATIONS, ENV_BASE_URL, ENV_PAYLOAD, ENV_LOG_LEVEL,
)


class Config(BaseSettings):
    """Settings for one latency run, read once at startup."""

    api_private_key: str = Field(validation_alias=ENV_API_PRIVATE_KEY, min_length=1, repr=False)
    api_public_key: str = Field(validation_alias=ENV_API_PUBLIC_KEY, min_length=1)
    organization_id: str = Field(validation_alias=ENV_ORGANIZATION_ID, min_length=1)
    sign_with: str = Field(validation_alias=ENV_SIGN_WITH, min_length=1)
    iterations: int = Field(default=DEFAULT_ITERATIONS, validation_alias=ENV_ITERATIONS, ge=1)
    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias=ENV_BASE_URL)
    payload: str = Field(default=DEFAULT_PAYLOAD, validation_alias=ENV_PAYLOAD)
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias=ENV_LOG_LEVEL)
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. .env.local file in the working directory
        4. Default values
        """
        return (
            env_settings,
            init_settings,
            dotenv_settings,
        )
