"""Base class shared by the feature settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureSettings(BaseSettings):
    """Settings section read from the environment and the .env file.

    Fields declare their environment variable as alias; populate_by_name
    also lets code and tests pass values by field name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
