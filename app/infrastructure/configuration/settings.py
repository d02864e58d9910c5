"""Top-level settings object."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import I18nSettings

# Sections not passed to Settings() are built from the environment.
FEATURE_SECTIONS = {
    "i18n": I18nSettings,
}


class Settings(BaseSettings):
    """Process-wide settings; one attribute per feature section.

    Environment Variables:
        PREFIX: Non-empty in development and staging deployments
        LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default: INFO)

    Feature sections read their own variables, see I18nSettings.
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        for name, section_class in FEATURE_SECTIONS.items():
            if name not in kwargs:
                kwargs[name] = section_class()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when PREFIX is empty."""
        return not self.PREFIX
