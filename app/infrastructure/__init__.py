"""Infrastructure modules for the site.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Language detection and translation lookup
- services: Dependency injection services (SettingsDep, TranslationServiceDep)
"""
