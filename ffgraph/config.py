import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

# Set up logging
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Logging settings from environment (FFGRAPH_* variables or .env).

    Only configure_logging() reads these; compilation never does.
    """

    # Log level for the ffgraph loggers: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = "INFO"
    # Escape CR/LF in log arguments (paths and pad names are user input)
    safe_logging: bool = True

    model_config = SettingsConfigDict(
        env_prefix="FFGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# In-memory cache of settings
_cached_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the current settings, loading them from the environment once."""
    global _cached_settings

    if _cached_settings is None:
        _cached_settings = Settings()
        logger.debug(
            "[FFGRAPH-CONFIG] Loaded settings: log_level=%s safe_logging=%s",
            _cached_settings.log_level,
            _cached_settings.safe_logging,
        )
    return _cached_settings


def clear_settings_cache() -> None:
    """Clear the cached settings (forces reload)."""
    global _cached_settings
    _cached_settings = None
