import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SmartQuerySettings(BaseSettings):
    """Runtime configuration for SmartQuery.

    Values are read from ``SMARTQUERY_``-prefixed environment variables or a
    ``.env`` file, falling back to the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="SMARTQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Base log level used by setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines; plain text when disabled"
    )
    log_rejections: bool = Field(
        default=True,
        description="Log every rejected fragment when its ValidationError is raised"
    )
    trace_render: bool = Field(
        default=True,
        description="Wrap QueryBuilder.render() in an OpenTelemetry span"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the level is a known logging level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


_settings: Optional[SmartQuerySettings] = None


def get_settings(force_reload: bool = False) -> SmartQuerySettings:
    """Get the singleton settings instance.

    Args:
        force_reload: If True, creates a new instance even if one already
                     exists. Useful for testing or when environment
                     variables have changed.

    Returns:
        The singleton SmartQuerySettings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = SmartQuerySettings()

    return _settings


def reload_settings() -> SmartQuerySettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
