"""Settings for SmartQuery, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority), prefixed with ``SMARTQUERY_``
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Quick Start:
    >>> from smartquery.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'
"""

from smartquery.settings.main import SmartQuerySettings, get_settings, reload_settings

__all__ = [
    "SmartQuerySettings",
    "get_settings",
    "reload_settings",
]
