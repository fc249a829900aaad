"""
Configuration Management.

Configuration sources (in order of precedence):
1. Environment variables
2. .env file
3. Default values

The Notion token is loaded from the environment and never committed to
source control.

Example:
    from macha.config import get_settings

    settings = get_settings()
    database_id = settings.mentions_database_id
"""

from macha.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
