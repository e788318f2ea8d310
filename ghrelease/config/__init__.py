"""Configuration module."""

from .settings import DEFAULT_API_URL, Settings, get_settings

__all__ = [
    "DEFAULT_API_URL",
    "Settings",
    "get_settings",
]
