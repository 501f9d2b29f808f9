"""
Package: config
Description: Plugin configuration loaded with pydantic-settings.
"""

from .settings import REGIONS, Settings, load_settings, validate_endpoint

__all__ = [
    "REGIONS",
    "Settings",
    "load_settings",
    "validate_endpoint",
]
