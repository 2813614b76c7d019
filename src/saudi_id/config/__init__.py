"""Configuration module for saudi-id."""

from saudi_id.config.settings import (
    Settings,
    load_settings,
    load_settings_from_yaml,
    load_settings_from_yaml_safe,
    settings_from_env,
    validate_environment,
)

__all__ = [
    "Settings",
    "load_settings",
    "load_settings_from_yaml",
    "load_settings_from_yaml_safe",
    "settings_from_env",
    "validate_environment",
]
