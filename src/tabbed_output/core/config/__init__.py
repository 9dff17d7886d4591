"""Configuration management with Pydantic validation."""

from tabbed_output.core.config.models import (
    CONFIG_DIR,
    CONFIG_FILE,
    SettingsConfig,
    TableConfig,
    load_config,
)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "SettingsConfig",
    "TableConfig",
    "load_config",
]
