"""Core table buffering, width measurement, and configuration."""

from tabbed_output.core.buffer import Cell, ColumnWidths, Sink, TableBuffer
from tabbed_output.core.config import SettingsConfig, TableConfig, load_config
from tabbed_output.core.exceptions import (
    ColumnCountError,
    FormatTemplateError,
    PrematureSpacerError,
    SinkWriteError,
    TableError,
    TableUsageError,
)
from tabbed_output.core.width import display_width, strip_ansi

__all__ = [
    "Cell",
    "ColumnCountError",
    "ColumnWidths",
    "FormatTemplateError",
    "PrematureSpacerError",
    "SettingsConfig",
    "Sink",
    "SinkWriteError",
    "TableBuffer",
    "TableConfig",
    "TableError",
    "TableUsageError",
    "display_width",
    "load_config",
    "strip_ansi",
]
