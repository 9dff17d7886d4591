"""tabbed-output: aligned, width-aware tabular text for command-line tools."""

import logging as _stdlib_logging

from tabbed_output.__version__ import __version__
from tabbed_output.core import (
    Cell,
    ColumnCountError,
    FormatTemplateError,
    PrematureSpacerError,
    SinkWriteError,
    TableBuffer,
    TableConfig,
    TableError,
    TableUsageError,
    display_width,
    strip_ansi,
)

__all__ = [
    "Cell",
    "ColumnCountError",
    "FormatTemplateError",
    "PrematureSpacerError",
    "SinkWriteError",
    "TableBuffer",
    "TableConfig",
    "TableError",
    "TableUsageError",
    "__version__",
    "display_width",
    "strip_ansi",
]

# Silent until the application configures logging.
_stdlib_logging.getLogger(__name__).addHandler(_stdlib_logging.NullHandler())
