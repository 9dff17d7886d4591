"""Exceptions raised by the table buffer.

Data-shape and output errors derive from ``TableError`` and leave the
buffer in a usable state. ``TableUsageError`` marks a programming defect in
the calling code and intentionally sits outside that hierarchy.
"""

from __future__ import annotations


class TableError(Exception):
    """Base exception for recoverable table errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ColumnCountError(TableError):
    """Raised when a row does not match the established column count.

    Attributes:
        expected: Column count fixed by the first header or row, or None if
            no columns were established yet.
        actual: Number of cells supplied.
    """

    def __init__(self, expected: int | None, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            message = "invalid column count: a row needs at least one cell"
        else:
            message = f"invalid column count: expected {expected} cells, got {actual}"
        super().__init__(message)


class PrematureSpacerError(TableError):
    """Raised when a spacer line is requested before any columns exist."""

    def __init__(self) -> None:
        super().__init__("spacer line cannot be added before a header or line")


class FormatTemplateError(TableError):
    """Raised when a spacer cell carries a template without a width field."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(f"invalid spacer template {template!r}: requires a {{width}} field")


class SinkWriteError(TableError):
    """Raised when the output sink rejects a write during rendering.

    The original exception is available as ``__cause__``.

    Attributes:
        written: Characters accepted by the sink before the failure.
    """

    def __init__(self, written: int, cause: BaseException) -> None:
        self.written = written
        super().__init__(f"failed writing table output after {written} characters: {cause}")


class TableUsageError(RuntimeError):
    """Raised when the buffer is driven in a way its contract forbids."""
