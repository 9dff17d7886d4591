"""Buffered, width-aware table output.

Rows are collected first and written in a single pass once every column
width is known. Rendering always empties the buffer, so one instance can be
reused for any number of tables.

Usage:
    from tabbed_output import TableBuffer

    table = TableBuffer()
    table.header("Status", "Name")
    table.spacer_line()
    table.add_line("new", "ab")
    table.add_line("released", "c")
    table.render(sys.stdout)
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol

from tabbed_output.core.config.models import TableConfig
from tabbed_output.core.exceptions import (
    ColumnCountError,
    FormatTemplateError,
    PrematureSpacerError,
    SinkWriteError,
    TableUsageError,
)
from tabbed_output.core.width import display_width
from tabbed_output.logging.config import get_logger

logger = get_logger(__name__)

SPACER_FILL = "-"
SPACER_TEMPLATE = "{fill:{fill}>{width}}"


class Sink(Protocol):
    """Anything that accepts text fragments in order."""

    def write(self, s: str, /) -> Any: ...


@dataclass(frozen=True)
class Cell:
    """A single piece of cell content.

    Attributes:
        text: Literal text, or the fill character for spacer cells.
        template: Format template for spacer cells, expanded against the
            final column width at render time.
    """

    text: str
    template: str | None = None

    @classmethod
    def spacer(cls, fill: str = SPACER_FILL) -> Cell:
        return cls(text=fill, template=SPACER_TEMPLATE)

    @property
    def is_spacer(self) -> bool:
        return self.template is not None

    def expand(self, width: int) -> str:
        """Return the text to render in a column of ``width``."""
        if self.template is None:
            return self.text
        if "{width}" not in self.template:
            raise FormatTemplateError(self.template)
        if width <= 0:
            return ""
        try:
            return self.template.format(fill=self.text, width=width)
        except (KeyError, IndexError, ValueError) as e:
            raise FormatTemplateError(self.template) from e


Row = tuple[Cell, ...]


class ColumnWidths:
    """Running maximum display width per column.

    The column count is fixed by ``init``; ``update`` only ever grows
    individual widths.
    """

    def __init__(self, measure: Callable[[str], int]) -> None:
        self._measure = measure
        self._widths: list[int] = []

    def init(self, cells: Iterable[str]) -> None:
        if self._widths:
            raise TableUsageError("column widths are already initialized")
        self._widths = [self._measure(c) for c in cells]

    def update(self, cells: Iterable[str]) -> None:
        cells = list(cells)
        if len(cells) != len(self._widths):
            raise ColumnCountError(len(self._widths), len(cells))
        for i, cell in enumerate(cells):
            self._widths[i] = max(self._widths[i], self._measure(cell))

    def reset(self) -> None:
        self._widths = []

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(self._widths)

    def __len__(self) -> int:
        return len(self._widths)

    def __iter__(self) -> Iterator[int]:
        return iter(self._widths)

    def __getitem__(self, index: int) -> int:
        return self._widths[index]


class TableBuffer:
    """Collect rows and render them as an aligned table.

    Widths are measured in code points, optionally ignoring ANSI escape
    sequences, so coloured output lines up the way it looks on a terminal.
    The buffer is not thread-safe.
    """

    def __init__(self, config: TableConfig | None = None, **options: Any) -> None:
        """Initialize an empty buffer.

        Args:
            config: Rendering options. Defaults to ``TableConfig()``.
            **options: ``TableConfig`` fields overriding ``config``.
        """
        self._config = config or TableConfig()
        if options:
            self._config = self._merge_config(options)
        self._header: Row = ()
        self._rows: list[Row] = []
        self._widths = ColumnWidths(self._measure)

    @property
    def config(self) -> TableConfig:
        return self._config

    @property
    def widths(self) -> tuple[int, ...]:
        """Column widths known so far."""
        return self._widths.as_tuple()

    @property
    def column_count(self) -> int:
        return len(self._widths)

    @property
    def has_header(self) -> bool:
        return bool(self._header)

    @property
    def is_empty(self) -> bool:
        return not self._header and not self._rows and not len(self._widths)

    def __len__(self) -> int:
        return len(self._rows)

    def configure(self, **options: Any) -> TableBuffer:
        """Update rendering options, returning self for chaining.

        Raises:
            pydantic.ValidationError: If an option is unknown or invalid.
                The previous configuration is kept.
        """
        self._config = self._merge_config(options)
        return self

    def header(self, *cells: object) -> None:
        """Set the header row, which fixes the column count.

        Calling with no cells leaves the table without a header.

        Raises:
            TableUsageError: If a header was already set or rows were added.
        """
        values = [str(c) for c in cells]
        if not values:
            return
        if self._header or len(self._widths):
            raise TableUsageError("header must be set once, before any lines are added")
        self._widths.init(values)
        self._header = tuple(Cell(v) for v in values)
        logger.debug("Header set", columns=len(values))

    def add_line(self, *cells: object) -> None:
        """Append a data row.

        Raises:
            ColumnCountError: If the row does not match the column count, or
                is empty. The row is not added.
        """
        values = [str(c) for c in cells]
        if not len(self._widths):
            if not values:
                raise ColumnCountError(None, 0)
            self._widths.init(values)
            logger.debug("Columns established by first line", columns=len(values))
        else:
            self._widths.update(values)
        self._rows.append(tuple(Cell(v) for v in values))

    def spacer_line(self, fill: str = SPACER_FILL) -> None:
        """Append a rule row sized to each column's final width.

        Args:
            fill: Character repeated across each column.

        Raises:
            PrematureSpacerError: If no header or line was added yet.
            ValueError: If ``fill`` is not a single character.
        """
        if len(fill) != 1:
            raise ValueError(f"spacer fill must be exactly one character, got {fill!r}")
        if not len(self._widths):
            raise PrematureSpacerError()
        self._rows.append(tuple(Cell.spacer(fill) for _ in self._widths))

    def render(self, sink: Sink) -> int:
        """Write the header and all rows to ``sink``, then reset the buffer.

        The buffer is emptied whether or not rendering succeeds.

        Args:
            sink: Object with a ``write(str)`` method.

        Returns:
            Number of characters written.

        Raises:
            SinkWriteError: If the sink raises; nothing further is written.
            FormatTemplateError: If a spacer cell carries a bad template.
        """
        written = 0
        try:
            rows = [self._header] if self._header else []
            rows.extend(self._rows)
            for row in rows:
                for index, cell in enumerate(row):
                    fragment = self._format_cell(cell, index)
                    try:
                        n = sink.write(fragment)
                    except Exception as e:
                        logger.warning("Table sink write failed", written=written, error=str(e))
                        raise SinkWriteError(written, e) from e
                    written += n if isinstance(n, int) else len(fragment)
            logger.debug(
                "Table rendered",
                rows=len(rows),
                columns=len(self._widths),
                written=written,
            )
            return written
        finally:
            self._reset()

    def to_string(self) -> str:
        """Render into a string, resetting the buffer."""
        out = io.StringIO()
        self.render(out)
        return out.getvalue()

    def _format_cell(self, cell: Cell, index: int) -> str:
        config = self._config
        width = self._widths[index]
        value = cell.expand(width)
        parts: list[str] = []

        if config.line_start is not None:
            parts.append(config.line_start)

        if config.padding:
            fill = config.padding_char * max(width - self._measure(value), 0)
            if config.alignment == "left":
                parts.extend((value, fill))
            else:
                parts.extend((fill, value))
        else:
            parts.append(value)

        if index < len(self._widths) - 1:
            parts.append(config.column_separator)
        else:
            if config.line_end is not None:
                parts.append(config.line_end)
            parts.append("\n")
        return "".join(parts)

    def _measure(self, text: str) -> int:
        return display_width(text, ansi_aware=self._config.ansi_aware_width)

    def _merge_config(self, options: dict[str, Any]) -> TableConfig:
        return TableConfig.model_validate({**self._config.model_dump(), **options})

    def _reset(self) -> None:
        self._header = ()
        self._rows = []
        self._widths.reset()
