"""Configuration models with Pydantic validation.

``TableConfig`` carries the rendering options of a single table.
``SettingsConfig`` is the on-disk settings file used by the ``tabbed`` CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "tabbed"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

Alignment = Literal["right", "left"]


def _single_char(value: str, field_name: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{field_name} must be exactly one character, got {value!r}")
    return value


class TableConfig(BaseModel):
    """Rendering options for a table.

    Attributes:
        column_separator: Character written between cells.
        line_start: Optional character written before every cell.
        line_end: Optional character written after the last cell of a line.
        padding: Pad cells to their column width.
        padding_char: Character used for padding.
        ansi_aware_width: Ignore ANSI escape sequences when measuring cells.
        alignment: Side of the column the content is pushed against.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    column_separator: str = "\t"
    line_start: str | None = None
    line_end: str | None = None
    padding: bool = True
    padding_char: str = " "
    ansi_aware_width: bool = False
    alignment: Alignment = "right"

    @field_validator("column_separator", "padding_char")
    @classmethod
    def validate_char(cls, v: str, info: ValidationInfo) -> str:
        """Validate the value is a single character."""
        return _single_char(v, info.field_name or "value")

    @field_validator("line_start", "line_end")
    @classmethod
    def validate_optional_char(cls, v: str | None, info: ValidationInfo) -> str | None:
        """Validate the value is a single character when set."""
        if v is None:
            return v
        return _single_char(v, info.field_name or "value")


class SettingsConfig(BaseModel):
    """Settings file for the tabbed CLI."""

    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"
    table: TableConfig = Field(default_factory=TableConfig)

    def to_yaml(self) -> str:
        """Serialize the settings as a commented YAML document."""
        header = (
            "# tabbed Configuration\n"
            "# Options under 'table' apply to every rendered table and can be\n"
            "# overridden on the command line.\n\n"
        )
        body = yaml.safe_dump(
            self.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        return header + body


def load_config(config_path: Path | None = None) -> SettingsConfig | None:
    """Load settings from a YAML file.

    Args:
        config_path: Settings file. Defaults to ``CONFIG_FILE``.

    Returns:
        Parsed settings, or None if the file does not exist.

    Raises:
        ValueError: If the file is not valid YAML or fails validation.
    """
    path = config_path or CONFIG_FILE
    if not path.exists():
        return None

    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid YAML in {path}: expected a mapping at the top level")
    return SettingsConfig.model_validate(raw)
