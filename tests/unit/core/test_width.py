"""Unit tests for display width helpers."""

from __future__ import annotations

import pytest

from tabbed_output.core.width import ANSI_CSI_RE, display_width, strip_ansi


@pytest.mark.unit
class TestStripAnsi:
    """Tests for strip_ansi."""

    def test_plain_text_unchanged(self) -> None:
        assert strip_ansi("hello") == "hello"

    def test_removes_colour_codes(self) -> None:
        assert strip_ansi("\x1b[1;31mred\x1b[0m") == "red"

    def test_removes_parameterless_reset(self) -> None:
        assert strip_ansi("\x1b[mx") == "x"

    def test_removes_tilde_terminated_sequence(self) -> None:
        assert strip_ansi("\x1b[3~del") == "del"

    def test_leaves_lone_escape(self) -> None:
        assert strip_ansi("\x1bx") == "\x1bx"

    def test_pattern_matches_single_sequence(self) -> None:
        assert ANSI_CSI_RE.fullmatch("\x1b[38;5;208m")


@pytest.mark.unit
class TestDisplayWidth:
    """Tests for display_width."""

    def test_counts_code_points_not_bytes(self) -> None:
        text = "héllo"
        assert len(text.encode()) == 6
        assert display_width(text) == 5

    def test_empty_string(self) -> None:
        assert display_width("") == 0
        assert display_width("", ansi_aware=True) == 0

    def test_escapes_counted_by_default(self) -> None:
        assert display_width("\x1b[31mA\x1b[0m") == 10

    def test_escapes_ignored_when_ansi_aware(self) -> None:
        assert display_width("\x1b[31mA\x1b[0m", ansi_aware=True) == display_width("A")

    def test_only_escapes_is_zero(self) -> None:
        assert display_width("\x1b[1m\x1b[0m", ansi_aware=True) == 0
