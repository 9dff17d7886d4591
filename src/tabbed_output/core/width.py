"""Display width helpers.

Widths are measured in code points. Wide glyphs and combining characters
are not special-cased.
"""

from __future__ import annotations

import re

ANSI_CSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z~]")


def strip_ansi(text: str) -> str:
    """Remove ANSI CSI escape sequences (colours, cursor moves) from text."""
    return ANSI_CSI_RE.sub("", text)


def display_width(text: str, ansi_aware: bool = False) -> int:
    """Return the number of columns ``text`` occupies.

    Args:
        text: Cell content.
        ansi_aware: Ignore ANSI CSI sequences when measuring.

    Returns:
        Code point count, never negative.
    """
    if ansi_aware:
        text = strip_ansi(text)
    return max(len(text), 0)
