"""Terminal capability helpers."""

from __future__ import annotations

import os
import shutil

DEFAULT_TERM_SIZE: tuple[int, int] = (80, 24)


def truecolor_available() -> bool:
    """Return True if the ``COLORTERM`` variable advertises 24-bit colour."""
    value = os.environ.get("COLORTERM")
    if value is None:
        return False
    return "truecolor" in value or "24bit" in value


def terminal_size() -> tuple[int, int]:
    """Return the terminal size as ``(columns, rows)``, falling back to 80x24."""
    size = shutil.get_terminal_size(fallback=DEFAULT_TERM_SIZE)
    return size.columns, size.lines