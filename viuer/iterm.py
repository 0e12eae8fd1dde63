"""Printing with the iTerm inline image protocol."""

from __future__ import annotations

import base64
import io
import os
from functools import cache
from pathlib import Path
from typing import TextIO

from PIL import Image, UnidentifiedImageError

from .config import Config
from .errors import ImageError
from .layout import adjust_offset, find_best_fit
from .printer import Printer

_SUPPORTING_TERMINALS = ("iTerm", "WezTerm", "mintty", "rio")


def check_iterm_support() -> bool:
    """Return True if the environment names a terminal that speaks the iTerm protocol."""
    for variable in ("TERM_PROGRAM", "LC_TERMINAL"):
        value = os.environ.get(variable)
        if value is not None and any(name in value for name in _SUPPORTING_TERMINALS):
            return True
    return False


@cache
def is_iterm_supported() -> bool:
    """Return the terminal's support for the iTerm protocol, checked once."""
    return check_iterm_support()


def _print_buffer(
    stdout: TextIO, img: Image.Image, content: bytes, config: Config
) -> tuple[int, int]:
    adjust_offset(stdout, config)
    w, h = find_best_fit(img, config.width, config.height)
    encoded = base64.b64encode(content).decode("ascii")
    stdout.write(
        "\x1b]1337;File=inline=1;preserveAspectRatio=1;"
        f"size={len(content)};width={w};height={h}:{encoded}\x07\n"
    )
    stdout.flush()
    return w, h


class ITermPrinter(Printer):
    """Sends images to the terminal as base64-encoded files."""

    def print(self, stdout: TextIO, img: Image.Image, config: Config) -> tuple[int, int]:
        buffer = io.BytesIO()
        try:
            img.save(buffer, format="PNG")
        except (OSError, ValueError, KeyError) as exc:
            raise ImageError(exc) from exc
        return _print_buffer(stdout, img, buffer.getvalue(), config)

    def print_from_file(
        self, stdout: TextIO, filename: str | os.PathLike[str], config: Config
    ) -> tuple[int, int]:
        content = Path(filename).read_bytes()
        try:
            with Image.open(io.BytesIO(content)) as img:
                img.load()
                return _print_buffer(stdout, img, content, config)
        except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
            raise ImageError(exc) from exc