"""Entry points that choose a printer and print images to standard output."""

from __future__ import annotations

import enum
import os
import sys
from typing import TextIO

from PIL import Image

from .block import BlockPrinter
from .config import Config
from .iterm import ITermPrinter, is_iterm_supported
from .kitty import KittyPrinter, KittySupport, get_kitty_support
from .printer import Printer

_SAVE_POSITION = "\x1b7"
_RESTORE_POSITION = "\x1b8"


class PrinterType(enum.Enum):
    """The available ways of printing an image."""

    BLOCK = "block"
    KITTY = "kitty"
    ITERM = "iterm"

    @property
    def printer(self) -> Printer:
        """The printer that implements this kind of output."""
        return _PRINTERS[self]

    def print(self, stdout: TextIO, img: Image.Image, config: Config) -> tuple[int, int]:
        """Print ``img`` with this printer and return its size in terminal cells."""
        return self.printer.print(stdout, img, config)

    def print_from_file(
        self, stdout: TextIO, filename: str | os.PathLike[str], config: Config
    ) -> tuple[int, int]:
        """Decode ``filename`` and print it with this printer."""
        return self.printer.print_from_file(stdout, filename, config)


_PRINTERS: dict[PrinterType, Printer] = {
    PrinterType.BLOCK: BlockPrinter(),
    PrinterType.KITTY: KittyPrinter(),
    PrinterType.ITERM: ITermPrinter(),
}


def choose_printer(config: Config) -> PrinterType:
    """Pick the printer to use from the config and the terminal's capabilities."""
    if config.use_iterm and is_iterm_supported():
        return PrinterType.ITERM
    if config.use_kitty and get_kitty_support() is not KittySupport.NONE:
        return PrinterType.KITTY
    return PrinterType.BLOCK


def print_image(img: Image.Image, config: Config | None = None) -> tuple[int, int]:
    """Print ``img`` to standard output and return its size in terminal cells.

    The iTerm or Kitty protocol is used when available, half blocks otherwise.
    """
    config = config if config is not None else Config()
    stdout = sys.stdout
    if config.restore_cursor:
        stdout.write(_SAVE_POSITION)
        stdout.flush()

    size = choose_printer(config).print(stdout, img, config)

    if config.restore_cursor:
        stdout.write(_RESTORE_POSITION)
        stdout.flush()
    return size


def print_from_file(
    filename: str | os.PathLike[str], config: Config | None = None
) -> tuple[int, int]:
    """Decode the image in ``filename``, print it and return its size in terminal cells."""
    config = config if config is not None else Config()
    stdout = sys.stdout
    if config.restore_cursor:
        stdout.write(_SAVE_POSITION)
        stdout.flush()

    size = choose_printer(config).print_from_file(stdout, filename, config)

    if config.restore_cursor:
        stdout.write(_RESTORE_POSITION)
        stdout.flush()
    return size