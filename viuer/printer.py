"""Common interface of the image printers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import TextIO

from PIL import Image, UnidentifiedImageError

from .config import Config
from .errors import ImageError


class Printer(ABC):
    """Prints images in a terminal according to a :class:`Config`."""

    @abstractmethod
    def print(self, stdout: TextIO, img: Image.Image, config: Config) -> tuple[int, int]:
        """Print ``img`` to ``stdout`` and return its size in terminal cells."""

    def print_from_file(
        self, stdout: TextIO, filename: str | os.PathLike[str], config: Config
    ) -> tuple[int, int]:
        """Decode the image stored in ``filename`` and print it."""
        try:
            with Image.open(filename) as opened:
                opened.load()
                img = opened.copy()
        except (UnidentifiedImageError, Image.DecompressionBombError, ValueError) as exc:
            raise ImageError(exc) from exc
        return self.print(stdout, img, config)