"""Sizing of images in terminal cells and cursor positioning."""

from __future__ import annotations

from typing import TextIO

from PIL import Image

from .config import Config
from .errors import InvalidConfigurationError
from .utils import terminal_size


def resize(img: Image.Image, width: int | None, height: int | None) -> Image.Image:
    """Resize ``img`` to fit the optional bounds, or the terminal if none are given.

    Each terminal cell holds two vertical pixels, so the result is twice as
    tall as the cell height, minus one for images of odd height.
    """
    w, h = find_best_fit(img, width, height)
    return img.resize((w, 2 * h - img.height % 2), Image.Resampling.BICUBIC)


def find_best_fit(img: Image.Image, width: int | None, height: int | None) -> tuple[int, int]:
    """Return the size, in terminal cells, at which ``img`` should be printed.

    With no bounds the terminal size is used and the aspect ratio kept. With
    one bound the image fits within it, keeping the aspect ratio. With both the
    image is stretched to exactly that size.
    """
    img_width, img_height = img.size

    if width is None and height is None:
        term_w, term_h = terminal_size()
        w, h = fit_dimensions(img_width, img_height, term_w, term_h)
        # Leave a row for the prompt that follows and to avoid flicker.
        if h == term_h:
            h -= 1
        return w, h
    if height is None:
        return fit_dimensions(img_width, img_height, width, img_height)
    if width is None:
        return fit_dimensions(img_width, img_height, img_width, height)
    return width, height


def fit_dimensions(
    width: int, height: int, bound_width: int, bound_height: int
) -> tuple[int, int]:
    """Scale ``width`` x ``height`` pixels down to fit the bounds in terminal cells.

    A cell is twice as tall as it is wide. Images already within the bounds are
    not enlarged.
    """
    bound_height *= 2

    if width <= bound_width and height <= bound_height:
        return width, max(1, height // 2 + height % 2)

    use_width = bound_width * height <= width * bound_height
    if use_width:
        intermediate = height * bound_width // width
        return bound_width, max(1, intermediate // 2)
    intermediate = width * bound_height // height
    return intermediate, max(1, bound_height // 2)


def adjust_offset(stdout: TextIO, config: Config) -> None:
    """Move the cursor to where printing should start, as the config's offsets say."""
    if config.absolute_offset:
        if config.y < 0:
            raise InvalidConfigurationError(
                "absolute_offset is true but y offset is negative"
            )
        stdout.write(f"\x1b[{config.y + 1};{config.x + 1}H")
        stdout.flush()
        return

    if config.y < 0:
        stdout.write(f"\x1b[{-config.y}F")
        stdout.flush()
    else:
        # Newlines rather than cursor-down so the terminal scrolls when needed.
        stdout.write("\n" * config.y)

    # Some terminals treat a zero move as a move of one.
    if config.x > 0:
        stdout.write(f"\x1b[{config.x}C")
        stdout.flush()