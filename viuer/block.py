"""Printing with coloured half blocks, for terminals without graphics protocols."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TextIO, Union

from PIL import Image

from .config import Config
from .layout import adjust_offset, resize
from .printer import Printer

UPPER_HALF_BLOCK = "\u2580"
LOWER_HALF_BLOCK = "\u2584"

CHECKERBOARD_BACKGROUND_LIGHT = (153, 153, 153)
CHECKERBOARD_BACKGROUND_DARK = (102, 102, 102)

_RESET = "\x1b[0m"
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

# A colour is either an (r, g, b) triple or an index into the 256-colour palette.
Color = Union[tuple[int, int, int], int]


def _sgr(base: int, color: Color) -> str:
    if isinstance(color, int):
        return f"\x1b[{base};5;{color}m"
    r, g, b = color
    return f"\x1b[{base};2;{r};{g};{b}m"


def _move_right(cells: int) -> str:
    return f"\x1b[{cells}C"


@dataclass
class ColorSpec:
    """Foreground and background colour of one terminal cell; ``None`` means unset."""

    fg: Color | None = None
    bg: Color | None = None

    def escape(self) -> str:
        """Return the escape sequence that resets attributes and applies these colours."""
        parts = [_RESET]
        if self.fg is not None:
            parts.append(_sgr(38, self.fg))
        if self.bg is not None:
            parts.append(_sgr(48, self.bg))
        return "".join(parts)


def ansi256_from_rgb(rgb: tuple[int, int, int]) -> int:
    """Return the index of the 256-colour palette entry closest to ``rgb``."""
    r, g, b = rgb

    def nearest_level(value: int) -> int:
        return min(range(len(_CUBE_LEVELS)), key=lambda i: abs(_CUBE_LEVELS[i] - value))

    cube = tuple(nearest_level(c) for c in rgb)
    cube_rgb = tuple(_CUBE_LEVELS[i] for i in cube)
    cube_index = 16 + 36 * cube[0] + 6 * cube[1] + cube[2]

    average = (r + g + b) // 3
    grey_step = min(23, max(0, (average - 3) // 10))
    grey_value = 8 + 10 * grey_step

    def distance(other: tuple[int, ...]) -> int:
        return sum((a - c) ** 2 for a, c in zip(rgb, other))

    if distance((grey_value,) * 3) < distance(cube_rgb):
        return 232 + grey_step
    return cube_index


def write_colored_character(stdout: TextIO, spec: ColorSpec, is_last_row: bool) -> None:
    """Write one half block for ``spec``, or step over the cell if it is transparent.

    On the last row of an odd-height image only the upper half is drawn, from
    the background colour.
    """
    if is_last_row:
        if spec.bg is None:
            stdout.write(_move_right(1))
            return
        out = ColorSpec(fg=spec.bg)
        char = UPPER_HALF_BLOCK
    elif spec.fg is None and spec.bg is None:
        stdout.write(_move_right(1))
        return
    elif spec.bg is None:
        out = ColorSpec(fg=spec.fg)
        char = LOWER_HALF_BLOCK
    elif spec.fg is None:
        out = ColorSpec(fg=spec.bg)
        char = UPPER_HALF_BLOCK
    else:
        out = spec
        char = LOWER_HALF_BLOCK
    stdout.write(out.escape())
    stdout.write(char)


def _checkerboard(row: int, col: int) -> tuple[int, int, int]:
    if row % 2 == col % 2:
        return CHECKERBOARD_BACKGROUND_DARK
    return CHECKERBOARD_BACKGROUND_LIGHT


def _to_color(rgb: tuple[int, int, int], truecolor: bool) -> Color:
    return rgb if truecolor else ansi256_from_rgb(rgb)


def _over(fg: int, bg: int, alpha: int) -> int:
    return (fg * alpha + bg * (255 - alpha)) // 255


def _over_porter_duff(fg: int, bg: int, alpha: int) -> int:
    return (fg + bg * (255 - alpha)) // 255


def _pixel_color(
    row: int, col: int, pixel: tuple[int, int, int, int], config: Config
) -> Color | None:
    r, g, b, alpha = pixel
    if alpha == 0:
        if config.transparent:
            return None
        return _to_color(_checkerboard(row, col), config.truecolor)

    if not config.transparent and alpha < 255:
        blend = _over_porter_duff if config.premultiplied_alpha else _over
        checker = _checkerboard(row, col)
        rgb = tuple(blend(c, k, alpha) for c, k in zip((r, g, b), checker))
    else:
        rgb = (r, g, b)
    return _to_color(rgb, config.truecolor)


def _pixel_rows(img: Image.Image) -> Iterator[list[tuple[int, int, int, int]]]:
    rgba = img.convert("RGBA")
    width, height = rgba.size
    raw = rgba.tobytes()
    stride = width * 4
    for row in range(height):
        chunk = raw[row * stride:(row + 1) * stride]
        yield list(zip(chunk[0::4], chunk[1::4], chunk[2::4], chunk[3::4]))


class BlockPrinter(Printer):
    """Draws two pixels per cell with lower and upper half blocks."""

    def print(self, stdout: TextIO, img: Image.Image, config: Config) -> tuple[int, int]:
        # The horizontal offset is applied per line below.
        adjust_offset(stdout, replace(config, x=0))

        img = resize(img, config.width, config.height)
        width, height = img.size
        specs = [ColorSpec() for _ in range(width)]

        for row, pixels in enumerate(_pixel_rows(img)):
            is_even_row = row % 2 == 0
            is_last_row = row == height - 1

            if config.x > 0 and (not is_even_row or is_last_row):
                stdout.write(_move_right(config.x))

            for col, (spec, pixel) in enumerate(zip(specs, pixels)):
                color = _pixel_color(row, col, pixel, config)
                # Even rows fill the background, odd rows the foreground of lower half blocks.
                if is_even_row:
                    spec.bg = color
                    if is_last_row:
                        write_colored_character(stdout, spec, True)
                else:
                    spec.fg = color
                    write_colored_character(stdout, spec, False)

            if not is_even_row and not is_last_row:
                stdout.write(_RESET + "\r\n")

        stdout.write(_RESET + "\n")
        stdout.flush()
        return width, height // 2 + height % 2