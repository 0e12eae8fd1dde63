# viuer

Display images in the terminal.

`viuer` prints Pillow images straight to a terminal. When the terminal
supports the iTerm inline image protocol or the Kitty graphics protocol, that
protocol is used. Otherwise the image is drawn with coloured half blocks
(`▄` and `▀`), two pixel rows per terminal cell, in 24-bit colour or in the
256-colour palette.

## Installation

```
pip install viuer
```

The only dependency is Pillow.

## Usage

```python
from PIL import Image

from viuer.api import print_image
from viuer.config import Config

img = Image.new("RGBA", (60, 60), (0, 196, 0, 255))
conf = Config(absolute_offset=False)

width, height = print_image(img, conf)
```

`print_image(img, config=None)` writes to standard output and returns the
size of the printed image in terminal cells. Without a config, `Config()` is
used.

To decode and print an image file:

```python
from viuer.api import print_from_file
from viuer.config import Config

conf = Config(width=40, height=30, x=10, y=4)
print_from_file("img.jpg", conf)
```

Any format Pillow can open is accepted. A file that cannot be decoded raises
`viuer.errors.ImageError`.

## Choosing a printer

`viuer.api.choose_printer(config)` returns a `PrinterType`:

- `PrinterType.ITERM` when `config.use_iterm` is true and `TERM_PROGRAM` or
  `LC_TERMINAL` names iTerm, WezTerm, mintty or rio;
- otherwise `PrinterType.KITTY` when `config.use_kitty` is true and `TERM`
  contains `kitty` or `ghostty`;
- otherwise `PrinterType.BLOCK`.

Both checks are made once per process (`viuer.iterm.is_iterm_supported`,
`viuer.kitty.get_kitty_support`). For Kitty, the terminal is asked whether it
can read an image from a temporary file; if it answers `OK`, pixels are passed
through a temporary file (`KittySupport.LOCAL`), otherwise they are sent
base64-encoded in chunks of 4096 characters (`KittySupport.REMOTE`). The query
reads the reply from standard input, which works only on platforms with
`termios` and when standard input is a terminal; elsewhere the remote mode is
used.

Each `PrinterType` has `print(stdout, img, config)` and
`print_from_file(stdout, filename, config)`, so output can be sent to any text
stream. The printers themselves live in `viuer.block.BlockPrinter`,
`viuer.iterm.ITermPrinter` and `viuer.kitty.KittyPrinter`, all subclasses of
`viuer.printer.Printer`. `ITermPrinter.print_from_file` sends the file's bytes
to the terminal unchanged; the other printers decode the file first.

## Configuration

`viuer.config.Config` is a dataclass:

| Field                 | Default          | Meaning                                                                 |
|-----------------------|------------------|-------------------------------------------------------------------------|
| `transparent`         | `False`          | Leave transparent pixels empty instead of drawing a checkerboard (block output only). |
| `premultiplied_alpha` | `False`          | Treat the alpha channel as premultiplied when blending with the checkerboard. |
| `absolute_offset`     | `True`           | Offsets are from the top-left corner; otherwise they are from the cursor. |
| `x`                   | `0`              | Horizontal offset, 0 to 65535.                                          |
| `y`                   | `0`              | Vertical offset, -32768 to 32767. Negative only when `absolute_offset` is false. |
| `restore_cursor`      | `False`          | Save the cursor position before printing and restore it afterwards.     |
| `width`, `height`     | `None`           | Target size in cells. With neither set, the image fits the terminal.    |
| `truecolor`           | from `COLORTERM` | Use 24-bit colour instead of the 256-colour palette.                    |
| `use_kitty`           | `True`           | Use the Kitty protocol when the terminal supports it.                   |
| `use_iterm`           | `True`           | Use the iTerm protocol when the terminal supports it.                   |

`truecolor` defaults to true when `COLORTERM` contains `truecolor` or `24bit`.
If only one of `width` and `height` is given, the aspect ratio is kept and the
image is only ever scaled down. If both are given, the image is stretched to
exactly that size.

An out-of-range offset or a negative width or height raises
`InvalidConfigurationError` when the `Config` is created. A negative `y` with
`absolute_offset` true raises it when printing.

## Sizing helpers

`viuer.layout` provides the sizing logic on its own:

```python
from PIL import Image
from viuer.layout import find_best_fit, fit_dimensions, resize

fit_dimensions(100, 100, 40, 15)          # (30, 15)
img = Image.new("RGBA", (160, 80))
find_best_fit(img, None, None)            # (80, 20) on an 80x24 terminal
small = resize(img, 40, None)             # a 40x20 pixel image
```

A terminal cell is taken to be twice as tall as it is wide. When the image is
fitted to the whole terminal, one row is left free for the prompt.
`viuer.utils.terminal_size()` returns `(columns, rows)`, falling back to 80x24.

## Errors

Every failure raises a subclass of `viuer.errors.ViuError`:

- `ImageError` when an image cannot be decoded or encoded;
- `InvalidConfigurationError` for a configuration that cannot be honoured;
- `KittyResponseError` when the terminal does not confirm a Kitty query;
- `KittyNotSupportedError` when the Kitty printer is used in a terminal
  without Kitty graphics support.

File system errors such as a missing file are raised as the usual `OSError`.

## What it does not do

`viuer` is a library only; it installs no command-line program. It does not
produce Sixel output, does not render SVG files, and prints a single frame
only, so animated images are not played.