"""Printing with the Kitty graphics protocol."""

from __future__ import annotations

import base64
import enum
import os
import select
import sys
import tempfile
from functools import cache
from pathlib import Path
from typing import TextIO

from PIL import Image

from .config import Config
from .errors import KittyNotSupportedError, KittyResponseError, ViuError
from .layout import adjust_offset, find_best_fit
from .printer import Printer

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - not available on every platform
    termios = None
    tty = None

TEMP_FILE_PREFIX = ".tty-graphics-protocol.viuer."
CHUNK_SIZE = 4096

_QUERY_OK_SUFFIX = "OK\x1b\\"
_RESPONSE_END = b"\x1b\\"
_RESPONSE_TIMEOUT = 1.0


class KittySupport(enum.Enum):
    """The extent to which the Kitty graphics protocol can be used."""

    NONE = "none"
    """The protocol is not supported."""
    LOCAL = "local"
    """The terminal runs locally; image data can be shared through a file."""
    REMOTE = "remote"
    """The terminal is remote; image data is sent through escape codes."""


def store_in_tmp_file(buf: bytes) -> Path:
    """Write ``buf`` to a new temporary file and return its path.

    The caller is responsible for removing the file.
    """
    fd, name = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(buf)
            handle.flush()
    except BaseException:
        Path(name).unlink(missing_ok=True)
        raise
    return Path(name)


def _encoded_path(path: Path) -> str:
    return base64.b64encode(str(path).encode("utf-8")).decode("ascii")


def _read_terminal_response() -> str:
    """Read the terminal's reply to a graphics query, up to the closing ``ESC \\``."""
    stdin = sys.stdin
    if termios is None or not stdin.isatty():
        return ""
    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    received = bytearray()
    try:
        tty.setcbreak(fd)
        while not received.endswith(_RESPONSE_END):
            ready, _, _ = select.select([fd], [], [], _RESPONSE_TIMEOUT)
            if not ready:
                break
            byte = os.read(fd, 1)
            if not byte:
                break
            received += byte
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    return received.decode("utf-8", errors="replace")


def has_local_support() -> None:
    """Ask the terminal whether it can display an image read from a file.

    Raises :class:`KittyResponseError` if the terminal does not confirm.
    """
    path = store_in_tmp_file(bytes(4))
    try:
        # t=t tells the terminal it reads a temporary file it may delete afterwards.
        sys.stdout.write(f"\x1b_Gi=31,s=1,v=1,a=q,t=t;{_encoded_path(path)}\x1b\\")
        sys.stdout.flush()
        response = _read_terminal_response()
    finally:
        path.unlink(missing_ok=True)

    if not response.endswith(_QUERY_OK_SUFFIX):
        raise KittyResponseError(list(response))


def check_kitty_support() -> KittySupport:
    """Detect from ``TERM`` and a terminal query how the protocol can be used."""
    term = os.environ.get("TERM")
    if term is None or ("kitty" not in term and "ghostty" not in term):
        return KittySupport.NONE
    try:
        has_local_support()
    except (ViuError, OSError):
        return KittySupport.REMOTE
    return KittySupport.LOCAL


@cache
def get_kitty_support() -> KittySupport:
    """Return the terminal's support for the Kitty protocol, checked once."""
    return check_kitty_support()


def print_local(stdout: TextIO, img: Image.Image, config: Config) -> tuple[int, int]:
    """Print ``img`` by handing the terminal a temporary file with its raw pixels."""
    raw = img.convert("RGBA").tobytes()
    path = store_in_tmp_file(raw)
    try:
        adjust_offset(stdout, config)
        w, h = find_best_fit(img, config.width, config.height)
        stdout.write(
            f"\x1b_Gf=32,s={img.width},v={img.height},c={w},r={h},a=T,t=t;"
            f"{_encoded_path(path)}\x1b\\\n"
        )
        stdout.flush()
    finally:
        path.unlink(missing_ok=True)
    return w, h


def print_remote(stdout: TextIO, img: Image.Image, config: Config) -> tuple[int, int]:
    """Print ``img`` by sending its raw pixels through escape codes in chunks."""
    encoded = base64.b64encode(img.convert("RGBA").tobytes()).decode("ascii")
    chunks = [encoded[i:i + CHUNK_SIZE] for i in range(0, len(encoded), CHUNK_SIZE)] or [""]

    adjust_offset(stdout, config)
    w, h = find_best_fit(img, config.width, config.height)

    first, *rest = chunks
    stdout.write(
        f"\x1b_Gf=32,a=T,t=d,s={img.width},v={img.height},c={w},r={h},m=1;{first}\x1b\\"
    )
    for index, chunk in enumerate(rest, start=1):
        more = 1 if index < len(rest) else 0
        stdout.write(f"\x1b_Gm={more};{chunk}\x1b\\")
    stdout.write("\n")
    stdout.flush()
    return w, h


class KittyPrinter(Printer):
    """Prints images with the Kitty graphics protocol."""

    def print(self, stdout: TextIO, img: Image.Image, config: Config) -> tuple[int, int]:
        support = get_kitty_support()
        if support is KittySupport.LOCAL:
            return print_local(stdout, img, config)
        if support is KittySupport.REMOTE:
            return print_remote(stdout, img, config)
        raise KittyNotSupportedError()