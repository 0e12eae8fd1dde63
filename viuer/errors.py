"""Exceptions raised while printing images."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class ViuError(Exception):
    """Base class for every error raised by this package."""


class ImageError(ViuError):
    """An image could not be decoded, encoded or transformed."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"Image error: {cause}")
        self.cause = cause


class InvalidConfigurationError(ViuError):
    """The supplied configuration cannot be honoured."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid Configuration: {message}")
        self.message = message


class KittyResponseError(ViuError):
    """The terminal answered a Kitty graphics query unexpectedly."""

    def __init__(self, response: Sequence[Any]) -> None:
        self.response = list(response)
        super().__init__(f"Kitty response: {self.response!r}")


class KittyNotSupportedError(ViuError):
    """The terminal does not support the Kitty graphics protocol."""

    def __init__(self) -> None:
        super().__init__("Kitty graphics protocol not supported")