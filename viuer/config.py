"""Options that control how an image is printed."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import InvalidConfigurationError
from .utils import truecolor_available

_U16_MAX = 0xFFFF
_I16_MIN = -0x8000
_I16_MAX = 0x7FFF


@dataclass
class Config:
    """Printing options.

    ``x`` is a horizontal offset in cells. ``y`` is a vertical offset and may be
    negative only when ``absolute_offset`` is false. ``width`` and ``height`` are
    optional bounds in terminal cells.
    """

    transparent: bool = False
    premultiplied_alpha: bool = False
    absolute_offset: bool = True
    x: int = 0
    y: int = 0
    restore_cursor: bool = False
    width: int | None = None
    height: int | None = None
    truecolor: bool = field(default_factory=truecolor_available)
    use_kitty: bool = True
    use_iterm: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.x <= _U16_MAX:
            raise InvalidConfigurationError(
                f"x offset must be between 0 and {_U16_MAX}, got {self.x}"
            )
        if not _I16_MIN <= self.y <= _I16_MAX:
            raise InvalidConfigurationError(
                f"y offset must be between {_I16_MIN} and {_I16_MAX}, got {self.y}"
            )
        for name in ("width", "height"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidConfigurationError(f"{name} must not be negative, got {value}")