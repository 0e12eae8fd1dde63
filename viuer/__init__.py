"""Display images in the terminal with iTerm, Kitty or half-block output."""

__version__ = "0.9.1"
__all__ = ["api", "block", "config", "errors", "iterm", "kitty", "layout", "printer", "utils"]