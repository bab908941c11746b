"""Exception types raised by the rules engine.

Probing an empty square is not an error: move generation simply returns
an empty list for it.
"""

from __future__ import annotations


class DraughtsError(Exception):
    """Base class for every error raised by draughtlab."""


class OutOfRange(DraughtsError, IndexError):
    """A coordinate outside the board was passed to a board accessor."""

    def __init__(self, pos: tuple[int, int], size: int) -> None:
        super().__init__(f"position {pos} is outside the {size}x{size} board")
        self.pos = pos
        self.size = size


class InvalidMove(DraughtsError, ValueError):
    """A move was structurally malformed or not playable in this state."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ConfigError(DraughtsError, ValueError):
    """The game configuration could not be loaded or is inconsistent."""
