"""
Solver exceptions.
"""


class InvalidMoveError(ValueError):
    """A triggered color does not change the board."""

    def __init__(self, color: str, index: int = -1):
        self.color = color
        self.index = index
        where = f" at move {index + 1}" if index >= 0 else ""
        super().__init__(f"Triggering '{color}'{where} does not change the board")


class LevelFormatError(ValueError):
    """Level data is malformed and cannot build a Level."""
