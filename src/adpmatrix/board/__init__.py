"""Board utilities (format/league-size/position selection)."""

from .filtering import (
    ALL_POSITIONS,
    POSITION_ORDER,
    BoardEntry,
    available_positions,
    build_board,
)

__all__ = [
    "ALL_POSITIONS",
    "POSITION_ORDER",
    "BoardEntry",
    "available_positions",
    "build_board",
]
