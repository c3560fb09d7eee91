"""Player and format-entry models."""

from .player import (
    STAT_FIELDS,
    FormatEntry,
    PlayerRecord,
    RankedEntry,
    RawEntry,
    SourceStats,
)

__all__ = [
    "STAT_FIELDS",
    "FormatEntry",
    "PlayerRecord",
    "RankedEntry",
    "RawEntry",
    "SourceStats",
]
