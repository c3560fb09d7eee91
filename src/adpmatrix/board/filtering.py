"""Draft-board view of a finished matrix for one format and league size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from adpmatrix.matrix import PlayerMatrix
from adpmatrix.models import PlayerRecord, RankedEntry, RawEntry
from adpmatrix.rankings import rank_format


POSITION_ORDER: Tuple[str, ...] = ("QB", "RB", "WR", "TE", "PK", "DEF")
ALL_POSITIONS = "all"


@dataclass(frozen=True)
class BoardEntry:
    player: PlayerRecord
    rank: int


def _matching_keys(player: PlayerRecord, format_name: str, league_size: int | str) -> List[str]:
    wanted = {format_name, f"{format_name}-{league_size}"}
    return [key for key in player.formats if key in wanted]


def available_positions(matrix: PlayerMatrix) -> List[str]:
    present = {player.position for player in matrix if player.position}
    return [position for position in POSITION_ORDER if position in present]


def build_board(
    matrix: PlayerMatrix,
    format_name: str,
    league_size: int | str,
    position: str = ALL_POSITIONS,
) -> List[BoardEntry]:
    """Players offered in the selection, ordered by their best rank.

    Ranked entries are used as stored; raw entries (verbose documents) are
    ranked on the fly over every player holding the same key.
    """

    players = [player for player in matrix if player.formats]
    raw_ranks: Dict[str, Dict[str, int]] = {}
    entries: List[BoardEntry] = []

    for player in players:
        if position != ALL_POSITIONS and player.position != position:
            continue
        best: Optional[int] = None
        for key in _matching_keys(player, format_name, league_size):
            entry = player.formats[key]
            if isinstance(entry, RankedEntry):
                rank = entry.rank
            elif isinstance(entry, RawEntry):
                if key not in raw_ranks:
                    raw_ranks[key] = {ranked.name: value for ranked, value in rank_format(players, key)}
                rank = raw_ranks[key][player.name]
            else:
                continue
            best = rank if best is None else min(best, rank)
        if best is not None:
            entries.append(BoardEntry(player=player, rank=best))

    return sorted(entries, key=lambda item: item.rank)
