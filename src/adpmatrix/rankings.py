"""Consensus rankings per format key, ordered by each player's best ADP."""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Sequence, Tuple

from adpmatrix.matrix import PlayerMatrix
from adpmatrix.models import PlayerRecord, RankedEntry, RawEntry


logger = logging.getLogger(__name__)


def format_keys(players: Iterable[PlayerRecord]) -> List[str]:
    """Distinct format keys in first-seen order."""

    seen: Dict[str, None] = {}
    for player in players:
        for key in player.formats:
            seen.setdefault(key, None)
    return list(seen)


def best_adp(entry: RawEntry) -> float:
    """Lowest ADP reported by any source; missing ADPs sort after every real one."""

    values = [stats.adp_value for stats in entry.stats.values()]
    numeric = [value for value in values if value is not None]
    return min(numeric) if numeric else math.inf


def rank_format(players: Sequence[PlayerRecord], key: str) -> List[Tuple[PlayerRecord, int]]:
    """Rank the players holding raw stats under ``key`` without mutating them.

    ``sorted`` is stable, so equal best ADPs keep the order of ``players``
    (ingestion order for a matrix).
    """

    eligible = [
        (player, best_adp(entry))
        for player in players
        for entry in (player.formats.get(key),)
        if isinstance(entry, RawEntry)
    ]
    ordered = sorted(eligible, key=lambda item: item[1])
    return [(player, index) for index, (player, _) in enumerate(ordered, start=1)]


def compute_rankings(matrix: PlayerMatrix, *, verbose: bool = False) -> Dict[str, List[str]]:
    """Rank every format key in ``matrix``.

    Without ``verbose`` each raw entry is replaced by its :class:`RankedEntry`;
    with it the raw per-source stats are kept and ranks are only returned.
    Returns the ranked player names per format key.
    """

    players = matrix.players()
    results: Dict[str, List[str]] = {}
    for key in format_keys(players):
        ranked = rank_format(players, key)
        if not verbose:
            for player, rank in ranked:
                player.formats[key] = RankedEntry(rank=rank)
        results[key] = [player.name for player, _ in ranked]
    logger.info("Ranked %d format keys across %d players", len(results), len(players))
    return results
