"""Attach ESPN ids from the public cross-reference dataset."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping

from adpmatrix.ingest import is_empty, normalize_name
from adpmatrix.matrix import PlayerMatrix


logger = logging.getLogger(__name__)

NULL_SENTINEL = "NULL"


def build_espn_lookup(mappings: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for row in mappings:
        espn_name = row.get("espn_name")
        espn_id = row.get("espn_id")
        if not isinstance(espn_name, str) or is_empty(espn_name):
            continue
        if is_empty(espn_id) or str(espn_id).strip() == NULL_SENTINEL:
            continue
        # first occurrence of a name wins
        lookup.setdefault(normalize_name(espn_name), str(espn_id).strip())
    return lookup


def join_external_ids(matrix: PlayerMatrix, mappings: Iterable[Mapping[str, Any]]) -> int:
    """Fill ``espn_id`` on records that lack one; return how many were filled."""

    lookup = build_espn_lookup(mappings)
    matched = 0
    for player in matrix:
        if not is_empty(player.espn_id):
            continue
        espn_id = lookup.get(player.name)
        if espn_id is None:
            continue
        player.espn_id = espn_id
        matched += 1
    logger.info("Mapped %d ESPN ids from %d reference names", matched, len(lookup))
    return matched
