"""The player matrix: one merged record per canonical player name."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional

from adpmatrix.config import FormatSpec, SourceSpec
from adpmatrix.ingest import extract_fields, is_empty, normalize_name
from adpmatrix.models import PlayerRecord, RankedEntry, RawEntry, SourceStats
from adpmatrix.models.player import RESERVED_FIELDS


logger = logging.getLogger(__name__)

# Team component used for team-grouped format keys before any source has
# supplied the player's team.
MISSING_TEAM = "undefined"


def format_key(format_name: str, team: Optional[str], *, group_by_team: bool) -> str:
    if not group_by_team:
        return format_name
    return f"{format_name}-{team if not is_empty(team) else MISSING_TEAM}"


class PlayerMatrix:
    """Accumulates source payloads into merged player records.

    Descriptive fields are first-write-wins in ingestion order, so the order
    of sources in configuration decides which provider's team/position stick.
    Stats are kept per source domain under each format key and a repeated
    (domain, format key) write replaces the previous one.
    """

    def __init__(self) -> None:
        self._players: Dict[str, PlayerRecord] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self._players.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._players

    def get(self, name: str) -> Optional[PlayerRecord]:
        return self._players.get(normalize_name(name))

    def players(self) -> List[PlayerRecord]:
        return list(self._players.values())

    def add(self, record: PlayerRecord) -> PlayerRecord:
        """Insert a fully built record, e.g. when restoring a saved document."""

        key = normalize_name(record.name)
        if key in self._players:
            raise ValueError(f"player {key!r} already present in matrix")
        self._players[key] = record
        return record

    def ingest(
        self,
        raw: Mapping[str, Any],
        source: SourceSpec,
        fmt: FormatSpec,
        team_size: int,
        *,
        group_by_team: bool = False,
    ) -> Optional[PlayerRecord]:
        raw_name = raw.get("name")
        if not isinstance(raw_name, str) or not raw_name.strip():
            logger.debug("Skipping %s record without a name: %r", source.domain, raw)
            return None

        key = normalize_name(raw_name)
        record = self._players.get(key)
        if record is None:
            record = PlayerRecord(name=key)
            self._players[key] = record

        for field, value in extract_fields(raw, source.fields).items():
            if field in RESERVED_FIELDS:
                continue
            if is_empty(record.get_field(field)):
                record.set_field(field, value)

        entry_key = format_key(fmt.name, record.team, group_by_team=group_by_team)
        entry = record.formats.get(entry_key)
        if isinstance(entry, RankedEntry):
            raise ValueError(f"{key!r} {entry_key!r} is already ranked; ingest before computing rankings")
        if entry is None:
            entry = RawEntry()
            record.formats[entry_key] = entry
        entry.stats[source.domain] = SourceStats.from_raw(dict(raw))
        return record

    def ingest_payload(
        self,
        payload: Mapping[str, Any],
        source: SourceSpec,
        fmt: FormatSpec,
        team_size: int,
        *,
        group_by_team: bool = False,
    ) -> int:
        """Fold every record of a ``{"players": [...]}`` payload; return the count seen."""

        rows = payload.get("players") or []
        for raw in rows:
            if not isinstance(raw, Mapping):
                logger.debug("Skipping non-object player row from %s", source.domain)
                continue
            self.ingest(raw, source, fmt, team_size, group_by_team=group_by_team)
        logger.debug(
            "Ingested %d rows from %s %s/%s", len(rows), source.domain, fmt.name, team_size
        )
        return len(rows)
