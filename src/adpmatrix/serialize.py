"""Publish the matrix as the deterministic ``players.json`` document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from adpmatrix.matrix import PlayerMatrix
from adpmatrix.models import PlayerRecord, RankedEntry, RawEntry, SourceStats
from adpmatrix.models.player import KNOWN_FIELDS


def serialize_matrix(matrix: PlayerMatrix, *, run_date: str, sources: int) -> Dict[str, Any]:
    players = [player.to_payload() for player in matrix]
    return {
        "date": run_date,
        "sources": sources,
        "totalPlayers": len(players),
        "players": players,
    }


def dump_document(document: Mapping[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def write_document(path: Path, document: Mapping[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_document(document), encoding="utf-8")
    return path


def _record_from_payload(payload: Mapping[str, Any]) -> PlayerRecord:
    record = PlayerRecord(name=str(payload["name"]))
    for field, value in payload.items():
        if field in {"name", "formats"}:
            continue
        if field in KNOWN_FIELDS:
            record.set_field(field, value)
        else:
            record.extra[field] = value
    for key, entry in (payload.get("formats") or {}).items():
        if isinstance(entry, Mapping):
            record.formats[key] = RawEntry(
                stats={
                    domain: SourceStats.from_raw(dict(stats))
                    for domain, stats in entry.items()
                    if isinstance(stats, Mapping)
                }
            )
        else:
            record.formats[key] = RankedEntry(rank=int(entry))
    return record


def load_document(source: Path | Mapping[str, Any]) -> PlayerMatrix:
    """Rebuild a matrix from a published document or its path."""

    if isinstance(source, Path):
        document = json.loads(source.read_text(encoding="utf-8"))
    else:
        document = source
    matrix = PlayerMatrix()
    for payload in document.get("players") or []:
        matrix.add(_record_from_payload(payload))
    return matrix
