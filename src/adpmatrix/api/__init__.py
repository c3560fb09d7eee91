"""Read-only REST API over the published player matrix."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Query

from adpmatrix.api.schemas import BoardPlayerResponse, BoardResponse, PlayersDocumentResponse
from adpmatrix.board import ALL_POSITIONS, available_positions, build_board
from adpmatrix.config import RunSettings
from adpmatrix.serialize import load_document


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def create_app(document_path: Path | None = None) -> FastAPI:
    """Serve ``document_path``, or today's ``players.json`` under the data dir."""

    app = FastAPI(title="adp matrix")
    settings = RunSettings.from_env()

    def resolve_path() -> Path:
        if document_path is not None:
            return document_path
        return settings.document_path(date.today().isoformat())

    def read_document() -> dict[str, Any]:
        path = resolve_path()
        if not path.exists():
            raise HTTPException(status_code=404, detail=f"No player matrix at {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise HTTPException(status_code=500, detail=f"Invalid player matrix: {exc}") from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=PlayersDocumentResponse)
    async def players() -> dict[str, Any]:
        return read_document()

    @app.get("/board", response_model=BoardResponse)
    async def board(
        format: str = Query("standard"),
        teams: str = Query("12"),
        position: str = Query(ALL_POSITIONS),
    ) -> BoardResponse:
        document = read_document()
        matrix = load_document(document)
        entries = build_board(matrix, format, teams, position)
        return BoardResponse(
            date=str(document.get("date", "")),
            format=format,
            teams=teams,
            position=position,
            positions=[ALL_POSITIONS, *available_positions(matrix)],
            players=[
                BoardPlayerResponse(
                    rank=entry.rank,
                    name=entry.player.name,
                    team=_optional_str(entry.player.team),
                    position=_optional_str(entry.player.position),
                    espn_id=_optional_str(entry.player.espn_id),
                )
                for entry in entries
            ],
        )

    return app


__all__ = ["create_app"]
