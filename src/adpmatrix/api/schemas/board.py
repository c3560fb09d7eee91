from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class BoardPlayerResponse(BaseModel):
    rank: int
    name: str
    team: str | None = None
    position: str | None = None
    espn_id: str | None = None


class BoardResponse(BaseModel):
    date: str
    format: str
    teams: str
    position: str
    positions: List[str] = Field(default_factory=list)
    players: List[BoardPlayerResponse]


class PlayersDocumentResponse(BaseModel):
    date: str
    sources: int
    totalPlayers: int
    players: List[Dict[str, Any]]
