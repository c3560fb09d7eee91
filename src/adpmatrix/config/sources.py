"""Source configuration for the mock-draft feeds that are merged into the matrix."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.config import ConfigDict


DEFAULT_TEAM_SIZES: Tuple[int, ...] = (8, 10, 12, 14)


class SourceConfigError(ValueError):
    """Raised when a sources file cannot be read or validated."""


class FormatSpec(BaseModel):
    name: str = Field(..., min_length=1)
    teams: Optional[List[int]] = None

    model_config = ConfigDict(frozen=True)

    @property
    def team_sizes(self) -> Tuple[int, ...]:
        if self.teams:
            return tuple(self.teams)
        return DEFAULT_TEAM_SIZES


class SourceSpec(BaseModel):
    """One ADP provider and the fields/formats requested from it."""

    name: str
    base_url: str = Field(..., alias="baseUrl")
    skip: bool = False
    fields: List[str] = Field(default_factory=list)
    formats: List[FormatSpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("base_url")
    @classmethod
    def _require_host(cls, value: str) -> str:
        if not urlparse(value).hostname:
            raise ValueError(f"baseUrl {value!r} has no hostname")
        return value.rstrip("/")

    @property
    def domain(self) -> str:
        """Hostname used to key this source's stats inside a format entry."""

        return urlparse(self.base_url).hostname or ""


def parse_sources(data: object, *, limit: int | None = None) -> List[SourceSpec]:
    if not isinstance(data, dict) or not isinstance(data.get("sources"), list):
        raise SourceConfigError("sources config must be an object with a 'sources' list")
    try:
        sources = [SourceSpec.model_validate(item) for item in data["sources"]]
    except ValidationError as exc:
        raise SourceConfigError(f"invalid source definition: {exc}") from exc
    if limit:
        sources = sources[:limit]
    return sources


def load_sources(path: Path, *, limit: int | None = None) -> List[SourceSpec]:
    """Read ``sources.json``; ``limit`` keeps only the first N entries."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise SourceConfigError(f"sources file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SourceConfigError(f"sources file {path} is not valid JSON: {exc}") from exc
    return parse_sources(data, limit=limit)
