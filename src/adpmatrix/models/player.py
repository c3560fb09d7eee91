"""Canonical player models shared across ingestion, ranking and output."""

from __future__ import annotations

import math
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Scalar = Union[int, float, str]

STAT_FIELDS = ("adp", "adp_formatted", "high", "low", "stdev", "times_drafted")

# Keys owned by the record itself; source field lists never write them.
RESERVED_FIELDS = frozenset({"name", "formats"})
KNOWN_FIELDS = frozenset({"team", "position", "espn_id"})


class SourceStats(BaseModel):
    """ADP statistics reported by one source for one format."""

    adp: Optional[Scalar] = None
    adp_formatted: Optional[Scalar] = None
    high: Optional[Scalar] = None
    low: Optional[Scalar] = None
    stdev: Optional[Scalar] = None
    times_drafted: Optional[Scalar] = None

    model_config = ConfigDict(frozen=True)

    @property
    def adp_value(self) -> Optional[float]:
        """Numeric ADP, or ``None`` when the source sent nothing usable."""

        if self.adp is None or isinstance(self.adp, bool):
            return None
        try:
            value = float(self.adp)
        except (ValueError, OverflowError):
            return None
        return None if math.isnan(value) else value

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "SourceStats":
        values = {}
        for field in STAT_FIELDS:
            value = raw.get(field)
            if value == "" or not isinstance(value, (int, float, str)):
                continue
            values[field] = value
        return cls.model_validate(values)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class RawEntry(BaseModel):
    """Per-domain stats kept side by side for one format key."""

    kind: Literal["raw"] = "raw"
    stats: Dict[str, SourceStats] = Field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return {domain: stats.to_payload() for domain, stats in self.stats.items()}


class RankedEntry(BaseModel):
    """Consensus rank that replaced the raw stats for one format key."""

    kind: Literal["ranked"] = "ranked"
    rank: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> int:
        return self.rank


FormatEntry = Union[RawEntry, RankedEntry]


class PlayerRecord(BaseModel):
    """Merged view of one player across every ingested source and format."""

    name: str = Field(..., min_length=1)
    team: Optional[str] = None
    position: Optional[str] = None
    espn_id: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)
    formats: Dict[str, FormatEntry] = Field(default_factory=dict)

    def get_field(self, field: str) -> Any:
        if field == "name":
            return self.name
        if field in KNOWN_FIELDS:
            return getattr(self, field)
        return self.extra.get(field)

    def set_field(self, field: str, value: Any) -> None:
        if field in RESERVED_FIELDS:
            raise KeyError(f"{field!r} is managed by the record and cannot be set")
        if field == "espn_id":
            self.espn_id = str(value)
        elif field in KNOWN_FIELDS:
            setattr(self, field, value)
        else:
            self.extra[field] = value

    def to_payload(self) -> Dict[str, Any]:
        """Flatten to the published shape with keys in alphabetical order."""

        data: Dict[str, Any] = {"name": self.name}
        for field in sorted(KNOWN_FIELDS):
            value = getattr(self, field)
            if value is not None:
                data[field] = value
        for field, value in self.extra.items():
            if field not in RESERVED_FIELDS:
                data[field] = value
        data["formats"] = {key: entry.to_payload() for key, entry in self.formats.items()}
        return {key: data[key] for key in sorted(data)}
