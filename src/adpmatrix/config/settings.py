"""Runtime locations resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_IDS_URL = (
    "https://raw.githubusercontent.com/mayscopeland/ffb_ids/refs/heads/main/player_ids.csv"
)


@dataclass(frozen=True)
class RunSettings:
    data_dir: Path
    sources_path: Path
    ids_url: str

    @classmethod
    def from_env(cls) -> "RunSettings":
        return cls(
            data_dir=Path(os.getenv("ADPMATRIX_DATA_DIR", "data")),
            sources_path=Path(os.getenv("ADPMATRIX_SOURCES", "sources.json")),
            ids_url=os.getenv("ADPMATRIX_IDS_URL", DEFAULT_IDS_URL),
        )

    @property
    def id_cache_path(self) -> Path:
        return self.data_dir / "player_ids.json"

    def run_dir(self, run_date: str) -> Path:
        return self.data_dir / run_date

    def document_path(self, run_date: str) -> Path:
        return self.run_dir(run_date) / "players.json"
