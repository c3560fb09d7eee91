"""HTTP fetchers with a per-day on-disk JSON cache."""

from __future__ import annotations

import csv
import json
import logging
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx

from adpmatrix.config import FormatSpec, SourceSpec


logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when a payload cannot be downloaded or decoded."""


def payload_url(source: SourceSpec, fmt: FormatSpec, team_size: int) -> str:
    return f"{source.base_url}/{fmt.name}?teams={team_size}"


def cache_path(run_dir: Path, source: SourceSpec, fmt: FormatSpec, team_size: int) -> Path:
    return run_dir / f"{source.domain}-{fmt.name}-{team_size}.json"


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FetchError(f"cached file {path} is unreadable: {exc}") from exc


def _write_json(path: Path, data: Any) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as exc:
        raise FetchError(f"cannot write cache file {path}: {exc}") from exc


def fetch_json(client: httpx.Client, url: str) -> Any:
    try:
        response = client.get(url)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as exc:
        raise FetchError(f"HTTP {exc.response.status_code} for {url}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"request to {url} failed: {exc}") from exc
    except ValueError as exc:
        raise FetchError(f"response from {url} is not valid JSON: {exc}") from exc


def parse_csv(text: str) -> List[Dict[str, Optional[str]]]:
    """Parse CSV text into row dicts; blank cells become ``None``."""

    reader = csv.DictReader(StringIO(text.strip()))
    rows: List[Dict[str, Optional[str]]] = []
    for row in reader:
        rows.append(
            {
                key.strip(): (value.strip() or None) if isinstance(value, str) else None
                for key, value in row.items()
                if key is not None
            }
        )
    return rows


class PayloadCache:
    """Serve source payloads from ``run_dir`` and download the ones missing."""

    def __init__(self, client: httpx.Client, run_dir: Path):
        self._client = client
        self.run_dir = run_dir

    def load(self, source: SourceSpec, fmt: FormatSpec, team_size: int) -> Tuple[Any, bool]:
        """Return ``(payload, from_cache)`` for one source/format/team-size tuple."""

        path = cache_path(self.run_dir, source, fmt, team_size)
        if path.exists():
            logger.debug("Read %s", path)
            return _read_json(path), True
        url = payload_url(source, fmt, team_size)
        payload = fetch_json(self._client, url)
        _write_json(path, payload)
        logger.debug("Write %s", path)
        return payload, False


class IdMappingCache:
    """Player id cross-reference CSV, downloaded once and kept as JSON."""

    def __init__(self, client: httpx.Client, path: Path, url: str):
        self._client = client
        self.path = path
        self.url = url

    def load(self) -> List[Dict[str, Any]]:
        if self.path.exists():
            logger.debug("Player ids already cached at %s", self.path)
            data = _read_json(self.path)
            return data if isinstance(data, list) else []
        try:
            response = self._client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(f"HTTP {exc.response.status_code} for {self.url}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"request to {self.url} failed: {exc}") from exc
        rows = parse_csv(response.text)
        _write_json(self.path, rows)
        logger.info("Cached %d player id mappings to %s", len(rows), self.path)
        return rows
