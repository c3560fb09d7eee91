"""Command-line interface for compiling the daily ADP player matrix."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

import httpx

from adpmatrix.config import RunSettings, SourceConfigError, load_sources
from adpmatrix.fetch import FetchError, IdMappingCache, PayloadCache
from adpmatrix.pipeline import build_matrix
from adpmatrix.serialize import serialize_matrix, write_document


logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None, settings: RunSettings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge mock-draft ADP sources into one player matrix")
    parser.add_argument(
        "--sources",
        type=Path,
        default=settings.sources_path,
        help="Path to sources.json",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Directory holding cached payloads and output",
    )
    parser.add_argument(
        "--teams",
        action="store_true",
        help="Key formats by the player's NFL team (format-TEAM)",
    )
    parser.add_argument("--limit", type=int, default=None, help="Only use the first N sources")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Keep per-source ADP stats instead of collapsing to ranks",
    )
    parser.add_argument(
        "--date",
        default=None,
        help="Run date used for cache and output folders (default: today)",
    )
    parser.add_argument("--no-ids", action="store_true", help="Skip the ESPN id join")
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    settings = RunSettings.from_env()
    args = _parse_args(argv, settings)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    settings = RunSettings(data_dir=args.data_dir, sources_path=args.sources, ids_url=settings.ids_url)
    run_date = args.date or date.today().isoformat()

    try:
        sources = load_sources(settings.sources_path, limit=args.limit)
    except SourceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    with httpx.Client(timeout=args.timeout, follow_redirects=True) as client:
        id_mappings = None
        if not args.no_ids:
            try:
                id_mappings = IdMappingCache(client, settings.id_cache_path, settings.ids_url).load()
            except FetchError as exc:
                logger.warning("Continuing without ESPN ids: %s", exc)

        matrix, report = build_matrix(
            sources,
            PayloadCache(client, settings.run_dir(run_date)),
            group_by_team=args.teams,
            verbose=args.verbose,
            id_mappings=id_mappings,
        )

    document = serialize_matrix(matrix, run_date=run_date, sources=len(sources))
    output_path = write_document(settings.document_path(run_date), document)

    print("Compilation complete:")
    print(f"  API requests:    {report.requests}")
    print(f"  Cache reads:     {report.cache_reads}")
    print(f"  Failed fetches:  {report.failures}")
    print(f"  Data sources:    {len(sources)}")
    print(f"  Player records:  {report.records:,}")
    print(f"  Unique players:  {report.unique_players}")
    print(f"  ESPN ids mapped: {report.espn_matches}")
    print(f"Matrix ready -> {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
