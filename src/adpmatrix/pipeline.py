"""Drive ingestion over every configured (source, format, team size) tuple."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence, Tuple

from adpmatrix.config import FormatSpec, SourceSpec
from adpmatrix.fetch import FetchError
from adpmatrix.ids import join_external_ids
from adpmatrix.matrix import PlayerMatrix
from adpmatrix.rankings import compute_rankings


logger = logging.getLogger(__name__)


class PayloadLoader(Protocol):
    def load(self, source: SourceSpec, fmt: FormatSpec, team_size: int) -> Tuple[Any, bool]:
        ...


@dataclass(frozen=True)
class RunReport:
    requests: int
    cache_reads: int
    failures: int
    records: int
    unique_players: int
    espn_matches: int
    formats: int

    @property
    def datasets(self) -> int:
        return self.requests + self.cache_reads


def build_matrix(
    sources: Sequence[SourceSpec],
    loader: PayloadLoader,
    *,
    group_by_team: bool = False,
    verbose: bool = False,
    id_mappings: Optional[Iterable[Mapping[str, Any]]] = None,
) -> Tuple[PlayerMatrix, RunReport]:
    """Ingest every reachable payload, join ids, then rank each format key.

    A tuple whose payload cannot be loaded is logged and left out; the run
    continues with the remaining datasets.
    """

    matrix = PlayerMatrix()
    requests = cache_reads = failures = records = 0

    for index, source in enumerate(sources, start=1):
        if source.skip:
            logger.info("Skipping source %d of %d: %s", index, len(sources), source.name)
            continue
        logger.info("Compiling source %d of %d: %s (%s)", index, len(sources), source.name, source.base_url)
        for fmt in source.formats:
            for team_size in fmt.team_sizes:
                try:
                    payload, from_cache = loader.load(source, fmt, team_size)
                except FetchError as exc:
                    failures += 1
                    logger.warning(
                        "Skipping %s %s/%s: %s", source.domain, fmt.name, team_size, exc
                    )
                    continue
                if from_cache:
                    cache_reads += 1
                else:
                    requests += 1
                if not isinstance(payload, Mapping):
                    logger.warning(
                        "Ignoring %s %s/%s: payload is not an object",
                        source.domain,
                        fmt.name,
                        team_size,
                    )
                    continue
                records += matrix.ingest_payload(
                    payload, source, fmt, team_size, group_by_team=group_by_team
                )

    espn_matches = 0
    if id_mappings is not None:
        espn_matches = join_external_ids(matrix, id_mappings)

    rankings = compute_rankings(matrix, verbose=verbose)

    report = RunReport(
        requests=requests,
        cache_reads=cache_reads,
        failures=failures,
        records=records,
        unique_players=len(matrix),
        espn_matches=espn_matches,
        formats=len(rankings),
    )
    return matrix, report
