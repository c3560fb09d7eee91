from adpmatrix.config import SourceSpec
from adpmatrix.fetch import FetchError
from adpmatrix.models import RankedEntry, RawEntry
from adpmatrix.pipeline import build_matrix


class FakeLoader:
    def __init__(self, payloads, failures=()):
        self.payloads = payloads
        self.failures = set(failures)
        self.calls = []

    def load(self, source, fmt, team_size):
        key = (source.domain, fmt.name, team_size)
        self.calls.append(key)
        if key in self.failures:
            raise FetchError(f"HTTP 500 for {key}")
        return self.payloads.get(key, {"players": []}), team_size == 10


def _sources():
    return [
        SourceSpec(
            name="A",
            baseUrl="https://a.example",
            fields=["team", "position"],
            formats=[{"name": "standard", "teams": [10, 12]}],
        ),
        SourceSpec(name="Skipped", baseUrl="https://skip.example", skip=True, formats=[{"name": "standard"}]),
        SourceSpec(
            name="B",
            baseUrl="https://b.example",
            fields=["team"],
            formats=[{"name": "standard", "teams": [12]}],
        ),
    ]


def test_build_matrix_merges_ranks_and_reports():
    loader = FakeLoader(
        {
            ("a.example", "standard", 10): {"players": [{"name": "X", "team": "CIN", "adp": 5}]},
            ("a.example", "standard", 12): {"players": [{"name": "X", "team": "CIN", "adp": 4}, {"name": "Y", "adp": 6}]},
            ("b.example", "standard", 12): {"players": [{"name": "Y", "team": "KC", "adp": 2}]},
        }
    )

    matrix, report = build_matrix(
        _sources(),
        loader,
        id_mappings=[{"espn_name": "Y", "espn_id": "77"}],
    )

    assert all(call[0] != "skip.example" for call in loader.calls)
    assert report.cache_reads == 1
    assert report.requests == 2
    assert report.datasets == 3
    assert report.records == 4
    assert report.unique_players == 2
    assert report.espn_matches == 1
    assert report.formats == 1
    assert matrix.get("Y").formats["standard"] == RankedEntry(rank=1)
    assert matrix.get("X").formats["standard"] == RankedEntry(rank=2)
    assert matrix.get("Y").team == "KC"


def test_failed_tuple_is_omitted():
    loader = FakeLoader(
        {("b.example", "standard", 12): {"players": [{"name": "Y", "adp": 2}]}},
        failures=[("a.example", "standard", 10), ("a.example", "standard", 12)],
    )

    matrix, report = build_matrix(_sources(), loader, verbose=True)

    assert report.failures == 2
    assert report.unique_players == 1
    entry = matrix.get("Y").formats["standard"]
    assert isinstance(entry, RawEntry)
    assert list(entry.stats) == ["b.example"]


def test_group_by_team_keys():
    loader = FakeLoader(
        {("b.example", "standard", 12): {"players": [{"name": "Y", "team": "KC", "adp": 2}]}}
    )

    matrix, _ = build_matrix(_sources(), loader, group_by_team=True)

    assert list(matrix.get("Y").formats) == ["standard-KC"]


def test_corrupt_cache_file_is_skipped(tmp_path):
    import httpx

    from adpmatrix.fetch import PayloadCache

    source = SourceSpec(
        name="A",
        baseUrl="https://a.example",
        fields=["team"],
        formats=[{"name": "standard", "teams": [10, 12]}],
    )
    (tmp_path / "a.example-standard-10.json").write_bytes(b"\xff\xfe{garbage")
    (tmp_path / "a.example-standard-12.json").write_text(
        '{"players": [{"name": "X", "adp": 3}]}', encoding="utf-8"
    )

    def handler(request):
        raise AssertionError(f"unexpected request to {request.url}")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        matrix, report = build_matrix([source], PayloadCache(client, tmp_path))

    assert report.failures == 1
    assert report.cache_reads == 1
    assert len(matrix) == 1
