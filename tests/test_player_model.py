import pytest
from pydantic import ValidationError

from adpmatrix.models import PlayerRecord, RankedEntry, RawEntry, SourceStats


def test_source_stats_from_raw_keeps_only_stat_fields():
    stats = SourceStats.from_raw(
        {"name": "X", "adp": 4.2, "adp_formatted": "1.04", "high": 1, "low": 9, "stdev": 1.3, "times_drafted": 310}
    )

    assert stats.to_payload() == {
        "adp": 4.2,
        "adp_formatted": "1.04",
        "high": 1,
        "low": 9,
        "stdev": 1.3,
        "times_drafted": 310,
    }


def test_source_stats_tolerates_missing_and_odd_values():
    stats = SourceStats.from_raw({"adp": "N/A", "high": None, "low": "", "stdev": [1, 2]})

    assert stats.adp == "N/A"
    assert stats.adp_value is None
    assert stats.to_payload() == {"adp": "N/A"}


def test_source_stats_numeric_string_adp():
    assert SourceStats.from_raw({"adp": "12.5"}).adp_value == pytest.approx(12.5)


def test_ranked_entry_is_frozen():
    entry = RankedEntry(rank=3)

    with pytest.raises((TypeError, ValidationError)):
        entry.rank = 4  # type: ignore[misc]


def test_player_record_payload_keys_sorted():
    record = PlayerRecord(name="Ja'Marr Chase")
    record.set_field("team", "CIN")
    record.set_field("position", "WR")
    record.set_field("bye", 10)
    record.formats["standard"] = RawEntry(stats={"a.example": SourceStats(adp=1.5)})

    payload = record.to_payload()

    assert list(payload) == ["bye", "formats", "name", "position", "team"]
    assert payload["formats"] == {"standard": {"a.example": {"adp": 1.5}}}


def test_player_record_rejects_reserved_fields():
    record = PlayerRecord(name="Saquon Barkley")

    with pytest.raises(KeyError):
        record.set_field("formats", {})


def test_source_stats_huge_adp_is_not_numeric():
    assert SourceStats.from_raw({"adp": 10**400}).adp_value is None
