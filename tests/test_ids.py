from adpmatrix.ids import build_espn_lookup, join_external_ids
from adpmatrix.matrix import PlayerMatrix


def _matrix(source, fmt, *names):
    matrix = PlayerMatrix()
    for index, name in enumerate(names, start=1):
        matrix.ingest({"name": name, "adp": index}, source, fmt, 12)
    return matrix


def test_join_sets_ids_by_normalized_name(source_a, standard):
    matrix = _matrix(source_a, standard, "Ja'Marr Chase", "Unknown Rookie")

    matched = join_external_ids(matrix, [{"espn_name": " Ja'Marr  Chase", "espn_id": "4362628"}])

    assert matched == 1
    assert matrix.get("Ja'Marr Chase").espn_id == "4362628"
    assert matrix.get("Unknown Rookie").espn_id is None


def test_join_skips_null_sentinel_and_missing_ids(source_a, standard):
    matrix = _matrix(source_a, standard, "Player One", "Player Two")

    matched = join_external_ids(
        matrix,
        [
            {"espn_name": "Player One", "espn_id": "NULL"},
            {"espn_name": "Player Two", "espn_id": None},
        ],
    )

    assert matched == 0
    assert all(player.espn_id is None for player in matrix)


def test_join_never_overwrites_existing_id(standard):
    from adpmatrix.config import SourceSpec

    source = SourceSpec(name="ids", baseUrl="https://ids.example", fields=["espn_id"])
    matrix = PlayerMatrix()
    matrix.ingest({"name": "Tyreek Hill", "espn_id": "3116406", "adp": 10}, source, standard, 12)

    matched = join_external_ids(matrix, [{"espn_name": "Tyreek Hill", "espn_id": "999"}])

    assert matched == 0
    assert matrix.get("Tyreek Hill").espn_id == "3116406"


def test_first_duplicate_name_wins():
    lookup = build_espn_lookup(
        [
            {"espn_name": "Mike Williams", "espn_id": "3045138"},
            {"espn_name": "Mike  Williams", "espn_id": "1111"},
        ]
    )

    assert lookup == {"Mike Williams": "3045138"}
