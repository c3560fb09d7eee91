from __future__ import annotations

import pytest

from adpmatrix.config import FormatSpec, SourceSpec


@pytest.fixture
def source_a() -> SourceSpec:
    return SourceSpec(
        name="Source A",
        baseUrl="https://adp.alpha.example/api/v1/adp",
        fields=["team", "position"],
        formats=[{"name": "standard"}, {"name": "ppr", "teams": [12]}],
    )


@pytest.fixture
def source_b() -> SourceSpec:
    return SourceSpec(
        name="Source B",
        baseUrl="https://beta.example/adp/",
        fields=["team", "bye"],
        formats=[{"name": "standard", "teams": [10, 12]}],
    )


@pytest.fixture
def standard() -> FormatSpec:
    return FormatSpec(name="standard")
