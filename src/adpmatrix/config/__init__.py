"""Configuration helpers for sources and run locations."""

from .settings import DEFAULT_IDS_URL, RunSettings
from .sources import (
    DEFAULT_TEAM_SIZES,
    FormatSpec,
    SourceConfigError,
    SourceSpec,
    load_sources,
    parse_sources,
)

__all__ = [
    "DEFAULT_IDS_URL",
    "DEFAULT_TEAM_SIZES",
    "FormatSpec",
    "RunSettings",
    "SourceConfigError",
    "SourceSpec",
    "load_sources",
    "parse_sources",
]
