"""Player name canonicalization used as the cross-source identity key."""

from __future__ import annotations

import re


_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Trim ``name`` and collapse internal whitespace runs to a single space.

    No suffix, punctuation or nickname handling is applied: two spellings only
    match when they differ by whitespace alone.
    """

    return _WHITESPACE.sub(" ", name.strip())
