"""Consensus fantasy-football ADP matrix built from multiple mock-draft sources."""

from .matrix import PlayerMatrix
from .rankings import compute_rankings
from .ids import join_external_ids
from .serialize import load_document, serialize_matrix

__all__ = [
    "PlayerMatrix",
    "compute_rankings",
    "join_external_ids",
    "load_document",
    "serialize_matrix",
]
