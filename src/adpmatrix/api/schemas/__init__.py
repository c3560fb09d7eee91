"""Pydantic models for API I/O."""

from .board import BoardPlayerResponse, BoardResponse, PlayersDocumentResponse

__all__ = [
    "BoardPlayerResponse",
    "BoardResponse",
    "PlayersDocumentResponse",
]
