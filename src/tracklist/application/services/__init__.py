"""Application services."""

from .playlist_service import OperationResult, PlaylistService

__all__ = ["OperationResult", "PlaylistService"]
