"""Playlist use cases: persistence and structured events."""

from .events import PlaylistEvent
from .persistence import PersistenceResult, load_playlist, save_playlist

__all__ = ["PersistenceResult", "PlaylistEvent", "load_playlist", "save_playlist"]
