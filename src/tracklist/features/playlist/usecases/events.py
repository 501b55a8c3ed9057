"""
Summary: Structured event identifiers for playlist logging.
Why: Let the Rich console handler style playlist records consistently.
"""

from __future__ import annotations

from enum import StrEnum


class PlaylistEvent(StrEnum):
    """Values attached to log records as ``extra={"playlist_event": ...}``."""

    LOAD_COMPLETE = "playlist.load.complete"
    LOAD_ERROR = "playlist.load.error"
    SAVE_COMPLETE = "playlist.save.complete"
    SAVE_ERROR = "playlist.save.error"
    TRACK_ADDED = "playlist.track.added"
    TRACK_REMOVED = "playlist.track.removed"
    SORTED = "playlist.sorted"
    SHUFFLED = "playlist.shuffled"
    CLEARED = "playlist.cleared"


__all__ = ["PlaylistEvent"]
