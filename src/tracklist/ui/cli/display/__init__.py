"""Display helpers for the CLI."""

from .player import PlaybackDisplay
from .tracks import TrackDisplay, format_track_line

__all__ = ["PlaybackDisplay", "TrackDisplay", "format_track_line"]
