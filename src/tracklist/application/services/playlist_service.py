"""Application service for an interactive playlist session.

This layer owns the playlist store for one session and turns domain errors
into result values, so any UI can drive the same use cases without
reaching into the store or the file format.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import final

from tracklist.features.playlist import (
    PersistenceResult,
    Playlist,
    PlaylistEvent,
    SortKey,
    Track,
    TrackValidationError,
    load_playlist,
    save_playlist,
    search,
)
from tracklist.platform.logging import logger

Loader = Callable[[Playlist, Path], PersistenceResult]
Saver = Callable[[Playlist, Path], PersistenceResult]


@dataclass(slots=True, frozen=True)
class OperationResult:
    """Outcome of a playlist mutation requested by the user."""

    success: bool
    message: str
    track: Track | None = None


@final
class PlaylistService:
    """Hold the session playlist and apply user requests to it."""

    def __init__(
        self,
        default_path: Path,
        *,
        playlist: Playlist | None = None,
        loader: Loader | None = None,
        saver: Saver | None = None,
    ) -> None:
        """Create a session bound to ``default_path``.

        Args:
            default_path: File used by save/load when no path is given.
            playlist: Existing store to manage; a new empty one by default.
            loader: Override for reading playlist files.
            saver: Override for writing playlist files.
        """
        self.default_path = default_path
        self.playlist = playlist if playlist is not None else Playlist()
        self._loader: Loader = loader or load_playlist
        self._saver: Saver = saver or save_playlist

    def __len__(self) -> int:
        return self.playlist.size()

    def tracks(self) -> Iterator[tuple[int, Track]]:
        """Yield ``(index, track)`` pairs in playlist order."""

        return self.playlist.iterate()

    def track_at(self, index: int) -> Track | None:
        """Return the track at zero-based ``index`` if present."""

        return self.playlist.get(index)

    def add_track(
        self,
        title: str | None,
        artist: str | None,
        album: str | None,
        duration: str | int | None,
    ) -> OperationResult:
        """Validate user input and append the resulting track."""

        try:
            track = Track.create(title, artist, album, duration)
        except TrackValidationError as exc:
            return OperationResult(success=False, message=str(exc))

        index = self.playlist.append(track)
        logger.debug(
            "Added %s at position %d",
            track.title,
            index + 1,
            extra={
                "playlist_event": PlaylistEvent.TRACK_ADDED,
                "title": track.title,
                "artist": track.artist,
                "position": index + 1,
            },
        )
        return OperationResult(
            success=True,
            message=f"Added: {track.title} — {track.artist}",
            track=track,
        )

    def remove_track(self, index: int) -> OperationResult:
        """Remove the track at zero-based ``index``."""

        removed = self.playlist.remove_at(index)
        if removed is None:
            return OperationResult(success=False, message="Invalid index.")

        logger.debug(
            "Removed %s from position %d",
            removed.title,
            index + 1,
            extra={
                "playlist_event": PlaylistEvent.TRACK_REMOVED,
                "title": removed.title,
                "position": index + 1,
            },
        )
        return OperationResult(
            success=True,
            message=f"Removed track {index + 1}.",
            track=removed,
        )

    def search(self, term: str) -> list[tuple[int, Track]]:
        """Return matches for ``term`` in playlist order."""

        return list(search(self.playlist, term))

    def sort(self, key: SortKey) -> OperationResult:
        """Reorder the playlist by ``key``."""

        self.playlist.sort_by(key.comparator)
        logger.debug(
            "Sorted playlist by %s",
            key.name.lower(),
            extra={
                "playlist_event": PlaylistEvent.SORTED,
                "sort_key": key.name.lower(),
                "track_count": self.playlist.size(),
            },
        )
        return OperationResult(success=True, message=f"Sorted by {key.name.lower()}.")

    def shuffle(self) -> OperationResult:
        """Randomly reorder the playlist."""

        self.playlist.shuffle()
        logger.debug(
            "Shuffled playlist",
            extra={
                "playlist_event": PlaylistEvent.SHUFFLED,
                "track_count": self.playlist.size(),
            },
        )
        return OperationResult(success=True, message="Playlist shuffled.")

    def clear(self) -> OperationResult:
        """Remove every track."""

        removed = self.playlist.clear()
        logger.debug(
            "Cleared %d tracks",
            removed,
            extra={"playlist_event": PlaylistEvent.CLEARED, "track_count": removed},
        )
        return OperationResult(success=True, message="Playlist cleared.")

    def save(self, path: Path | None = None) -> PersistenceResult:
        """Write the playlist to ``path`` or the session default."""

        return self._saver(self.playlist, path or self.default_path)

    def load(self, path: Path | None = None) -> PersistenceResult:
        """Append tracks from ``path`` or the session default."""

        return self._loader(self.playlist, path or self.default_path)


__all__ = ["Loader", "OperationResult", "PlaylistService", "Saver"]
