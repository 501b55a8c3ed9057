"""
Summary: Save and load a playlist through the delimited text codec.
Why: Report file failures as results so a bad path never ends the session.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain
from pathlib import Path

from tracklist.features.playlist.domain.csv_codec import (
    HEADER_LINE,
    decode_line,
    encode_track,
    is_header_row,
)
from tracklist.features.playlist.domain.store import Playlist
from tracklist.platform.logging import logger

from .events import PlaylistEvent

PERSISTENCE_EXCEPTIONS: tuple[type[Exception], ...] = (OSError, UnicodeError)


@dataclass(slots=True)
class PersistenceResult:
    """Outcome of a save or load call."""

    path: Path
    success: bool
    track_count: int = 0
    skipped_lines: int = 0
    error_message: str | None = None


def save_playlist(playlist: Playlist, destination: Path | str) -> PersistenceResult:
    """Write the header and every track to ``destination``, replacing it.

    Args:
        playlist: Tracks to persist, written in playlist order.
        destination: Target file.

    Returns:
        PersistenceResult: ``success`` is False when the file cannot be
        opened or written.
    """
    path = Path(destination)
    written = 0
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            _ = handle.write(HEADER_LINE)
            for _index, track in playlist.iterate():
                _ = handle.write(encode_track(track))
                written += 1
    except PERSISTENCE_EXCEPTIONS as exc:
        logger.warning(
            "Failed to save playlist to %s: %s",
            path,
            exc,
            extra={
                "playlist_event": PlaylistEvent.SAVE_ERROR,
                "path": str(path),
                "error_message": str(exc),
            },
        )
        return PersistenceResult(path=path, success=False, error_message=str(exc))

    logger.debug(
        "Saved %d tracks to %s",
        written,
        path,
        extra={
            "playlist_event": PlaylistEvent.SAVE_COMPLETE,
            "path": str(path),
            "track_count": written,
        },
    )
    return PersistenceResult(path=path, success=True, track_count=written)


def load_playlist(playlist: Playlist, source: Path | str) -> PersistenceResult:
    """Append the tracks stored in ``source`` to ``playlist``.

    The playlist is never cleared first, so loading the same file twice
    duplicates its tracks. A first line naming the header columns is
    skipped; lines whose title decodes empty are skipped too.

    Args:
        playlist: Store receiving the decoded tracks.
        source: File to read.

    Returns:
        PersistenceResult: ``success`` is False when the file is missing,
        unreadable, or empty. Tracks appended before a mid-file read error
        stay in the playlist.
    """
    path = Path(source)
    appended = 0
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8-sig", newline="\n") as handle:
            first_line = handle.readline()
            if first_line == "":
                return _load_failed(path, "file is empty", appended, skipped)

            lines: Iterable[str] = handle
            if not is_header_row(decode_line(first_line)):
                lines = chain([first_line], handle)
            for line in lines:
                row = decode_line(line)
                if row.is_blank:
                    skipped += 1
                    continue
                _ = playlist.insert(row.title, row.artist, row.album, row.duration)
                appended += 1
    except PERSISTENCE_EXCEPTIONS as exc:
        return _load_failed(path, str(exc), appended, skipped)

    logger.debug(
        "Loaded %d tracks from %s",
        appended,
        path,
        extra={
            "playlist_event": PlaylistEvent.LOAD_COMPLETE,
            "path": str(path),
            "track_count": appended,
            "skipped_lines": skipped,
        },
    )
    return PersistenceResult(
        path=path,
        success=True,
        track_count=appended,
        skipped_lines=skipped,
    )


def _load_failed(path: Path, message: str, appended: int, skipped: int) -> PersistenceResult:
    logger.warning(
        "Failed to load playlist from %s: %s",
        path,
        message,
        extra={
            "playlist_event": PlaylistEvent.LOAD_ERROR,
            "path": str(path),
            "error_message": message,
            "track_count": appended,
        },
    )
    return PersistenceResult(
        path=path,
        success=False,
        track_count=appended,
        skipped_lines=skipped,
        error_message=message,
    )


__all__ = ["PERSISTENCE_EXCEPTIONS", "PersistenceResult", "load_playlist", "save_playlist"]
