"""
Summary: Case-insensitive substring search over playlist tracks.
Why: Keep the matching rule out of the store so callers can reuse it.
"""

from __future__ import annotations

from collections.abc import Iterator

from .store import Playlist
from .track import Track


def matches(track: Track, term: str) -> bool:
    """Return whether ``term`` occurs in the title, artist, or album, ignoring case."""

    needle = term.lower()
    return (
        needle in track.title.lower()
        or needle in track.artist.lower()
        or needle in track.album.lower()
    )


def search(playlist: Playlist, term: str) -> Iterator[tuple[int, Track]]:
    """Yield ``(index, track)`` pairs whose fields contain ``term``.

    An empty term matches every track. Each call starts a fresh scan.
    """

    for index, track in playlist.iterate():
        if matches(track, term):
            yield index, track


__all__ = ["matches", "search"]
