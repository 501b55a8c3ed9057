"""
Summary: Ordered, index-addressed playlist store with in-place reordering.
Why: Own every track and expose only the mutations the playlist supports.
"""

from __future__ import annotations

import random
from collections.abc import Iterator
from functools import cmp_to_key
from typing import final

from .orderings import Comparator, fisher_yates_shuffle
from .track import Track


@final
class Playlist:
    """Ordered sequence of tracks addressed by zero-based index.

    Indices are always contiguous. Removal shifts later tracks down and
    keeps their relative order.
    """

    def __init__(self, *, rng: random.Random | None = None) -> None:
        """Create an empty playlist.

        Args:
            rng: Random source used by :meth:`shuffle`. When omitted each
                shuffle draws from a freshly seeded generator.
        """
        self._tracks: list[Track] = []
        self._rng = rng

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(list(self._tracks))

    def size(self) -> int:
        """Return the number of tracks."""

        return len(self._tracks)

    def insert(self, title: str, artist: str, album: str, duration: int) -> int:
        """Append a track built from the given fields.

        Returns:
            int: Zero-based index of the new track.
        """
        self._tracks.append(Track(title=title, artist=artist, album=album, duration=duration))
        return len(self._tracks) - 1

    def append(self, track: Track) -> int:
        """Append an already-built track and return its index."""

        return self.insert(track.title, track.artist, track.album, track.duration)

    def get(self, index: int) -> Track | None:
        """Return the track at ``index`` or ``None`` when out of range."""

        if 0 <= index < len(self._tracks):
            return self._tracks[index]
        return None

    def remove_at(self, index: int) -> Track | None:
        """Remove the track at ``index``, shifting later tracks down.

        Out-of-range indices leave the playlist untouched; callers validate
        user input beforehand to report errors.

        Returns:
            Track | None: The removed track, or ``None`` for a no-op.
        """
        if 0 <= index < len(self._tracks):
            return self._tracks.pop(index)
        return None

    def iterate(self) -> Iterator[tuple[int, Track]]:
        """Yield ``(index, track)`` pairs in playlist order."""

        for index, track in enumerate(self._tracks):
            yield index, track

    def clear(self) -> int:
        """Drop every track and return how many were removed."""

        removed = len(self._tracks)
        self._tracks.clear()
        return removed

    def sort_by(self, comparator: Comparator) -> None:
        """Reorder tracks in place according to ``comparator``."""

        self._tracks.sort(key=cmp_to_key(comparator))

    def shuffle(self) -> None:
        """Randomly permute the tracks in place."""

        if len(self._tracks) < 2:
            return
        rng = self._rng if self._rng is not None else random.Random()
        fisher_yates_shuffle(self._tracks, rng)

    def snapshot(self) -> list[Track]:
        """Return a copy of the tracks in order."""

        return list(self._tracks)


__all__ = ["Playlist"]
