"""
Summary: Track comparators, sort key selection, and Fisher-Yates shuffling.
Why: Keep every reordering policy independent of the store that applies it.
"""

from __future__ import annotations

import random
from collections.abc import Callable, MutableSequence
from enum import StrEnum
from typing import Final, TypeVar

from .track import Track

Comparator = Callable[[Track, Track], int]

T = TypeVar("T")


class UnknownSortKeyError(ValueError):
    """Raised when a sort key name does not match any ordering."""


def _compare_text(left: str, right: str) -> int:
    return (left > right) - (left < right)


def by_title(first: Track, second: Track) -> int:
    """Order tracks by title, ignoring case."""

    return _compare_text(first.title.lower(), second.title.lower())


def by_artist(first: Track, second: Track) -> int:
    """Order tracks by artist, then by title, ignoring case."""

    result = _compare_text(first.artist.lower(), second.artist.lower())
    if result != 0:
        return result
    return by_title(first, second)


def by_duration(first: Track, second: Track) -> int:
    """Order tracks by ascending duration."""

    return (first.duration > second.duration) - (first.duration < second.duration)


class SortKey(StrEnum):
    """Named orderings selectable from the command line."""

    TITLE = "title"
    ARTIST = "artist"
    DURATION = "dur"

    @property
    def comparator(self) -> Comparator:
        """Return the comparator implementing this ordering."""

        return _COMPARATORS[self]

    @staticmethod
    def from_user_input(value: str) -> "SortKey":
        """Translate raw CLI input into the matching sort key."""

        normalized = value.strip().lower()
        if normalized == "duration":
            return SortKey.DURATION
        for key in SortKey:
            if key.value == normalized:
                return key
        raise UnknownSortKeyError(
            f"Unknown sort key '{value}'. Use title|artist|dur"
        )


_COMPARATORS: Final[dict[SortKey, Comparator]] = {
    SortKey.TITLE: by_title,
    SortKey.ARTIST: by_artist,
    SortKey.DURATION: by_duration,
}


def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random) -> None:
    """Permute ``items`` in place, uniformly over all orderings.

    Walks from the last index down to 1, swapping each slot with a slot
    drawn uniformly from ``[0, i]``.
    """

    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


__all__ = [
    "Comparator",
    "SortKey",
    "UnknownSortKeyError",
    "by_artist",
    "by_duration",
    "by_title",
    "fisher_yates_shuffle",
]
