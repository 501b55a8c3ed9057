"""Tests for comparators, sort keys and the Fisher-Yates shuffle."""

import random
from collections import Counter

import pytest
from pytest_mock import MockerFixture

from tracklist.features.playlist import (
    Comparator,
    Playlist,
    SortKey,
    Track,
    UnknownSortKeyError,
    by_artist,
    by_duration,
    by_title,
)
from tracklist.features.playlist.domain.orderings import fisher_yates_shuffle


@pytest.fixture
def mixed_case_playlist() -> Playlist:
    store = Playlist()
    for title, artist, duration in [
        ("banana", "Zed", 300),
        ("Apple", "alpha", 45),
        ("cherry", "Alpha", 120),
        ("apricot", "zed", 45),
        ("Blueberry", "beta", 9),
    ]:
        _ = store.insert(title, artist, "Album", duration)
    return store


def test_by_title_ignores_case() -> None:
    assert by_title(Track("apple"), Track("BANANA")) < 0
    assert by_title(Track("Zoo"), Track("apple")) > 0
    assert by_title(Track("Same"), Track("sAME")) == 0


def test_by_artist_breaks_ties_on_title() -> None:
    first = Track("b-side", artist="ARTIST")
    second = Track("A-side", artist="artist")

    assert by_artist(first, second) > 0
    assert by_artist(Track("z", artist="a"), Track("a", artist="b")) < 0


def test_by_duration_is_numeric() -> None:
    assert by_duration(Track("a", duration=9), Track("b", duration=100)) < 0
    assert by_duration(Track("a", duration=100), Track("b", duration=9)) > 0
    assert by_duration(Track("a", duration=5), Track("b", duration=5)) == 0


def test_sort_by_title_orders_adjacent_pairs(mixed_case_playlist: Playlist) -> None:
    mixed_case_playlist.sort_by(by_title)

    tracks = mixed_case_playlist.snapshot()
    for first, second in zip(tracks, tracks[1:]):
        assert first.title.lower() <= second.title.lower()


def test_sort_by_artist_orders_adjacent_pairs(mixed_case_playlist: Playlist) -> None:
    mixed_case_playlist.sort_by(by_artist)

    tracks = mixed_case_playlist.snapshot()
    for first, second in zip(tracks, tracks[1:]):
        key_first = (first.artist.lower(), first.title.lower())
        key_second = (second.artist.lower(), second.title.lower())
        assert key_first <= key_second


def test_sort_by_duration_orders_adjacent_pairs(mixed_case_playlist: Playlist) -> None:
    mixed_case_playlist.sort_by(by_duration)

    durations = [track.duration for track in mixed_case_playlist.snapshot()]
    assert durations == sorted(durations)


@pytest.mark.parametrize("comparator", [by_title, by_artist, by_duration])
def test_sorting_twice_is_idempotent(
    mixed_case_playlist: Playlist, comparator: Comparator
) -> None:
    mixed_case_playlist.sort_by(comparator)
    once = mixed_case_playlist.snapshot()

    mixed_case_playlist.sort_by(comparator)

    assert mixed_case_playlist.snapshot() == once


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("title", SortKey.TITLE),
        ("ARTIST", SortKey.ARTIST),
        ("dur", SortKey.DURATION),
        (" Duration ", SortKey.DURATION),
    ],
)
def test_sort_key_from_user_input(raw: str, expected: SortKey) -> None:
    assert SortKey.from_user_input(raw) is expected


def test_sort_key_rejects_unknown() -> None:
    with pytest.raises(UnknownSortKeyError, match="Unknown sort key 'album'"):
        _ = SortKey.from_user_input("album")


def test_sort_key_exposes_comparator() -> None:
    assert SortKey.TITLE.comparator is by_title
    assert SortKey.ARTIST.comparator is by_artist
    assert SortKey.DURATION.comparator is by_duration


def test_fisher_yates_swaps_with_drawn_index(mocker: MockerFixture) -> None:
    rng = mocker.Mock(spec=random.Random)
    rng.randint.side_effect = [0, 0, 0]
    items = ["a", "b", "c", "d"]

    fisher_yates_shuffle(items, rng)

    assert [call.args for call in rng.randint.call_args_list] == [(0, 3), (0, 2), (0, 1)]
    assert items == ["b", "c", "d", "a"]


def test_fisher_yates_covers_every_permutation() -> None:
    rng = random.Random(2024)
    seen: Counter[tuple[int, ...]] = Counter()
    for _ in range(3000):
        items = [1, 2, 3]
        fisher_yates_shuffle(items, rng)
        seen[tuple(items)] += 1

    assert len(seen) == 6
    assert min(seen.values()) > 350
