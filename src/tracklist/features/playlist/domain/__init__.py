"""Playlist domain: tracks, the ordered store, codec, orderings, and search."""

from .csv_codec import HEADER_LINE, DecodedRow, decode_line, encode_field, encode_track, is_header_row
from .duration import parse_duration
from .orderings import (
    Comparator,
    SortKey,
    UnknownSortKeyError,
    by_artist,
    by_duration,
    by_title,
    fisher_yates_shuffle,
)
from .search import matches, search
from .store import Playlist
from .track import Track, TrackValidationError

__all__ = [
    "HEADER_LINE",
    "Comparator",
    "DecodedRow",
    "Playlist",
    "SortKey",
    "Track",
    "TrackValidationError",
    "UnknownSortKeyError",
    "by_artist",
    "by_duration",
    "by_title",
    "decode_line",
    "encode_field",
    "encode_track",
    "fisher_yates_shuffle",
    "is_header_row",
    "matches",
    "parse_duration",
    "search",
]
