# Path: `src/tracklist/features/playlist/__init__.py`
# Summary: Export playlist domain and use case symbols.
# Why: Provide a stable import surface for the application layer and tests.

from .domain import (
    HEADER_LINE,
    Comparator,
    DecodedRow,
    Playlist,
    SortKey,
    Track,
    TrackValidationError,
    UnknownSortKeyError,
    by_artist,
    by_duration,
    by_title,
    decode_line,
    encode_field,
    encode_track,
    search,
)
from .usecases import PersistenceResult, PlaylistEvent, load_playlist, save_playlist

__all__ = [
    "HEADER_LINE",
    "Comparator",
    "DecodedRow",
    "PersistenceResult",
    "Playlist",
    "PlaylistEvent",
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
    "load_playlist",
    "save_playlist",
    "search",
]
