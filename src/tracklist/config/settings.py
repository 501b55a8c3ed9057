"""Where: src/tracklist/config/settings.py
What: Fixed runtime constants shared by the playlist core and the CLI.
Why: Keep literal defaults in one place so layers agree on them.
"""

from __future__ import annotations

from typing import Final

# Persisted playlist -----------------------------------------------------------

# File used by save/load/quit when no path is given.
DEFAULT_PLAYLIST_FILE: Final[str] = "playlist.csv"

# Column names written as the first line of every saved playlist.
CSV_HEADER_FIELDS: Final[tuple[str, ...]] = ("title", "artist", "album", "duration_seconds")

CSV_SEPARATOR: Final[str] = ","
CSV_QUOTE: Final[str] = '"'


# Track defaults ---------------------------------------------------------------

# Placeholder for artist/album when the user leaves them blank.
UNKNOWN_FIELD: Final[str] = "Unknown"


# Play simulation --------------------------------------------------------------

# Upper bound on how long ``play`` waits, in seconds.
PLAY_DEMO_LIMIT_DEFAULT: Final[int] = 5


__all__ = [
    "CSV_HEADER_FIELDS",
    "CSV_QUOTE",
    "CSV_SEPARATOR",
    "DEFAULT_PLAYLIST_FILE",
    "PLAY_DEMO_LIMIT_DEFAULT",
    "UNKNOWN_FIELD",
]
