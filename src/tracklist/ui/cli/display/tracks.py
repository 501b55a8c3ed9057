"""src/tracklist/ui/cli/display/tracks.py
What: Render track listings, search hits, help and status lines.
Why: Keep console output formatting consistent across prompt commands.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final, final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tracklist.features.playlist import Track

HELP_ROWS: Final[tuple[tuple[str, str], ...]] = (
    ("add", "add a new track"),
    ("list", "list all tracks"),
    ("remove N", "remove track at index N (1-based)"),
    ("search X", "search title/artist/album for X"),
    ("shuffle", "shuffle playlist"),
    ("sort title", "sort by title"),
    ("sort artist", "sort by artist then title"),
    ("sort dur", "sort by duration ascending"),
    ("play N", "play track N (simulated)"),
    ("save [f]", "save playlist to file"),
    ("load [f]", "load playlist from file and append"),
    ("clear", "clear playlist (destructive)"),
    ("help", "show this help"),
    ("quit", "save and exit"),
)


def format_track_line(index: int, track: Track) -> str:
    """Return ``index) title / artist / album / m:ss`` for a zero-based index."""

    return (
        f"{index + 1:>3}) {track.title} / {track.artist} / {track.album} / "
        f"{track.format_duration()}"
    )


@final
class TrackDisplay:
    """Handles playlist output in the CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_tracks(self, tracks: Iterable[tuple[int, Track]]) -> int:
        """Print one line per track and return how many were printed."""

        count = 0
        for index, track in tracks:
            self.console.print(Text(format_track_line(index, track)))
            count += 1
        return count

    def show_playlist(self, tracks: Iterable[tuple[int, Track]]) -> None:
        """Print the whole playlist or a notice when it is empty."""

        if self.show_tracks(tracks) == 0:
            self.show_message("Playlist is empty.", style="yellow")

    def show_search_results(self, term: str, matches: Iterable[tuple[int, Track]]) -> None:
        """Print search hits or a no-match notice."""

        if self.show_tracks(matches) == 0:
            self.show_message(f'No matches for "{term}".', style="yellow")

    def show_help(self) -> None:
        """Print the command summary table."""

        table = Table(
            title="Commands",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Command", style="bold")
        table.add_column("Description")
        for command, description in HELP_ROWS:
            table.add_row(command, description)
        self.console.print(table)

    def show_message(self, message: str, *, style: str | None = None) -> None:
        """Print a status line without interpreting markup."""

        self.console.print(Text(message, style=style or ""))

    def show_error(self, message: str) -> None:
        self.show_message(message, style="red")
