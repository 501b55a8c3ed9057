"""src/tracklist/ui/cli/commands/executor.py
What: Apply parsed prompt commands to the playlist session.
Why: Keep validation messages and output wiring out of the prompt loop.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from rich.console import Console

from tracklist.application.services import PlaylistService
from tracklist.features.playlist import PersistenceResult, SortKey, UnknownSortKeyError
from tracklist.ui.cli.display import PlaybackDisplay, TrackDisplay

from .models import (
    AddCommand,
    ClearCommand,
    Command,
    HelpCommand,
    ListCommand,
    LoadCommand,
    PlayCommand,
    QuitCommand,
    RemoveCommand,
    SaveCommand,
    SearchCommand,
    ShuffleCommand,
    SortCommand,
    parse_index_token,
)

InputReader = Callable[[str], str]


@final
class CommandExecutor:
    """Dispatch one command at a time against a playlist session."""

    def __init__(
        self,
        service: PlaylistService,
        *,
        play_demo_limit: int,
        autosave_on_quit: bool = True,
        console: Console | None = None,
        read_input: InputReader | None = None,
        track_display: TrackDisplay | None = None,
        playback_display: PlaybackDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            service: Session whose playlist the commands act on.
            play_demo_limit: Longest simulated playback in seconds.
            autosave_on_quit: Whether ``quit`` writes the default file.
            console: Console shared by the displays.
            read_input: Reads one line after printing a prompt; raises
                ``EOFError`` when input ends.
            track_display: Override for listing output.
            playback_display: Override for the play simulation.
        """
        self.service = service
        self.play_demo_limit = play_demo_limit
        self.autosave_on_quit = autosave_on_quit
        self.console = console or Console()
        self._read_input: InputReader = read_input or self.console.input
        self.track_display = track_display or TrackDisplay(self.console)
        self.playback_display = playback_display or PlaybackDisplay(self.console)

    def execute(self, command: Command) -> bool:
        """Run ``command`` and return whether the session should continue."""

        match command:
            case AddCommand():
                self._add()
            case ListCommand():
                self.track_display.show_playlist(self.service.tracks())
            case RemoveCommand(index_token=token):
                self._remove(token)
            case SearchCommand(term=term):
                self._search(term)
            case ShuffleCommand():
                self.track_display.show_message(self.service.shuffle().message)
            case SortCommand(key=key):
                self._sort(key)
            case PlayCommand(index_token=token):
                self._play(token)
            case SaveCommand(path=path):
                self._report_save(self.service.save(self._to_path(path)))
            case LoadCommand(path=path):
                self._report_load(self.service.load(self._to_path(path)))
            case ClearCommand():
                self.track_display.show_message(self.service.clear().message)
            case HelpCommand():
                self.track_display.show_help()
            case QuitCommand():
                self._quit()
                return False
        return True

    def _prompt(self, label: str) -> str | None:
        try:
            return self._read_input(label).strip()
        except EOFError:
            return None

    def _add(self) -> None:
        title = self._prompt("Title: ")
        artist = self._prompt("Artist: ")
        album = self._prompt("Album: ")
        duration = self._prompt("Duration (seconds): ")

        result = self.service.add_track(title, artist, album, duration)
        if result.success:
            self.track_display.show_message(result.message, style="green")
        else:
            self.track_display.show_error(result.message)

    def _remove(self, token: str | None) -> None:
        size = len(self.service)
        index = parse_index_token(token, size)
        if index is None:
            self.track_display.show_error(f"Invalid index. Usage: remove N (1..{size})")
            return
        self.track_display.show_message(self.service.remove_track(index).message)

    def _search(self, term: str | None) -> None:
        if term is None:
            term = self._prompt("Search term: ") or ""
        self.track_display.show_search_results(term, self.service.search(term))

    def _sort(self, key: str | None) -> None:
        if key is None:
            self.track_display.show_message("sort title | artist | dur")
            return
        try:
            sort_key = SortKey.from_user_input(key)
        except UnknownSortKeyError as exc:
            self.track_display.show_error(str(exc))
            return
        self.track_display.show_message(self.service.sort(sort_key).message)

    def _play(self, token: str | None) -> None:
        size = len(self.service)
        index = parse_index_token(token, size)
        track = self.service.track_at(index) if index is not None else None
        if track is None:
            self.track_display.show_error(f"Invalid index. Usage: play N (1..{size})")
            return
        _ = self.playback_display.play(track, self.play_demo_limit)

    def _quit(self) -> None:
        if not self.autosave_on_quit:
            self.track_display.show_message("Bye!")
            return
        result = self.service.save()
        if result.success:
            self.track_display.show_message(f"Saved to {result.path}. Bye!")
        else:
            self.track_display.show_error(f"Failed to save to {result.path}. Bye!")

    def _report_save(self, result: PersistenceResult) -> None:
        if result.success:
            self.track_display.show_message(f"Saved to {result.path}", style="green")
        else:
            self.track_display.show_error(f"Failed to save to {result.path}")

    def _report_load(self, result: PersistenceResult) -> None:
        if result.success:
            self.track_display.show_message(
                f"Loaded (appended) {result.track_count} tracks from {result.path}",
                style="green",
            )
        else:
            self.track_display.show_error(f"Failed to load from {result.path}")

    @staticmethod
    def _to_path(raw: str | None) -> Path | None:
        return Path(raw).expanduser() if raw else None


__all__ = ["CommandExecutor", "InputReader"]
