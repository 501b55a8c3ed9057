"""Interactive prompt loop for a playlist session."""

from __future__ import annotations

from typing import final

from tracklist.application.services import PlaylistService
from tracklist.ui.cli.commands import CommandExecutor, CommandParseError, parse_command
from tracklist.ui.cli.commands.executor import InputReader


@final
class PlaylistRepl:
    """Read prompt lines, parse them, and hand them to the executor."""

    PROMPT: str = "\n> "

    def __init__(
        self,
        service: PlaylistService,
        executor: CommandExecutor,
        *,
        read_input: InputReader | None = None,
    ) -> None:
        self.service = service
        self.executor = executor
        self._read_input: InputReader = read_input or executor.console.input

    def start(self, *, autoload: bool) -> None:
        """Load the default playlist when requested and greet the user."""

        # A missing file on first run is expected and stays silent.
        if autoload and self.service.default_path.exists():
            _ = self.service.load()
        display = self.executor.track_display
        display.show_message("Music Playlist Manager", style="bold")
        display.show_message(
            f"Type 'help' for commands. Starting with {len(self.service)} tracks loaded."
        )

    def run(self, *, autoload: bool = True) -> int:
        """Run until ``quit`` or end of input and return the exit code."""

        self.start(autoload=autoload)
        while True:
            try:
                line = self._read_input(self.PROMPT)
            except EOFError:
                return 0

            if not line.strip():
                continue

            command = parse_command(line)
            if isinstance(command, CommandParseError):
                self.executor.track_display.show_error(command.message)
                continue

            if not self.executor.execute(command):
                return 0
