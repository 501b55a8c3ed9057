"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class SessionArgs:
    """Command line arguments for an interactive playlist session."""

    playlist_file: Path
    autoload: bool
    autosave_on_quit: bool
    play_demo_limit: int
    verbose: bool
    quiet: bool


CLIArgs = SessionArgs

__all__ = ["CLIArgs", "SessionArgs"]
