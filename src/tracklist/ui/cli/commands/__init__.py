"""Command parsing and execution package for the CLI."""

from tracklist.ui.cli.commands.executor import CommandExecutor
from tracklist.ui.cli.commands.models import (
    Command,
    CommandParseError,
    parse_command,
    parse_index_token,
)

__all__ = [
    "Command",
    "CommandExecutor",
    "CommandParseError",
    "parse_command",
    "parse_index_token",
]
