"""src/tracklist/ui/cli/commands/models.py
What: Closed set of prompt commands and the parser that produces them.
Why: Keep tokenising user text apart from the code that acts on the playlist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final


@dataclass(slots=True, frozen=True)
class AddCommand:
    """Prompt for track fields and append the track."""


@dataclass(slots=True, frozen=True)
class ListCommand:
    """Print every track."""


@dataclass(slots=True, frozen=True)
class RemoveCommand:
    """Remove the track at a 1-based position."""

    index_token: str | None


@dataclass(slots=True, frozen=True)
class SearchCommand:
    """Print tracks matching a term; prompt for it when missing."""

    term: str | None


@dataclass(slots=True, frozen=True)
class ShuffleCommand:
    """Randomly reorder the playlist."""


@dataclass(slots=True, frozen=True)
class SortCommand:
    """Sort by the named key."""

    key: str | None


@dataclass(slots=True, frozen=True)
class PlayCommand:
    """Simulate playback of the track at a 1-based position."""

    index_token: str | None


@dataclass(slots=True, frozen=True)
class SaveCommand:
    """Write the playlist to a file."""

    path: str | None


@dataclass(slots=True, frozen=True)
class LoadCommand:
    """Append tracks from a file."""

    path: str | None


@dataclass(slots=True, frozen=True)
class ClearCommand:
    """Remove every track."""


@dataclass(slots=True, frozen=True)
class HelpCommand:
    """Print the command summary."""


@dataclass(slots=True, frozen=True)
class QuitCommand:
    """Save to the default file and end the session."""


Command = (
    AddCommand
    | ListCommand
    | RemoveCommand
    | SearchCommand
    | ShuffleCommand
    | SortCommand
    | PlayCommand
    | SaveCommand
    | LoadCommand
    | ClearCommand
    | HelpCommand
    | QuitCommand
)


@dataclass(slots=True, frozen=True)
class CommandParseError:
    """Returned instead of a command when the input names no known command."""

    token: str
    message: str


_INDEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")


def _first_token(rest: str) -> str | None:
    tokens = rest.split()
    return tokens[0] if tokens else None


def parse_command(line: str) -> Command | CommandParseError:
    """Parse one line of prompt input into a command.

    The command word is case-insensitive. Commands taking a single argument
    use the first whitespace-separated token after it; ``search`` takes the
    rest of the line.
    """

    parts = line.strip().split(maxsplit=1)
    if not parts:
        return CommandParseError(token="", message="Empty command.")

    word = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""

    match word.lower():
        case "add":
            return AddCommand()
        case "list":
            return ListCommand()
        case "remove":
            return RemoveCommand(index_token=_first_token(rest))
        case "search":
            return SearchCommand(term=rest or None)
        case "shuffle":
            return ShuffleCommand()
        case "sort":
            return SortCommand(key=_first_token(rest))
        case "play":
            return PlayCommand(index_token=_first_token(rest))
        case "save":
            return SaveCommand(path=_first_token(rest))
        case "load":
            return LoadCommand(path=_first_token(rest))
        case "clear":
            return ClearCommand()
        case "help":
            return HelpCommand()
        case "quit" | "exit":
            return QuitCommand()
        case _:
            return CommandParseError(
                token=word,
                message=f"Unknown command: {word}. Type 'help' for commands.",
            )


def parse_index_token(token: str | None, size: int) -> int | None:
    """Convert a 1-based position token into a zero-based index.

    Returns ``None`` unless the whole token is an integer in ``1..size``.
    """

    if token is None or _INDEX_PATTERN.fullmatch(token.strip()) is None:
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if value < 1 or value > size:
        return None
    return value - 1


__all__ = [
    "AddCommand",
    "ClearCommand",
    "Command",
    "CommandParseError",
    "HelpCommand",
    "ListCommand",
    "LoadCommand",
    "PlayCommand",
    "QuitCommand",
    "RemoveCommand",
    "SaveCommand",
    "SearchCommand",
    "ShuffleCommand",
    "SortCommand",
    "parse_command",
    "parse_index_token",
]
