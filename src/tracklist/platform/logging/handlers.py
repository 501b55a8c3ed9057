"""Rich console handler for tracklist logs.

Where: platform/logging/handlers.py
What: Render structured playlist events with icons, colours and compact paths.
Why: Keep handler formatting out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PlaylistRichHandler(RichHandler):
    """Rich handler that renders ``playlist_event`` records as one styled line."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "playlist.load.complete": ("📂", "green"),
        "playlist.load.error": ("❌", "red"),
        "playlist.save.complete": ("💾", "green"),
        "playlist.save.error": ("❌", "red"),
        "playlist.track.added": ("➕", "cyan"),
        "playlist.track.removed": ("➖", "magenta"),
        "playlist.sorted": ("↕️", "blue"),
        "playlist.shuffled": ("🔀", "blue"),
        "playlist.cleared": ("🧹", "yellow"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "playlist.load.complete": "Loaded",
        "playlist.load.error": "Load failed",
        "playlist.save.complete": "Saved",
        "playlist.save.error": "Save failed",
        "playlist.track.added": "Added",
        "playlist.track.removed": "Removed",
        "playlist.sorted": "Sorted",
        "playlist.shuffled": "Shuffled",
        "playlist.cleared": "Cleared",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["tracebacks_show_locals"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Formatted path with ellipsis truncation of leading segments.
        """
        display_path = self._to_pure_path(path)

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor if anchor.endswith(separator) else anchor + separator
        if truncated:
            display_string = "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_playlist_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured playlist events with dedicated styling."""

        event = getattr(record, "playlist_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        title = getattr(record, "title", None)
        artist = getattr(record, "artist", None)
        label = " — ".join(part for part in [title, artist] if part)
        if label:
            _ = body.append(f" {label}")

        details: list[str] = []
        position = getattr(record, "position", None)
        if isinstance(position, int):
            details.append(f"#{position}")
        sort_key = getattr(record, "sort_key", None)
        if sort_key:
            details.append(f"by {sort_key}")
        track_count = getattr(record, "track_count", None)
        if isinstance(track_count, int):
            details.append(f"tracks={track_count}")
        skipped = getattr(record, "skipped_lines", None)
        if isinstance(skipped, int) and skipped > 0:
            details.append(f"skipped={skipped}")
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        error = getattr(record, "error_message", None)
        if error:
            _ = body.append(f" ({error})")

        path = getattr(record, "path", None)
        if path:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(path)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for playlist events."""

        playlist_text = self._render_playlist_message(record)
        if playlist_text is not None:
            return playlist_text

        return super().render_message(record, message)


__all__ = ["PlaylistRichHandler"]
