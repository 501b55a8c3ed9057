"""Playback simulation display for the CLI."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import final

from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn, TimeElapsedColumn
from rich.text import Text

from tracklist.features.playlist import Track


@final
class PlaybackDisplay:
    """Announce a track and wait out a short demo of it."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.console = console or Console()
        self._sleep = sleep

    def play(self, track: Track, demo_limit: int) -> int:
        """Simulate playback and return the number of seconds waited.

        Args:
            track: Track to announce.
            demo_limit: Longest wait in seconds, regardless of track length.
        """
        demo_seconds = max(min(track.duration, demo_limit), 0)
        self.console.print(
            Text(
                f"Now playing: {track.title} — {track.artist} "
                f"[{track.format_duration()}]  (demo {demo_seconds} sec)",
                style="bold green",
            )
        )
        if demo_seconds == 0:
            return 0

        with Progress(
            TextColumn("[cyan]Playing"),
            BarColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("play", total=demo_seconds)
            for _ in range(demo_seconds):
                self._sleep(1)
                progress.update(task_id, advance=1)
        return demo_seconds
