"""
Summary: Immutable track value type and its validated creation path.
Why: Keep field defaults and the non-empty title rule in one place.
"""

from __future__ import annotations

from dataclasses import dataclass

from tracklist.config.settings import UNKNOWN_FIELD

from .duration import parse_duration


class TrackValidationError(ValueError):
    """Raised when track fields fail validation on the creation path."""


@dataclass(slots=True, frozen=True)
class Track:
    """One entry of a playlist.

    Direct construction performs no validation so store mechanics can be
    exercised with arbitrary values; use :meth:`create` for user input.
    """

    title: str
    artist: str = UNKNOWN_FIELD
    album: str = UNKNOWN_FIELD
    duration: int = 0

    @classmethod
    def create(
        cls,
        title: str | None,
        artist: str | None = None,
        album: str | None = None,
        duration: int | str | None = 0,
    ) -> "Track":
        """Build a track from user-supplied values.

        Args:
            title: Track title; must be non-empty after trimming.
            artist: Artist name; blank or missing becomes ``"Unknown"``.
            album: Album name; blank or missing becomes ``"Unknown"``.
            duration: Seconds as an integer or text. Text is parsed
                permissively and negative values are clamped to zero.

        Returns:
            Track: The validated track.

        Raises:
            TrackValidationError: If the title is empty.
        """
        cleaned_title = (title or "").strip()
        if not cleaned_title:
            raise TrackValidationError("Title required.")

        return cls(
            title=cleaned_title,
            artist=_or_unknown(artist),
            album=_or_unknown(album),
            duration=_coerce_duration(duration),
        )

    def format_duration(self) -> str:
        """Return the duration as ``m:ss``."""

        minutes, seconds = divmod(self.duration, 60)
        return f"{minutes}:{seconds:02d}"


def _or_unknown(value: str | None) -> str:
    if value is None:
        return UNKNOWN_FIELD
    trimmed = value.strip()
    return trimmed or UNKNOWN_FIELD


def _coerce_duration(value: int | str | None) -> int:
    if value is None:
        return 0
    if isinstance(value, str):
        value = parse_duration(value)
    return max(int(value), 0)


__all__ = ["Track", "TrackValidationError"]
