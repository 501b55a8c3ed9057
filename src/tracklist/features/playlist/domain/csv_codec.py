"""
Summary: Encode tracks to delimited lines and decode lines back to fields.
Why: Give persistence one pure, store-agnostic definition of the file format.
"""

from __future__ import annotations

from typing import Final, NamedTuple

from tracklist.config.settings import CSV_HEADER_FIELDS, CSV_QUOTE, CSV_SEPARATOR

from .duration import parse_duration
from .track import Track

HEADER_LINE: Final[str] = CSV_SEPARATOR.join(CSV_HEADER_FIELDS) + "\n"

_ESCAPED_QUOTE: Final[str] = CSV_QUOTE * 2


class DecodedRow(NamedTuple):
    """Four fields recovered from one line of a playlist file."""

    title: str
    artist: str
    album: str
    duration: int

    @property
    def is_blank(self) -> bool:
        """Return whether the row carries no title and must be skipped."""

        return self.title == ""


def encode_field(value: str) -> str:
    """Return ``value`` in its on-disk form.

    Text containing the separator or the quote character is wrapped in quotes
    with every inner quote doubled; anything else is written verbatim.
    """

    if CSV_SEPARATOR in value or CSV_QUOTE in value:
        return CSV_QUOTE + value.replace(CSV_QUOTE, _ESCAPED_QUOTE) + CSV_QUOTE
    return value


def encode_track(track: Track) -> str:
    """Return the newline-terminated line for ``track``."""

    fields = (
        encode_field(track.title),
        encode_field(track.artist),
        encode_field(track.album),
        str(track.duration),
    )
    return CSV_SEPARATOR.join(fields) + "\n"


def _read_field(line: str, start: int | None) -> tuple[str, int | None]:
    """Read one field beginning at ``start``.

    Returns the field text and the index where the next field begins, or
    ``None`` once the line is exhausted.
    """

    length = len(line)
    if start is None or start >= length:
        return "", None

    if line[start] == CSV_QUOTE:
        chars: list[str] = []
        pos = start + 1
        while pos < length:
            char = line[pos]
            if char == CSV_QUOTE:
                if line.startswith(_ESCAPED_QUOTE, pos):
                    chars.append(CSV_QUOTE)
                    pos += 2
                    continue
                pos += 1
                break
            chars.append(char)
            pos += 1
        value = "".join(chars)
        # Anything between the closing quote and the separator is dropped.
        separator_at = line.find(CSV_SEPARATOR, pos)
    else:
        separator_at = line.find(CSV_SEPARATOR, start)
        value = line[start:] if separator_at == -1 else line[start:separator_at]

    if separator_at == -1 or separator_at + 1 >= length:
        return value, None
    return value, separator_at + 1


def decode_line(line: str) -> DecodedRow:
    """Split one line into title, artist, album and duration.

    Missing fields decode as empty text and a missing or non-numeric
    duration decodes as ``0``. Decoding never fails. A trailing LF or CRLF
    terminator is dropped; a carriage return anywhere else is field text.
    """

    text = line.removesuffix("\n")
    if len(text) < len(line):
        text = text.removesuffix("\r")
    cursor: int | None = 0
    values: list[str] = []
    for _ in range(4):
        value, cursor = _read_field(text, cursor)
        values.append(value)

    title, artist, album, duration_text = values
    return DecodedRow(title, artist, album, parse_duration(duration_text))


def is_header_row(row: DecodedRow) -> bool:
    """Return whether ``row`` names the header columns rather than a track."""

    names = (row.title, row.artist, row.album)
    return all(
        value.strip().lower() == expected
        for value, expected in zip(names, CSV_HEADER_FIELDS)
    )


__all__ = [
    "HEADER_LINE",
    "DecodedRow",
    "decode_line",
    "encode_field",
    "encode_track",
    "is_header_row",
]
