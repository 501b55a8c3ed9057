"""tracklist - manage an ordered personal track list from the command line."""

__version__ = "0.1.0"
