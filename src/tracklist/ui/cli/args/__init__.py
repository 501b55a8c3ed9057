"""Command line argument handling package."""

from tracklist.ui.cli.args.parser import ArgumentParser
from tracklist.ui.cli.args.options import CLIArgs, SessionArgs

__all__ = ["ArgumentParser", "CLIArgs", "SessionArgs"]
