"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tracklist import __version__
from tracklist.config.config import Config
from tracklist.platform.logging import DEFAULT_LOG_FILE, setup_logger
from tracklist.ui.cli.args.options import CLIArgs, SessionArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tracklist",
            description=(
                "tracklist - manage a personal track list at an interactive prompt.\n"
                "Type 'help' at the prompt for the available commands."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--file",
            type=str,
            help="Playlist file used by save, load and quit (defaults to config or playlist.csv)",
            metavar="PLAYLIST_FILE",
        )
        _ = parser.add_argument(
            "--no-autoload",
            action="store_true",
            help="Start with an empty playlist instead of loading the playlist file",
        )
        _ = parser.add_argument(
            "--no-autosave",
            action="store_true",
            help="Do not save the playlist file on quit",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed playlist events",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress log output except errors",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SessionArgs: Processed command line arguments merged with config.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        playlist_file = (
            Path(parsed_args.file).expanduser()
            if parsed_args.file
            else configuration.resolved_playlist_file
        )

        return SessionArgs(
            playlist_file=playlist_file,
            autoload=configuration.autoload and not parsed_args.no_autoload,
            autosave_on_quit=configuration.autosave_on_quit and not parsed_args.no_autosave,
            play_demo_limit=configuration.play_demo_limit,
            verbose=is_verbose,
            quiet=is_quiet,
        )
