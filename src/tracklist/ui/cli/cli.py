"""Command line interface for tracklist."""

import sys
from typing import final

from tracklist.application.services import PlaylistService
from tracklist.platform.logging import logger
from tracklist.ui.cli.args import ArgumentParser
from tracklist.ui.cli.args.options import CLIArgs
from tracklist.ui.cli.commands import CommandExecutor
from tracklist.ui.cli.repl import PlaylistRepl


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Parse arguments and run an interactive session.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Exit code of the finished session.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            service = PlaylistService(args.playlist_file)
            executor = CommandExecutor(
                service,
                play_demo_limit=args.play_demo_limit,
                autosave_on_quit=args.autosave_on_quit,
            )
            return PlaylistRepl(service, executor).run(autoload=args.autoload)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Unexpected errors exit
        through ``sys.exit`` inside ``process_command``.
    """
    return CommandProcessor.process_command()
