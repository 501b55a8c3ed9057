"""Allow ``python -m tracklist`` to launch the interactive CLI."""

import sys

from tracklist.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
