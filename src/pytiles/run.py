"""Console-script entry point for pytiles.

Wraps ``pytiles.__main__.main`` so an interrupted demo exits with the
conventional 130 status instead of a traceback.
"""

import logging
import sys

logger = logging.getLogger("pytiles")

EXIT_INTERRUPTED = 130


def main(argv: list[str] | None = None) -> int:
    """Entry point for pytiles command.

    Args:
        argv: Command line arguments (sys.argv[1:] if None)

    Returns:
        Exit code
    """
    from pytiles.__main__ import main as _main

    try:
        return _main(argv)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
