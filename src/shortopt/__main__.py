"""Runs the shortopt command."""
import logging
import sys

from shortopt._internal import main as internal_main

logger = logging.getLogger(__name__)


def main() -> None:
    """Runs shortopt and calls sys.exit with its exit status."""
    status = internal_main.main()
    if status:
        logger.debug('Exiting with status %d', status)
    sys.exit(status)


if __name__ == '__main__':
    main()
