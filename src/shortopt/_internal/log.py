"""Logging utilities for the shortopt command.

The library modules only ever log at ``DEBUG`` level and never install
handlers. The shortopt command calls `setup_logging` once its own
options are known, which sends records to the terminal at the
verbosity requested by the user.

"""
import logging
import sys
from typing import IO
from typing import Optional

from shortopt._internal import constants

# Logging format
CLI_FMT = "%(message)s"

ANSI_SGR_RED = "\033[31m"
ANSI_SGR_RESET = "\033[0m"

logger = logging.getLogger(__name__)


def setup_logging(verbose_count: int = 0,
                  stream: Optional[IO[str]] = None) -> "ColoredStreamHandler":
    """Setup terminal logging.

    Any handler installed by a previous call is replaced.

    :param int verbose_count: number of ``-v`` flags given
    :param stream: stream to log to, defaults to `sys.stderr`

    :returns: the installed handler
    :rtype: ColoredStreamHandler

    """
    # errors are always shown
    level = min(max(constants.DEFAULT_LOGGING_LEVEL - verbose_count * 10, logging.DEBUG),
                logging.ERROR)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler, ColoredStreamHandler):
            root_logger.removeHandler(handler)
            handler.close()

    stream_handler = ColoredStreamHandler(stream)
    stream_handler.setFormatter(logging.Formatter(CLI_FMT))
    stream_handler.setLevel(level)
    root_logger.setLevel(logging.DEBUG)  # send all records to handlers
    root_logger.addHandler(stream_handler)

    logger.debug('Root logging level set at %d', level)
    return stream_handler


class ColoredStreamHandler(logging.StreamHandler):
    """Stream handler that prints warnings and errors in red on a tty.

    :ivar bool colored: whether the stream is a terminal
    :ivar int red_level: lowest level printed in red

    """
    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        super().__init__(stream)
        self.colored = (sys.stderr.isatty() if stream is None else
                        stream.isatty())
        self.red_level = logging.WARNING

    def format(self, record: logging.LogRecord) -> str:
        """Formats the string representation of record.

        :param logging.LogRecord record: Record to be formatted

        :returns: Formatted, string representation of record
        :rtype: str

        """
        out = super().format(record)
        if self.colored and record.levelno >= self.red_level:
            return ''.join((ANSI_SGR_RED, out, ANSI_SGR_RESET))
        return out
