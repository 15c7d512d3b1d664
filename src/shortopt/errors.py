"""shortopt errors."""
import enum
from typing import Any


class Error(Exception):
    """Generic shortopt error."""


def quote_char(char: str) -> str:
    """Render an option character in single quotes, escaping a quote."""
    if char == "'":
        return "'\\''"
    return repr(char)


class ErrorKind(enum.Enum):
    """What kinds of errors `.Parser` can report."""
    MISSING_ARGUMENT = 'missing argument'
    UNKNOWN_OPTION = 'unknown option'


class OptionError(Error):
    """Error encountered while scanning an argument vector.

    `.Parser.advance` returns instances of this class as values rather
    than raising them, so that the caller decides whether to abort or to
    keep scanning.

    :ivar str culprit: The option character that caused the error.

    """
    kind: ErrorKind

    def __init__(self, culprit: str, *args: Any) -> None:
        super().__init__(culprit, *args)
        self.culprit = culprit

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.culprit == other.culprit

    def __hash__(self) -> int:
        return hash((self.__class__, self.culprit))

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(self.__class__.__name__, self.culprit)


class MissingArgument(OptionError):
    """An option requiring an argument was found at the end of the vector."""
    kind = ErrorKind.MISSING_ARGUMENT

    def __str__(self) -> str:
        return 'option requires an argument -- {0}'.format(quote_char(self.culprit))


class UnknownOption(OptionError):
    """An option character not present in the optstring was found."""
    kind = ErrorKind.UNKNOWN_OPTION

    def __str__(self) -> str:
        return 'unknown option -- {0}'.format(quote_char(self.culprit))


class ConfigurationError(Error):
    """Configuration sanity error."""
