"""The option scanner."""
import logging
from typing import Iterator
from typing import NamedTuple
from typing import Optional
from typing import Sequence
from typing import Union

from shortopt import errors
from shortopt.optspec import Arity
from shortopt.optspec import OptionSpec

logger = logging.getLogger(__name__)


class Opt(NamedTuple):
    """A single option found on the command line.

    ``argument`` is ``None`` when the option takes no argument, or when
    it takes an optional argument and none was attached to it.
    """
    option: str
    argument: Optional[str] = None


Outcome = Union[Opt, errors.OptionError]


class Parser:
    """Scans an argument vector for options, one at a time.

    Options are produced in command line order by `advance`, which also
    makes `Parser` an iterator::

        parser = Parser(['prog', '-a', '-b', 'foo', 'bar'], 'ab:')
        for outcome in parser:
            if isinstance(outcome, errors.OptionError):
                ...
        positional = parser.remaining()  # ['bar']

    Scanning stops at the first argument that does not start with
    ``-``, at an argument that is exactly ``-``, or after an argument
    that is exactly ``--``. Once stopped, `index` points at the first
    positional argument.

    For compatibility with `sys.argv`, valid options are expected to
    begin at the second element of ``args``, so ``index`` defaults to
    ``1``. The parser never modifies ``args``.

    Converting the operating system's argument strings into `str` is the
    caller's responsibility.

    :ivar args: The argument vector being scanned.
    :ivar spec: The compiled `.OptionSpec`.

    """

    def __init__(self, args: Sequence[str], optstring: Union[str, OptionSpec],
                 index: int = 1) -> None:
        self.args = args
        self.spec = optstring if isinstance(optstring, OptionSpec) else OptionSpec(optstring)
        self._index = index
        # offset into args[index] while unpacking a cluster such as -xyz;
        # must be reset to 0 whenever _index changes
        self._point = 0
        self._finished = False

    @property
    def index(self) -> int:
        """Position of the next element of ``args`` to be scanned.

        After `advance` has returned ``None``, this is the index of the
        first positional argument (possibly ``len(args)``).
        """
        return self._index

    @property
    def finished(self) -> bool:
        """Whether the end of the options has been reached."""
        return self._finished

    def set_index(self, value: int) -> None:
        """Move the cursor to ``args[value]``.

        This also resumes a parser that has already reached the end of
        the options.
        """
        self._index = value
        self._point = 0
        self._finished = False

    def incr_index(self) -> None:
        """Move the cursor to the next element of ``args``."""
        self._index += 1
        self._point = 0

    def remaining(self) -> list[str]:
        """Elements of ``args`` from the current index onward."""
        return list(self.args[self._index:])

    def advance(self) -> Optional[Outcome]:
        """Scan the next option.

        :returns: the next `Opt`; an `.UnknownOption` or
            `.MissingArgument` error if the next option could not be
            scanned; or ``None`` if there are no more options. Errors are
            returned, not raised, and the cursor has already moved past
            the offending character so scanning can continue.
        :rtype: `Opt` or `.OptionError` or `None`

        """
        if self._finished:
            return None

        if self._point == 0:
            if self._index >= len(self.args):
                return self._finish()
            token = self.args[self._index]
            if token == '--':
                self.incr_index()
                return self._finish()
            if token == '-' or not token.startswith('-'):
                return self._finish()
            # skip the leading '-'
            self._point = 1

        token = self.args[self._index]
        char = token[self._point]
        self._point += 1
        arity = self.spec.arity_of(char)

        if arity is None:
            self._roll_over(token)
            logger.debug('Unknown option %r in %r', char, token)
            return errors.UnknownOption(char)

        if arity is Arity.NO_ARGUMENT:
            self._roll_over(token)
            return Opt(char)

        # an option taking an argument always ends the cluster
        if self._point < len(token):
            argument = token[self._point:]
            self.incr_index()
            return Opt(char, argument)

        self.incr_index()
        if arity is Arity.OPTIONAL_ARGUMENT:
            return Opt(char)

        if self._index >= len(self.args):
            logger.debug('Option %r is missing its argument', char)
            return errors.MissingArgument(char)
        argument = self.args[self._index]
        self.incr_index()
        return Opt(char, argument)

    def _roll_over(self, token: str) -> None:
        if self._point >= len(token):
            self.incr_index()

    def _finish(self) -> None:
        self._finished = True
        logger.debug('End of options at index %d', self._index)

    def __iter__(self) -> Iterator[Outcome]:
        return self

    def __next__(self) -> Outcome:
        outcome = self.advance()
        if outcome is None:
            raise StopIteration
        return outcome

    def __repr__(self) -> str:
        return '{0}(args={1!r}, spec={2!r}, index={3})'.format(
            self.__class__.__name__, self.args, self.spec, self._index)


def getopt(args: Sequence[str], optstring: Union[str, OptionSpec],
           index: int = 1) -> tuple[list[Opt], list[str]]:
    """Scan all options in ``args``.

    :param args: argument vector, conventionally ``sys.argv``
    :param optstring: option specification
    :param int index: position of the first element to scan

    :returns: the options found and the remaining positional arguments
    :rtype: tuple

    :raises .OptionError: on the first unknown option or missing argument

    """
    parser = Parser(args, optstring, index)
    opts = []
    for outcome in parser:
        if isinstance(outcome, errors.OptionError):
            raise outcome
        opts.append(outcome)
    return opts, parser.remaining()
