"""Option specification strings."""
import enum
import logging
from typing import Iterator
from typing import Optional

logger = logging.getLogger(__name__)


class Arity(enum.Enum):
    """Whether an option takes an argument."""
    NO_ARGUMENT = 0
    REQUIRED_ARGUMENT = 1
    OPTIONAL_ARGUMENT = 2


# number of colons following an option character, capped at 2
_ARITY_BY_COLONS = {
    0: Arity.NO_ARGUMENT,
    1: Arity.REQUIRED_ARGUMENT,
    2: Arity.OPTIONAL_ARGUMENT,
}


class OptionSpec:
    """Compiled option specification.

    ``optstring`` is a string of recognised option characters. A
    character followed by a colon (``:``) takes a required argument, one
    followed by two or more colons takes an optional argument.

    A colon that does not follow an option character, such as the
    leading colon some getopt implementations use to request silent
    error reporting, defines nothing. If a character appears more than
    once, its last occurrence wins.

    :ivar str optstring: The specification this table was built from.

    """

    def __init__(self, optstring: str) -> None:
        self.optstring = optstring
        self._table = self._compile(optstring)

    @staticmethod
    def _compile(optstring: str) -> dict[str, Arity]:
        table: dict[str, Arity] = {}
        length = len(optstring)
        i = 0
        while i < length:
            char = optstring[i]
            i += 1
            if char == ':':
                continue
            colons = 0
            while i < length and optstring[i] == ':':
                colons += 1
                i += 1
            table[char] = _ARITY_BY_COLONS[min(colons, 2)]
        logger.debug('Compiled optstring %r into %d options', optstring, len(table))
        return table

    def arity_of(self, char: str) -> Optional[Arity]:
        """Look up an option character.

        :param str char: option character

        :returns: the `.Arity` of ``char``, or ``None`` if ``char`` is
            not a recognised option
        :rtype: `.Arity` or `None`

        """
        return self._table.get(char)

    def __contains__(self, char: object) -> bool:
        return char in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(self.__class__.__name__, self.optstring)
