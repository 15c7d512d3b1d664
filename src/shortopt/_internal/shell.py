"""Quoting of words for the shells the shortopt command can target."""
import enum

from shortopt import errors


class ShellKind(enum.Enum):
    """Families of shells sharing quoting conventions."""
    BOURNE = 'bourne'
    C = 'c'
    FISH = 'fish'
    RC = 'rc'


SHELL_NAMES = {
    'ash': ShellKind.BOURNE,
    'bash': ShellKind.BOURNE,
    'dash': ShellKind.BOURNE,
    'ksh': ShellKind.BOURNE,
    'mksh': ShellKind.BOURNE,
    'sh': ShellKind.BOURNE,
    'zsh': ShellKind.BOURNE,
    'csh': ShellKind.C,
    'tcsh': ShellKind.C,
    'fish': ShellKind.FISH,
    'plan9': ShellKind.RC,
    'rc': ShellKind.RC,
}


def shell_kind(name: str) -> ShellKind:
    """Find the quoting conventions of a shell.

    :param str name: shell name such as ``bash`` or ``tcsh``

    :returns: the matching `ShellKind`
    :rtype: `ShellKind`

    :raises .ConfigurationError: if the shell is not known

    """
    key = name.strip().lower()
    try:
        return SHELL_NAMES[key]
    except KeyError:
        raise errors.ConfigurationError('unknown shell type: {0}'.format(key))


def quote(word: str, kind: ShellKind) -> str:
    """Quote ``word`` so that ``kind`` reads it back as a single word."""
    if kind is ShellKind.BOURNE:
        # most shells (sh, ksh, zsh, bash, (d)ash, etc.) are in this category
        return "'" + word.replace("'", "'\\''") + "'"
    if kind is ShellKind.C:
        return "'" + "".join("'\\" + c + "'" if c in " '" else c for c in word) + "'"
    if kind is ShellKind.FISH:
        return "'" + "".join("\\" + c if c in "'\\" else c for c in word) + "'"
    if kind is ShellKind.RC:
        return "'" + word.replace("'", "''") + "'"
    raise errors.ConfigurationError('no quoting rules for {0!r}'.format(kind))
