"""shortopt command line program.

``shortopt`` checks and normalizes the options of a shell script, in the
manner of the traditional ``getopt(1)`` utility::

    args=$(shortopt ab:c "$@") || exit
    eval "set -- $args"

"""
import logging
import os
import sys
from typing import Optional

from shortopt import configuration
from shortopt import errors
from shortopt import parser
from shortopt._internal import constants
from shortopt._internal import log
from shortopt._internal import shell

logger = logging.getLogger(__name__)

USAGE = """\
Usage: {name} [-h] [-v] [-c file] [-n name] [-s shell] optstring [args ...]
  -c file   read settings from file
  -n name   report errors as 'name' (default '{name}')
  -s shell  use quoting conventions for shell (default '{shell}')
  -v        log more details; may be repeated

  -h        display this help"""


def program_name(argv0: Optional[str], default: str = constants.PROGRAM_NAME) -> str:
    """Derive the name of the running program from ``argv[0]``."""
    if not argv0:
        return default
    stem = os.path.splitext(os.path.basename(argv0))[0]
    if not stem or stem == "__main__":
        return default
    return stem


def print_usage(name: str) -> None:
    """Print the help text."""
    print(USAGE.format(name=name, shell=constants.CLI_DEFAULTS["shell"]))


def run(name: str, args: list[str]) -> int:
    """Parse our own options, then the options of the checked arguments.

    :param str name: program name
    :param list args: full argument vector, program name included

    :returns: exit status
    :rtype: int

    :raises .ConfigurationError: on configuration problems

    """
    config = configuration.CliConfig(name)
    config_file: Optional[str] = None
    name_flag: Optional[str] = None
    shell_flag: Optional[str] = None
    verbose_count = 0

    opts = parser.Parser(args, constants.OPTSTRING)
    for outcome in opts:
        if isinstance(outcome, errors.OptionError):
            logger.error("%s: %s", name, outcome)
            return constants.EXIT_INTERNAL_ERROR
        option, argument = outcome
        if option == "h":
            print_usage(name)
            return constants.EXIT_OK
        elif option == "v":
            verbose_count += 1
        elif option == "c":
            config_file = argument
        elif option == "n":
            name_flag = argument
        elif option == "s":
            shell.shell_kind(argument)
            shell_flag = argument

    if config_file is not None:
        config.load_file(config_file)
    else:
        config.load_defaults()
    if name_flag is not None:
        config.name = name_flag
    if shell_flag is not None:
        config.shell = shell_flag
    config.verbose_count += verbose_count

    log.setup_logging(config.verbose_count)
    logger.debug("Effective configuration: %r", config)
    kind = config.shell_kind

    if opts.index >= len(args):
        logger.error("%s: missing optstring argument", name)
        return constants.EXIT_INTERNAL_ERROR
    optstring = args[opts.index]

    target = parser.Parser(args, optstring, opts.index + 1)
    words = []
    for outcome in target:
        if isinstance(outcome, errors.OptionError):
            logger.error("%s: %s", config.name, outcome)
            return constants.EXIT_EXTERNAL_ERROR
        words.append("-" + outcome.option)
        if outcome.argument is not None:
            words.append(shell.quote(outcome.argument, kind))
    words.append("--")
    words.extend(shell.quote(arg, kind) for arg in target.remaining())
    logger.debug("Positional arguments start at index %d", target.index)

    print(" ".join(words))
    return constants.EXIT_OK


def main(cli_args: Optional[list[str]] = None) -> int:
    """Run the shortopt command.

    :param cli_args: command line to shortopt, defaults to ``sys.argv[1:]``
    :type cli_args: `list` of `str`

    :returns: value for `sys.exit` about the exit status of shortopt
    :rtype: int

    """
    if cli_args is None:
        cli_args = sys.argv[1:]
    name = program_name(sys.argv[0] if sys.argv else None)

    log.setup_logging()
    try:
        return run(name, [name] + list(cli_args))
    except errors.ConfigurationError as error:
        logger.error("%s: %s", name, error)
        return constants.EXIT_INTERNAL_ERROR
