"""shortopt command configuration."""
import logging
import os
from typing import Iterable
from typing import Optional

import configobj

from shortopt import errors
from shortopt._internal import constants
from shortopt._internal import shell

logger = logging.getLogger(__name__)


class CliConfig:
    """Settings of the shortopt command.

    Values start from `.constants.CLI_DEFAULTS`, may be overridden by
    configuration files, and finally by command line flags.

    :ivar str name: Name under which errors in the checked arguments
        are reported.
    :ivar str shell: Name of the shell whose quoting rules are used.
    :ivar int verbose_count: How much more verbose than the default
        terminal logging should be.

    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.shell: str = constants.CLI_DEFAULTS["shell"]
        self.verbose_count: int = constants.CLI_DEFAULTS["verbose_count"]

    @property
    def shell_kind(self) -> shell.ShellKind:
        """Quoting conventions for `shell`.

        :raises .ConfigurationError: if `shell` is unknown

        """
        return shell.shell_kind(self.shell)

    def load_defaults(self, paths: Optional[Iterable[str]] = None) -> None:
        """Read the default configuration files that exist."""
        if paths is None:
            paths = constants.CLI_DEFAULTS["config_files"]
        for path in paths:
            path = os.path.expanduser(path)
            if os.path.isfile(path):
                self.load_file(path)

    def load_file(self, path: str) -> None:
        """Update settings from a ``key = value`` configuration file.

        :param str path: path to the configuration file

        :raises .ConfigurationError: if the file is missing or invalid

        """
        if not os.path.isfile(path):
            raise errors.ConfigurationError(
                "configuration file {0} does not exist".format(path))
        try:
            config = configobj.ConfigObj(
                path, encoding='utf-8', default_encoding='utf-8', file_error=True,
                list_values=False)
        except (configobj.ConfigObjError, OSError) as error:
            raise errors.ConfigurationError(
                "error parsing configuration file {0}: {1}".format(path, error))
        logger.debug("Reading configuration from %s", path)

        if "name" in config:
            self.name = config["name"]
        if "shell" in config:
            self.shell = config["shell"]
        if "verbose" in config:
            try:
                verbose_count = config.as_int("verbose")
            except (TypeError, ValueError):
                raise errors.ConfigurationError(
                    "{0}: verbose must be an integer, not {1!r}".format(
                        path, config["verbose"]))
            if verbose_count < 0:
                raise errors.ConfigurationError(
                    "{0}: verbose must not be negative: {1}".format(
                        path, verbose_count))
            self.verbose_count = verbose_count

    def __repr__(self) -> str:
        return '{0}(name={1!r}, shell={2!r}, verbose_count={3!r})'.format(
            self.__class__.__name__, self.name, self.shell, self.verbose_count)
