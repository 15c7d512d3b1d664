"""shortopt command constants."""
import logging
import os

CLI_DEFAULTS: dict = dict(
    config_files=[
        "/etc/shortopt/cli.ini",
        # http://freedesktop.org/wiki/Software/xdg-user-dirs/
        os.path.join(os.environ.get("XDG_CONFIG_HOME", "~/.config"),
                     "shortopt", "cli.ini"),
    ],
    shell="sh",
    verbose_count=0,
)
"""Defaults for CLI flags and `.CliConfig` attributes."""

PROGRAM_NAME = "shortopt"
"""Name used when the program name cannot be determined from argv."""

OPTSTRING = "hvc:n:s:"
"""Options understood by the shortopt command itself."""

DEFAULT_LOGGING_LEVEL = logging.WARNING
"""Logging level used on the terminal when no -v flag is given."""

EXIT_OK = 0
"""Exit status on success."""

EXIT_EXTERNAL_ERROR = 1
"""Exit status when the arguments being checked fail to parse."""

EXIT_INTERNAL_ERROR = 2
"""Exit status when the shortopt command itself is misused."""
