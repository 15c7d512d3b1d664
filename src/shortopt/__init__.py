"""POSIX-style short option parsing.

This module is an implementation of the option scanning rules of
`getopt()`_ as described by POSIX, without long options and without
argument permutation.

.. _`getopt()`: https://pubs.opengroup.org/onlinepubs/9699919799/functions/getopt.html

"""
from shortopt.errors import Error
from shortopt.errors import ErrorKind
from shortopt.errors import MissingArgument
from shortopt.errors import OptionError
from shortopt.errors import UnknownOption
from shortopt.optspec import Arity
from shortopt.optspec import OptionSpec
from shortopt.parser import getopt
from shortopt.parser import Opt
from shortopt.parser import Parser

# version number like 1.2.3a0, must have at least 2 parts, like 1.2
__version__ = '1.0.0'

__all__ = [
    'Arity',
    'Error',
    'ErrorKind',
    'MissingArgument',
    'Opt',
    'OptionError',
    'OptionSpec',
    'Parser',
    'UnknownOption',
    'getopt',
]
