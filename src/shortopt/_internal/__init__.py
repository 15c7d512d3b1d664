"""
This module contains the internal implementation of the shortopt command.
The code in this module should not be used by third parties.
"""
