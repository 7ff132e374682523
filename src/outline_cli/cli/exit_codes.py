"""
Exit codes returned by the outline command.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes, one per class of failure."""

    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    USAGE_ERROR = 3
    AUTH_ERROR = 4
    CONNECTION_ERROR = 5
    NOT_FOUND = 6
    FILE_EXISTS = 7
    CANCELLED = 130
