"""POSIX-conventional exit codes raised by greeter commands.

Interrupts (130) and broken pipes (141) are mapped by ``lib_cli_exit_tools``
at the ``main()`` boundary and have no member here.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by the greeter CLI.

    Values follow errno and sysexits.h conventions:

    * 0-1: generic success / failure
    * 22: EINVAL
    * 78: EX_CONFIG (sysexits.h)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
