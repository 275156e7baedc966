"""
Goal: One exception family for everything that can go wrong in a quickswitch run.
The CLI catches QuickswitchError, prints the message and exits non-zero.
"""


class QuickswitchError(Exception):
    """Base class for run-ending failures."""


class IPCQueryError(QuickswitchError):
    """Connecting to the window manager or querying its tree/workspaces failed."""


class IPCCommandError(QuickswitchError):
    """Sending the final command failed. Reported, never fatal."""


class TokenizeError(QuickswitchError):
    """The picker invocation string could not be split into a program and args."""


class EmptyCommandError(TokenizeError):
    """The picker invocation string is empty or only separators."""


class PickerSpawnError(QuickswitchError):
    """The picker program could not be started."""


class PickerIOError(QuickswitchError):
    """Writing candidates to, or reading the choice from, the picker failed."""
