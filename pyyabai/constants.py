"""Socket location and protocol constants."""

import getpass
import os

__all__ = [
    "FAILURE_MESSAGE",
    "LENGTH_PREFIX_FORMAT",
    "SOCKET_PATH",
    "default_socket_path",
]


def default_socket_path() -> str:
    """Return the path of yabai's message socket for the current user.

    `YABAI_SOCKET_PATH` takes precedence, otherwise yabai's own convention is used.
    """
    override = os.environ.get("YABAI_SOCKET_PATH")
    if override:
        return override
    user = os.environ.get("USER") or getpass.getuser()
    return f"/tmp/yabai_{user}.socket"  # noqa: S108


SOCKET_PATH = default_socket_path()

# First byte of a reply when yabai rejected the command
FAILURE_MESSAGE = 0x07

# Payload size sent ahead of every message: unsigned 32 bits, little endian
LENGTH_PREFIX_FORMAT = "<I"
