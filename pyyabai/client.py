"""Blocking wrappers around `pyyabai.ipc`, for scripts without an event loop.

Each function runs its coroutine with `asyncio.run`, so they can't be used
from inside a running loop: await the `pyyabai.ipc` functions there instead.
"""

import asyncio

from . import ipc
from .commands import Command
from .models import DisplayInfo, SpaceInfo, WindowInfo

__all__ = [
    "query_displays",
    "query_spaces",
    "query_windows",
    "send",
    "send_command",
]


def send(message: str, socket_path: str | None = None) -> str | None:
    """Send free-form text to yabai and return its reply."""
    return asyncio.run(ipc.send(message, socket_path=socket_path))


def send_command(command: Command | str, socket_path: str | None = None) -> str | None:
    """Send a `Command` to yabai and return its reply."""
    return asyncio.run(ipc.send_command(command, socket_path=socket_path))


def query_displays(socket_path: str | None = None) -> list[DisplayInfo]:
    """Return every display."""
    return asyncio.run(ipc.query_displays(socket_path=socket_path))


def query_spaces(display: int | None = None, socket_path: str | None = None) -> list[SpaceInfo]:
    """Return the spaces, of every display or of the given one."""
    return asyncio.run(ipc.query_spaces(display, socket_path=socket_path))


def query_windows(space: int | None = None, display: int | None = None, socket_path: str | None = None) -> list[WindowInfo]:
    """Return the windows, optionally restricted to a space or to a display."""
    return asyncio.run(ipc.query_windows(space, display, socket_path=socket_path))
