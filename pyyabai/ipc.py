"""Interact with yabai using its message socket.

Every call opens its own connection, sends one message and reads the reply
until yabai closes the socket. Nothing is retried.
"""

__all__ = [
    "encode_message",
    "query_displays",
    "query_spaces",
    "query_windows",
    "send",
    "send_command",
]

import asyncio
import contextlib
import json
import struct
from logging import Logger
from typing import TypeVar

from .commands import Command, _check_index, format_command
from .constants import FAILURE_MESSAGE, LENGTH_PREFIX_FORMAT, SOCKET_PATH
from .logging_setup import get_logger
from .models import (
    DisplayInfo,
    JsonRecord,
    SpaceInfo,
    WindowInfo,
    YabaiCommandError,
    YabaiConnectionError,
    YabaiDecodeError,
    YabaiIOError,
)

RecordT = TypeVar("RecordT", bound=JsonRecord)

log: Logger = get_logger("pyyabai.ipc")


def encode_message(message: str) -> bytes:
    """Frame `message` the way yabai reads it.

    Arguments are NUL terminated, followed by an extra NUL, and the whole
    payload is preceded by its size.
    """
    payload = ("\0".join(message.split()) + "\0\0").encode("utf-8")
    return struct.pack(LENGTH_PREFIX_FORMAT, len(payload)) + payload


def _decode(data: bytes, message: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"reply to {message!r} is not valid UTF-8"
        raise YabaiDecodeError(msg) from e


async def _exchange(payload: bytes, socket_path: str, logger: Logger) -> bytes:
    """Send `payload` on a new connection and return everything yabai answered."""
    try:
        reader, writer = await asyncio.open_unix_connection(socket_path)
    except FileNotFoundError as e:
        logger.critical("yabai socket not found at %s! is it running ?", socket_path)
        msg = f"yabai socket not found: {socket_path}"
        raise YabaiConnectionError(msg) from e
    except OSError as e:
        logger.critical("Cannot connect to yabai at %s: %s", socket_path, e)
        msg = f"cannot connect to {socket_path}: {e}"
        raise YabaiConnectionError(msg) from e

    try:
        writer.write(payload)
        await writer.drain()
        return await reader.read()
    except OSError as e:
        logger.error("ipc connection problem: %s", e)
        msg = f"connection to {socket_path} failed: {e}"
        raise YabaiIOError(msg) from e
    finally:
        writer.close()
        with contextlib.suppress(OSError):
            await writer.wait_closed()


async def send(message: str, socket_path: str | None = None, logger: Logger | None = None) -> str | None:
    """Send free-form text to yabai, as `yabai -m <message>` would.

    Args:
        message: space separated arguments, e.g. "space --focus 2"
        socket_path: socket to use instead of the default one
        logger: logger to use instead of the module's

    Returns:
        The reply, or None when yabai answered nothing

    Raises:
        YabaiConnectionError: the socket can't be reached
        YabaiIOError: the connection broke during the exchange
        YabaiDecodeError: the reply is not UTF-8
        YabaiCommandError: yabai refused the message
    """
    logger = logger or log
    message = message.strip()
    logger.debug(message)
    data = await _exchange(encode_message(message), socket_path or SOCKET_PATH, logger)
    if not data:
        return None
    if data[0] == FAILURE_MESSAGE:
        error = _decode(data[1:], message)
        logger.debug("FAILED %s: %s", message, error.rstrip())
        raise YabaiCommandError(message, error)
    return _decode(data, message)


async def send_command(command: Command | str, socket_path: str | None = None, logger: Logger | None = None) -> str | None:
    """Send a `Command` (or free-form text) to yabai.

    See `send` for the return value and errors.
    """
    return await send(format_command(command), socket_path=socket_path, logger=logger)


def _selector(**kw: int | None) -> list[str]:
    """Return the query filter arguments, at most one filter is accepted."""
    given = [(name, value) for name, value in kw.items() if value is not None]
    if len(given) > 1:
        msg = f"only one filter is allowed, got {', '.join(name for name, _ in given)}"
        raise ValueError(msg)
    for name, value in given:
        _check_index(value, f"{name} filter")
    return [arg for name, value in given for arg in (f"--{name}", str(value))]


async def _query(domain: str, record: type[RecordT], selector: list[str], socket_path: str | None) -> list[RecordT]:
    message = " ".join(["query", f"--{domain}", *selector])
    reply = await send(message, socket_path=socket_path)
    if reply is None:
        msg = f"No result from yabai {message}"
        raise YabaiDecodeError(msg)
    try:
        data = json.loads(reply)
    except json.JSONDecodeError as e:
        msg = f"invalid JSON in reply to {message}: {e}"
        raise YabaiDecodeError(msg) from e
    if not isinstance(data, list):
        msg = f"expected a JSON array in reply to {message}, got {type(data).__name__}"
        raise YabaiDecodeError(msg)
    return [record.from_json(item) for item in data]


async def query_displays(socket_path: str | None = None) -> list[DisplayInfo]:
    """Return every display."""
    return await _query("displays", DisplayInfo, [], socket_path)


async def query_spaces(display: int | None = None, socket_path: str | None = None) -> list[SpaceInfo]:
    """Return the spaces, of every display or of the given one."""
    return await _query("spaces", SpaceInfo, _selector(display=display), socket_path)


async def query_windows(space: int | None = None, display: int | None = None, socket_path: str | None = None) -> list[WindowInfo]:
    """Return the windows, optionally restricted to a space or to a display.

    Raises:
        ValueError: both `space` and `display` were given, or a filter is not a non-negative integer
    """
    return await _query("windows", WindowInfo, _selector(space=space, display=display), socket_path)


def init() -> None:
    """Rebind the module logger once `init_logger` installed its handlers."""
    global log  # noqa: PLW0603
    log = get_logger("pyyabai.ipc")
