"""pyyabai - a small client for the yabai tiling window manager.

Formats yabai commands, sends them over yabai's Unix socket and returns the
daemon's reply, with typed helpers for the display/space/window queries.
The transport is asyncio based; `pyyabai.client` wraps it for blocking callers.
"""

from .commands import (
    BalanceSpace,
    Command,
    Direction,
    FocusSpace,
    FocusSpaceOption,
    FocusWindow,
    FocusWindowDirection,
    MoveActiveWindowToSpace,
    RotateSpace,
    SpaceRotation,
    SwapWindowDirection,
    ToggleWindowFloating,
    ToggleZoomFullscreen,
    WarpWindowDirection,
    format_command,
)
from .ipc import query_displays, query_spaces, query_windows, send, send_command
from .models import (
    DisplayInfo,
    Frame,
    SpaceInfo,
    WindowInfo,
    YabaiCommandError,
    YabaiConnectionError,
    YabaiDecodeError,
    YabaiError,
    YabaiIOError,
)

__all__ = [
    "BalanceSpace",
    "Command",
    "Direction",
    "DisplayInfo",
    "FocusSpace",
    "FocusSpaceOption",
    "FocusWindow",
    "FocusWindowDirection",
    "Frame",
    "MoveActiveWindowToSpace",
    "RotateSpace",
    "SpaceInfo",
    "SpaceRotation",
    "SwapWindowDirection",
    "ToggleWindowFloating",
    "ToggleZoomFullscreen",
    "WarpWindowDirection",
    "WindowInfo",
    "YabaiCommandError",
    "YabaiConnectionError",
    "YabaiDecodeError",
    "YabaiError",
    "YabaiIOError",
    "format_command",
    "query_displays",
    "query_spaces",
    "query_windows",
    "send",
    "send_command",
]
