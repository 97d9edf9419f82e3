"""Typed yabai commands and their wire representation.

Every supported operation is a small frozen dataclass deriving from `Command`.
A command renders to the exact argument string yabai's own CLI would send,
for instance::

    >>> format_command(FocusSpace(FocusSpaceOption.RECENT))
    'space --focus recent'

Operations not modelled here can still be sent as plain strings, see `format_command`.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

__all__ = [
    "BalanceSpace",
    "Command",
    "Direction",
    "FocusSpace",
    "FocusSpaceOption",
    "FocusWindow",
    "FocusWindowDirection",
    "MoveActiveWindowToSpace",
    "RotateSpace",
    "SpaceRotation",
    "SwapWindowDirection",
    "ToggleWindowFloating",
    "ToggleZoomFullscreen",
    "WarpWindowDirection",
    "format_command",
]


class FocusSpaceOption(StrEnum):
    """Named selectors accepted by `space --focus`."""

    NEXT = "next"
    PREV = "prev"
    FIRST = "first"
    LAST = "last"
    RECENT = "recent"


class SpaceRotation(StrEnum):
    """Angles accepted by `space --rotate`."""

    ROTATE_90 = "90"
    ROTATE_180 = "180"
    ROTATE_270 = "270"


class Direction(StrEnum):
    """Cardinal directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


def _check_index(value: object, what: str) -> None:
    """Reject anything but a non-negative integer identifier."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{what} must be an integer, got {value!r}"
        raise ValueError(msg)
    if value < 0:
        msg = f"{what} must not be negative, got {value}"
        raise ValueError(msg)


class Command:
    """Base class for commands sent to yabai.

    Subclasses set `domain` and `verb` and implement `selector`.
    """

    __slots__ = ()

    domain: ClassVar[str]
    verb: ClassVar[str]

    def selector(self) -> str:
        """Return the argument following the verb."""
        raise NotImplementedError

    def args(self) -> tuple[str, ...]:
        """Return the command as a sequence of arguments."""
        return (self.domain, f"--{self.verb}", self.selector())

    def __str__(self) -> str:
        return " ".join(self.args())


@dataclass(frozen=True)
class FocusSpace(Command):
    """Focus a space, by name (next, recent...) or by mission-control index."""

    option: FocusSpaceOption | int

    domain: ClassVar[str] = "space"
    verb: ClassVar[str] = "focus"

    def __post_init__(self) -> None:
        if not isinstance(self.option, FocusSpaceOption):
            _check_index(self.option, "space index")

    def selector(self) -> str:
        return str(self.option)


@dataclass(frozen=True)
class RotateSpace(Command):
    """Rotate the layout tree of the focused space."""

    rotation: SpaceRotation

    domain: ClassVar[str] = "space"
    verb: ClassVar[str] = "rotate"

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotation", SpaceRotation(self.rotation))

    def selector(self) -> str:
        return str(self.rotation)


@dataclass(frozen=True)
class BalanceSpace(Command):
    """Give every window of the focused space the same share of the area."""

    domain: ClassVar[str] = "space"
    verb: ClassVar[str] = "balance"

    def args(self) -> tuple[str, ...]:
        return (self.domain, f"--{self.verb}")


@dataclass(frozen=True)
class MoveActiveWindowToSpace(Command):
    """Send the focused window to the space with the given index."""

    space: int

    domain: ClassVar[str] = "window"
    verb: ClassVar[str] = "space"

    def __post_init__(self) -> None:
        _check_index(self.space, "space index")

    def selector(self) -> str:
        return str(self.space)


@dataclass(frozen=True)
class FocusWindow(Command):
    """Focus the window with the given id."""

    window: int

    domain: ClassVar[str] = "window"
    verb: ClassVar[str] = "focus"

    def __post_init__(self) -> None:
        _check_index(self.window, "window id")

    def selector(self) -> str:
        return str(self.window)


@dataclass(frozen=True)
class _DirectionalWindowCommand(Command):
    direction: Direction

    domain: ClassVar[str] = "window"

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", Direction(self.direction))

    def selector(self) -> str:
        return str(self.direction)


@dataclass(frozen=True)
class FocusWindowDirection(_DirectionalWindowCommand):
    """Focus the neighbour window in `direction`."""

    verb: ClassVar[str] = "focus"


@dataclass(frozen=True)
class SwapWindowDirection(_DirectionalWindowCommand):
    """Swap the focused window with its neighbour in `direction`."""

    verb: ClassVar[str] = "swap"


@dataclass(frozen=True)
class WarpWindowDirection(_DirectionalWindowCommand):
    """Re-insert the focused window next to its neighbour in `direction`."""

    verb: ClassVar[str] = "warp"


@dataclass(frozen=True)
class ToggleWindowFloating(Command):
    """Toggle floating on the focused window."""

    domain: ClassVar[str] = "window"
    verb: ClassVar[str] = "toggle"

    def selector(self) -> str:
        return "float"


@dataclass(frozen=True)
class ToggleZoomFullscreen(Command):
    """Toggle the fullscreen zoom of the focused window."""

    domain: ClassVar[str] = "window"
    verb: ClassVar[str] = "toggle"

    def selector(self) -> str:
        return "zoom-fullscreen"


def format_command(command: Command | str) -> str:
    """Return the text sent to yabai for `command`.

    The domain comes first, as in yabai -m: `FocusSpace(FocusSpaceOption.RECENT)`
    gives "space --focus recent", never "--focus space recent".

    Args:
        command: a `Command`, or free-form text in yabai's CLI syntax
            (e.g. "config layout bsp") for operations without a dedicated type

    Returns:
        The space separated arguments, without surrounding whitespace
    """
    if isinstance(command, Command):
        return str(command)
    return command.strip()
