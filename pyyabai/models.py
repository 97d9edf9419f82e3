"""Records returned by yabai queries, error types and exit codes."""

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, Self, get_args, get_origin

__all__ = [
    "DisplayInfo",
    "ExitCode",
    "Frame",
    "SpaceInfo",
    "WindowInfo",
    "YabaiCommandError",
    "YabaiConnectionError",
    "YabaiDecodeError",
    "YabaiError",
    "YabaiIOError",
]


class YabaiError(Exception):
    """Base class for every error raised while talking to yabai."""


class YabaiConnectionError(YabaiError):
    """The socket could not be reached (yabai not running, wrong path, permissions)."""


class YabaiIOError(YabaiError):
    """The connection broke while the message was exchanged."""


class YabaiDecodeError(YabaiError):
    """The reply is not valid UTF-8, or not the JSON document that was expected."""


class YabaiCommandError(YabaiError):
    """yabai rejected the command and sent back an error message."""

    def __init__(self, command: str, message: str) -> None:
        super().__init__(command, message)
        self.command = command
        self.message = message

    def __str__(self) -> str:
        return f"CommandError: {self.command!r} caused {self.message!r}"


class ExitCode(IntEnum):
    """Exit codes of the `yabai-msg` command."""

    SUCCESS = 0
    USAGE_ERROR = 1  # No message provided
    CONNECTION_ERROR = 3  # Cannot connect to yabai
    COMMAND_ERROR = 4  # yabai refused the command, or the exchange failed


def _convert(value: Any, annotation: Any, where: str) -> Any:  # noqa: ANN401
    """Check `value` against a field annotation, converting nested records."""
    origin = get_origin(annotation)
    if origin is list:
        if not isinstance(value, list):
            msg = f"{where}: expected a list, got {type(value).__name__}"
            raise YabaiDecodeError(msg)
        (item_type,) = get_args(annotation)
        return [_convert(item, item_type, f"{where}[{i}]") for i, item in enumerate(value)]
    if isinstance(annotation, type) and issubclass(annotation, JsonRecord):
        return annotation.from_json(value)
    if annotation is float:
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"{where}: expected a number, got {value!r}"
            raise YabaiDecodeError(msg)
        return float(value)
    if annotation is int and isinstance(value, bool):
        msg = f"{where}: expected an integer, got {value!r}"
        raise YabaiDecodeError(msg)
    if not isinstance(value, annotation):
        msg = f"{where}: expected {annotation.__name__}, got {value!r}"
        raise YabaiDecodeError(msg)
    return value


class JsonRecord:
    """Mixin building a dataclass from one of yabai's JSON objects.

    yabai uses kebab-case keys: the `first_window` field is read from "first-window".
    Keys without a matching field are ignored.
    """

    __slots__ = ()

    @classmethod
    def from_json(cls, data: Any) -> Self:  # noqa: ANN401
        """Build the record from decoded JSON.

        Raises:
            YabaiDecodeError: `data` is not an object, misses a key or holds a value of the wrong type
        """
        name = cls.__name__
        if not isinstance(data, dict):
            msg = f"{name}: expected a JSON object, got {type(data).__name__}"
            raise YabaiDecodeError(msg)
        values = {}
        for fld in fields(cls):  # type: ignore[arg-type]
            key = fld.name.replace("_", "-")
            if key not in data:
                msg = f"{name}: missing key {key!r}"
                raise YabaiDecodeError(msg)
            values[fld.name] = _convert(data[key], fld.type, f"{name}.{key}")
        return cls(**values)


@dataclass(frozen=True)
class Frame(JsonRecord):
    """Position and size of a window or display, in points."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class DisplayInfo(JsonRecord):
    """A physical display, as returned by `query --displays`."""

    id: int
    uuid: str
    index: int
    frame: Frame
    spaces: list[int]


@dataclass(frozen=True)
class SpaceInfo(JsonRecord):
    """A mission-control space, as returned by `query --spaces`."""

    id: int
    uuid: str
    index: int
    label: str
    type: str
    display: int
    windows: list[int]
    first_window: int
    last_window: int
    has_focus: bool
    is_visible: bool
    is_native_fullscreen: bool


@dataclass(frozen=True)
class WindowInfo(JsonRecord):  # pylint: disable=too-many-instance-attributes
    """A window, as returned by `query --windows`."""

    id: int
    pid: int
    app: str
    title: str
    frame: Frame
    role: str
    subrole: str
    display: int
    space: int
    level: int
    opacity: float
    split_type: str
    stack_index: int
    can_move: bool
    can_resize: bool
    has_focus: bool
    has_shadow: bool
    has_border: bool
    has_parent_zoom: bool
    has_fullscreen_zoom: bool
    is_native_fullscreen: bool
    is_visible: bool
    is_minimized: bool
    is_hidden: bool
    is_floating: bool
    is_sticky: bool
    is_topmost: bool
    is_grabbed: bool
