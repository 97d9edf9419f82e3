import pytest

from pyyabai.commands import (
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

EXPECTED = [
    (FocusSpace(FocusSpaceOption.NEXT), "space --focus next"),
    (FocusSpace(FocusSpaceOption.PREV), "space --focus prev"),
    (FocusSpace(FocusSpaceOption.FIRST), "space --focus first"),
    (FocusSpace(FocusSpaceOption.LAST), "space --focus last"),
    (FocusSpace(FocusSpaceOption.RECENT), "space --focus recent"),
    (FocusSpace(3), "space --focus 3"),
    (RotateSpace(SpaceRotation.ROTATE_90), "space --rotate 90"),
    (RotateSpace(SpaceRotation.ROTATE_180), "space --rotate 180"),
    (RotateSpace(SpaceRotation.ROTATE_270), "space --rotate 270"),
    (BalanceSpace(), "space --balance"),
    (MoveActiveWindowToSpace(2), "window --space 2"),
    (FocusWindow(1402), "window --focus 1402"),
    (FocusWindowDirection(Direction.NORTH), "window --focus north"),
    (FocusWindowDirection(Direction.WEST), "window --focus west"),
    (SwapWindowDirection(Direction.SOUTH), "window --swap south"),
    (WarpWindowDirection(Direction.EAST), "window --warp east"),
    (ToggleWindowFloating(), "window --toggle float"),
    (ToggleZoomFullscreen(), "window --toggle zoom-fullscreen"),
]


@pytest.mark.parametrize(("command", "expected"), EXPECTED, ids=[e[1] for e in EXPECTED])
def test_format_command(command, expected):
    assert format_command(command) == expected
    assert str(command) == expected


def test_every_variant_is_covered():
    covered = {type(command) for command, _ in EXPECTED}
    variants = set()
    pending = list(Command.__subclasses__())
    while pending:
        cls = pending.pop()
        pending.extend(cls.__subclasses__())
        if not cls.__name__.startswith("_"):
            variants.add(cls)
    assert variants == covered


@pytest.mark.parametrize("command", [c for c, _ in EXPECTED])
def test_format_is_stable(command):
    first = format_command(command)
    assert first
    assert all(format_command(command) == first for _ in range(5))


def test_args():
    assert FocusSpace(FocusSpaceOption.RECENT).args() == ("space", "--focus", "recent")
    assert BalanceSpace().args() == ("space", "--balance")


def test_raw_text_passes_through():
    assert format_command("  config layout bsp \n") == "config layout bsp"


def test_commands_are_values():
    assert FocusWindow(12) == FocusWindow(12)
    assert FocusWindowDirection(Direction.NORTH) != SwapWindowDirection(Direction.NORTH)
    assert len({BalanceSpace(), BalanceSpace(), FocusSpace(1)}) == 2
    with pytest.raises(AttributeError):
        FocusWindow(12).window = 13  # type: ignore[misc]


@pytest.mark.parametrize(
    "factory",
    [
        lambda: FocusSpace(-1),
        lambda: FocusSpace("2"),
        lambda: FocusWindow(True),
        lambda: FocusWindow(1.5),
        lambda: MoveActiveWindowToSpace(-3),
        lambda: RotateSpace(45),
        lambda: RotateSpace("45"),
        lambda: FocusWindowDirection("up and away"),
        lambda: SwapWindowDirection("up"),
        lambda: WarpWindowDirection(None),
    ],
)
def test_invalid_selectors(factory):
    with pytest.raises(ValueError):
        factory()


def test_options_are_strings():
    assert FocusSpaceOption("recent") is FocusSpaceOption.RECENT
    assert SpaceRotation("180") is SpaceRotation.ROTATE_180
    assert f"{Direction.EAST}" == "east"


def test_enum_selectors_from_values():
    assert RotateSpace("180") == RotateSpace(SpaceRotation.ROTATE_180)
    assert RotateSpace("180").rotation is SpaceRotation.ROTATE_180
    assert str(FocusWindowDirection("west")) == "window --focus west"
    assert FocusWindowDirection("west").direction is Direction.WEST
