"""yabai-msg - send a message to yabai from the command line.

    yabai-msg query --windows --space 2
    yabai-msg space --focus recent
"""

import argparse
import asyncio
import sys

import shtab

from . import ipc
from .logging_setup import get_logger, init_logger
from .models import ExitCode, YabaiCommandError, YabaiConnectionError, YabaiError

__all__ = ["get_parser", "main"]


def get_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(
        prog="yabai-msg",
        description="Send a message to the yabai window manager and print its reply",
        allow_abbrev=False,
    )
    shtab.add_argument_to(parser, ["--print-completion"])
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-file",
        help="Also log to this file",
        metavar="filename",
    ).complete = shtab.FILE  # type: ignore[attr-defined]
    parser.add_argument(
        "--socket",
        help="Path of yabai's socket (defaults to /tmp/yabai_$USER.socket)",
        metavar="path",
    ).complete = shtab.FILE  # type: ignore[attr-defined]
    parser.add_argument("message", nargs=argparse.REMAINDER, help="arguments for yabai, e.g. query --displays")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command, return the exit code."""
    parser = get_parser()
    args = parser.parse_args(argv)
    init_logger(filename=args.log_file, force_debug=args.debug)
    ipc.init()
    log = get_logger("pyyabai.cli")

    if not args.message:
        parser.print_usage(sys.stderr)
        return ExitCode.USAGE_ERROR

    try:
        reply = asyncio.run(ipc.send(" ".join(args.message), socket_path=args.socket))
    except YabaiConnectionError:
        return ExitCode.CONNECTION_ERROR
    except YabaiCommandError as e:
        print(e.message.rstrip(), file=sys.stderr)
        return ExitCode.COMMAND_ERROR
    except YabaiError as e:
        log.critical("%s", e)
        return ExitCode.COMMAND_ERROR
    except KeyboardInterrupt:
        return ExitCode.COMMAND_ERROR

    if reply is not None:
        print(reply.rstrip("\n"))
    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
