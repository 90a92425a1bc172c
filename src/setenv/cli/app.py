"""Top-level CLI router."""

import argparse
import logging
import sys

from pydantic import ValidationError

from setenv import __version__
from setenv.cli import commands
from setenv.cli.shared import resolve_shell
from setenv.config import load_config
from setenv.models import ShellKind

WRAPPER_EPILOG = """\
stdout is meant to be evaluated by the calling shell, for example:
  bash/zsh/ksh:  se() { eval "$(setenv "$@")"; }
  tcsh:          alias se 'eval `setenv \\!*`'
"""


class StderrArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints help to stderr, keeping stdout for commands."""

    def print_help(self, file=None) -> None:
        super().print_help(file if file is not None else sys.stderr)

    def print_usage(self, file=None) -> None:
        super().print_usage(file if file is not None else sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = StderrArgumentParser(
        prog="setenv",
        description="Print commands that change the calling shell's directory or environment",
        epilog=WRAPPER_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="store_true", help="Show version and exit")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--shell",
        choices=[kind.value for kind in ShellKind],
        help="Emit syntax for this shell instead of detecting it",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")

    cd_parser = subparsers.add_parser("cd", help="Change the shell's working directory")
    cd_parser.add_argument("path", help="Directory to change to")
    cd_parser.set_defaults(func=commands.run_cd)

    set_parser = subparsers.add_parser("set", help="Set an environment variable")
    set_parser.add_argument("name", help="Variable name")
    set_parser.add_argument("value", help="Variable value")
    set_parser.set_defaults(func=commands.run_set)

    set_list_parser = subparsers.add_parser(
        "set-list", help="Set an environment variable to a path list"
    )
    set_list_parser.add_argument("name", help="Variable name")
    set_list_parser.add_argument("segments", nargs="+", metavar="segment", help="Path list entry")
    set_list_parser.set_defaults(func=commands.run_set_list)

    add_path_parser = subparsers.add_parser(
        "add-path", help="Add directories to a path-list variable such as PATH"
    )
    add_path_parser.add_argument("name", help="Variable name")
    add_path_parser.add_argument("dirs", nargs="+", metavar="dir", help="Directory to add")
    add_path_parser.add_argument(
        "--append",
        action="store_true",
        help="Add after the existing entries instead of before them",
    )
    add_path_parser.set_defaults(func=commands.run_add_path)

    detect_parser = subparsers.add_parser(
        "detect", help="Report the detected shell on stderr"
    )
    detect_parser.set_defaults(func=commands.run_detect)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, resolve the shell and run one subcommand."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"{parser.prog} {__version__}", file=sys.stderr)
        return 0
    if args.command is None:
        parser.print_usage()
        print(f"{parser.prog}: error: a command is required", file=sys.stderr)
        return 2

    try:
        config = load_config()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 2

    # stdout is evaluated by the parent shell; logs must never go there.
    logging.basicConfig(
        level=logging.DEBUG if args.debug or config.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    shell = resolve_shell(args.shell, config)
    return args.func(args, shell)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
