"""Subcommand implementations.

Each handler writes at most one command line to stdout and reports errors
on stderr.
"""

import argparse
import logging
import os
import sys

from setenv.models import ShellKind
from setenv.shell import PathListError, cd, set_env, set_env_list, split_env

log = logging.getLogger(__name__)


def run_cd(args: argparse.Namespace, shell: ShellKind) -> int:
    """Emit a directory change."""
    path = os.path.abspath(args.path)
    if not os.path.isdir(path):
        print(f"Error: not a directory: {path}", file=sys.stderr)
        return 1
    cd(shell, path)
    return 0


def run_set(args: argparse.Namespace, shell: ShellKind) -> int:
    """Emit an environment variable assignment."""
    set_env(shell, args.name, args.value)
    return 0


def run_set_list(args: argparse.Namespace, shell: ShellKind) -> int:
    """Emit a path-list assignment from the given segments."""
    try:
        set_env_list(shell, args.name, args.segments)
    except PathListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _merge_path_list(current: list[str], added: list[str], append: bool) -> list[str]:
    """Place added entries before or after current ones, dropping duplicates."""
    added = list(dict.fromkeys(added))
    kept = [entry for entry in current if entry not in added]
    return kept + added if append else added + kept


def run_add_path(args: argparse.Namespace, shell: ShellKind) -> int:
    """Emit a path-list assignment with directories added to the current value."""
    # The current value uses this host's separator; set_env_list joins with
    # the target shell's.
    current = split_env(args.name)
    added = [os.path.abspath(entry) for entry in args.dirs]
    merged = _merge_path_list(current, added, args.append)
    log.debug("%s: %d entries -> %d entries", args.name, len(current), len(merged))
    try:
        set_env_list(shell, args.name, merged)
    except PathListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run_detect(args: argparse.Namespace, shell: ShellKind) -> int:
    """Report the resolved shell on stderr."""
    print(shell.value, file=sys.stderr)
    return 0
