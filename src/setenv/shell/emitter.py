"""Emit shell commands for the parent shell to evaluate.

Everything written here is meant to be passed to ``eval`` (or the cmd.exe
equivalent) by a wrapper in the parent shell, so each operation writes
exactly one command line and nothing else goes to stdout.

Paths and values are not escaped: a single quote in a value breaks the
POSIX forms, a double quote breaks the Windows ``cd`` form.
"""

import logging
import os
import sys
from collections.abc import Iterable
from typing import TextIO

from setenv.models import ShellKind
from setenv.shell.environment import Environ, get_env, is_windows, to_text
from setenv.shell.paths import join_path_list, split_path_list

log = logging.getLogger(__name__)

CD_FORMATS: dict[ShellKind, str] = {
    ShellKind.WINDOWS: 'cd /d "{path}"',
    ShellKind.BASH: "cd '{path}';",
    ShellKind.TCSH: "cd '{path}';",
    ShellKind.ZSH: "cd '{path}';",
    ShellKind.KSH: "cd '{path}';",
}

SET_ENV_FORMATS: dict[ShellKind, str] = {
    ShellKind.WINDOWS: "set {name}={value}",
    ShellKind.BASH: "export {name}='{value}';",
    ShellKind.TCSH: "setenv {name} '{value}';",
    ShellKind.ZSH: "export {name}='{value}';",
    ShellKind.KSH: "export {name}='{value}';",
}


def _fit_encoding(line: str, encoding: str) -> str:
    """Replace characters the output encoding cannot represent."""
    return line.encode(encoding, errors="replace").decode(encoding)


def _emit(line: str, stream: TextIO | None) -> None:
    out = stream if stream is not None else sys.stdout
    # Piped stdout may be ASCII or a Windows ANSI code page.
    encoding = getattr(out, "encoding", None) or "utf-8"
    line = _fit_encoding(line, encoding)
    log.debug("emit %r", line)
    print(line, file=out, flush=True)


def cd(shell: ShellKind, path: str | bytes | os.PathLike, stream: TextIO | None = None) -> None:
    """Write a command that changes the parent shell's working directory."""
    _emit(CD_FORMATS[shell].format(path=to_text(path)), stream)


def set_env(
    shell: ShellKind,
    name: str | bytes,
    value: str | bytes | os.PathLike,
    stream: TextIO | None = None,
) -> None:
    """Write a command that sets an environment variable in the parent shell."""
    line = SET_ENV_FORMATS[shell].format(name=to_text(name), value=to_text(value))
    _emit(line, stream)


def set_env_list(
    shell: ShellKind,
    name: str | bytes,
    segments: Iterable[str | bytes | os.PathLike],
    stream: TextIO | None = None,
) -> None:
    """Join segments into a path list and set it as an environment variable.

    Raises PathListError, without writing anything, if a segment cannot be
    represented in the target's path-list syntax.
    """
    value = join_path_list(segments, windows=shell is ShellKind.WINDOWS)
    set_env(shell, name, value, stream)


def split_env(name: str, environ: Environ | None = None, *, windows: bool | None = None) -> list[str]:
    """Return the segments of a path-list environment variable.

    An unset variable yields an empty list.
    """
    if windows is None:
        windows = is_windows()
    value = get_env(name, environ)
    if value is None:
        log.debug("%s is unset", name)
        return []
    return split_path_list(value, windows=windows)
