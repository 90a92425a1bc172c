"""Shell detection from the process environment."""

import logging

from setenv.models import ShellKind
from setenv.shell.environment import Environ, get_env, is_windows

log = logging.getLogger(__name__)

# Checked in order against $SHELL; unmatched values fall back to bash.
_SHELL_SUFFIXES: tuple[tuple[str, ShellKind], ...] = (
    ("/bash", ShellKind.BASH),
    ("/ksh", ShellKind.KSH),
    ("/zsh", ShellKind.ZSH),
    ("/tcsh", ShellKind.TCSH),
)


def _classify_login_shell(value: str | None) -> ShellKind:
    """Return the shell kind for a $SHELL value."""
    if value is None:
        log.debug("SHELL is unset, defaulting to bash")
        return ShellKind.BASH
    for suffix, kind in _SHELL_SUFFIXES:
        if value.endswith(suffix):
            log.debug("SHELL=%r matched %s", value, suffix)
            return kind
    log.debug("SHELL=%r not recognized, defaulting to bash", value)
    return ShellKind.BASH


def detect_shell(environ: Environ | None = None, *, windows: bool | None = None) -> ShellKind:
    """Detect the shell this process was launched from.

    Variables set by the running shell itself (BASH, ZSH_NAME, tcsh's
    lowercase ``shell``) take priority over the login shell in SHELL.
    Never fails: inconclusive detection returns ShellKind.BASH.
    """
    if windows is None:
        windows = is_windows()
    if windows:
        log.debug("windows platform, using cmd syntax")
        return ShellKind.WINDOWS

    bash = get_env("BASH", environ)
    if bash is not None and bash.endswith("/bash"):
        log.debug("BASH=%r, detected bash", bash)
        return ShellKind.BASH

    zsh_name = get_env("ZSH_NAME", environ)
    if zsh_name == "zsh":
        log.debug("ZSH_NAME=%r, detected zsh", zsh_name)
        return ShellKind.ZSH

    # tcsh exports both `shell` and `SHELL`; the lowercase one names the
    # running shell rather than the login shell.
    tcsh = get_env("shell", environ)
    if tcsh is not None and tcsh.endswith("/tcsh"):
        log.debug("shell=%r, detected tcsh", tcsh)
        return ShellKind.TCSH

    return _classify_login_shell(get_env("SHELL", environ))
