"""Shared CLI helpers."""

import logging

from setenv.models import SetenvConfig, ShellKind
from setenv.shell import detect_shell

log = logging.getLogger(__name__)


def resolve_shell(override: str | None, config: SetenvConfig) -> ShellKind:
    """Return the shell to emit for: --shell, then SETENV_SHELL, then detection."""
    if override:
        log.debug("shell from --shell: %s", override)
        return ShellKind(override)
    if config.shell is not None:
        log.debug("shell from SETENV_SHELL: %s", config.shell.value)
        return config.shell
    return detect_shell()
