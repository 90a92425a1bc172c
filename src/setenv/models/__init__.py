"""Model package for setenv."""

from setenv.models.setenv_config import SetenvConfig
from setenv.models.shell_kind import ShellKind

__all__ = [
    "SetenvConfig",
    "ShellKind",
]
