"""Shell variant model."""

from enum import Enum


class ShellKind(str, Enum):
    """Shell family that decides the syntax of emitted commands."""

    WINDOWS = "windows"
    BASH = "bash"
    TCSH = "tcsh"
    ZSH = "zsh"
    KSH = "ksh"
