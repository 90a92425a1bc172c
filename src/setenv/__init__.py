"""Let a child process change the directory and environment of its parent shell."""

from setenv.models import ShellKind
from setenv.shell import (
    PathListError,
    cd,
    detect_shell,
    set_env,
    set_env_list,
    split_env,
)

__version__ = "0.1.0"

__all__ = [
    "PathListError",
    "ShellKind",
    "__version__",
    "cd",
    "detect_shell",
    "set_env",
    "set_env_list",
    "split_env",
]
