"""Shell detection and command emission."""

from setenv.shell.detection import detect_shell
from setenv.shell.emitter import cd, set_env, set_env_list, split_env
from setenv.shell.paths import PathListError, join_path_list, split_path_list

__all__ = [
    "PathListError",
    "cd",
    "detect_shell",
    "join_path_list",
    "set_env",
    "set_env_list",
    "split_env",
    "split_path_list",
]
