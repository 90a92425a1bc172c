"""Join and split path lists such as PATH.

POSIX path lists are separated by ``:`` and have no escaping, so a segment
containing ``:`` cannot be represented. Windows path lists are separated by
``;``; a segment containing ``;`` is wrapped in double quotes, and a segment
containing a double quote cannot be represented.
"""

import os
from collections.abc import Iterable

from setenv.shell.environment import to_text

POSIX_SEPARATOR = ":"
WINDOWS_SEPARATOR = ";"
WINDOWS_QUOTE = '"'


class PathListError(ValueError):
    """Raised when a segment cannot be written into a path list."""

    def __init__(self, segment: str, reason: str) -> None:
        super().__init__(f"cannot add {segment!r} to a path list: {reason}")
        self.segment = segment
        self.reason = reason


def path_list_separator(windows: bool) -> str:
    """Return the path-list separator for the given platform style."""
    return WINDOWS_SEPARATOR if windows else POSIX_SEPARATOR


def _quote_windows_segment(segment: str) -> str:
    if WINDOWS_QUOTE in segment:
        raise PathListError(segment, "contains '\"'")
    if WINDOWS_SEPARATOR in segment:
        return f"{WINDOWS_QUOTE}{segment}{WINDOWS_QUOTE}"
    return segment


def join_path_list(segments: Iterable[str | bytes | os.PathLike], *, windows: bool) -> str:
    """Join segments into a single path-list value.

    Raises PathListError if any segment cannot be represented.
    """
    texts = [to_text(segment) for segment in segments]
    if windows:
        return WINDOWS_SEPARATOR.join(_quote_windows_segment(text) for text in texts)
    for text in texts:
        if POSIX_SEPARATOR in text:
            raise PathListError(text, f"contains {POSIX_SEPARATOR!r}")
    return POSIX_SEPARATOR.join(texts)


def _split_windows(value: str) -> list[str]:
    segments: list[str] = []
    current: list[str] = []
    in_quote = False
    for char in value:
        if char == WINDOWS_QUOTE:
            in_quote = not in_quote
        elif char == WINDOWS_SEPARATOR and not in_quote:
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    segments.append("".join(current))
    return segments


def split_path_list(value: str, *, windows: bool) -> list[str]:
    """Split a path-list value into its segments, preserving order.

    An empty value yields no segments. Empty segments between separators
    are kept.
    """
    if not value:
        return []
    if windows:
        return _split_windows(value)
    return value.split(POSIX_SEPARATOR)
