"""Read-only access to environment variables."""

import os
from collections.abc import Mapping

EnvValue = str | bytes
Environ = Mapping[str, EnvValue]


def to_text(value: str | bytes | os.PathLike) -> str:
    """Return value as text, replacing anything that is not valid UTF-8."""
    value = os.fspath(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    # Non-UTF-8 environment bytes arrive as lone surrogates (PEP 383).
    try:
        return value.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")
    except UnicodeEncodeError:
        return value.encode("utf-8", errors="replace").decode("utf-8")


def get_env(name: str, environ: Environ | None = None) -> str | None:
    """Look up name in environ (default: the process environment) as text."""
    source = os.environ if environ is None else environ
    value = source.get(name)
    if value is None:
        return None
    return to_text(value)


def is_windows() -> bool:
    """Return whether this process runs on Windows, where cmd.exe syntax applies."""
    return os.name == "nt"
