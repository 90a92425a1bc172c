"""Configuration model for setenv."""

from pydantic import BaseModel

from setenv.models.shell_kind import ShellKind


class SetenvConfig(BaseModel):
    """Runtime configuration for setenv."""

    shell: ShellKind | None = None
    debug: bool = False
