"""Configuration for setenv."""

import logging
import os
from collections.abc import Mapping

from setenv.models import SetenvConfig

log = logging.getLogger(__name__)

SHELL_ENV_KEY = "SETENV_SHELL"
DEBUG_ENV_KEY = "SETENV_DEBUG"


def load_config(environ: Mapping[str, str] | None = None) -> SetenvConfig:
    """Build configuration from SETENV_* environment variables.

    Raises pydantic.ValidationError for values that do not parse.
    """
    source = os.environ if environ is None else environ
    values: dict[str, str] = {}
    shell = source.get(SHELL_ENV_KEY, "").strip().lower()
    if shell:
        values["shell"] = shell
    debug = source.get(DEBUG_ENV_KEY, "").strip()
    if debug:
        values["debug"] = debug
    config = SetenvConfig(**values)
    log.debug("config=%s", config.model_dump())
    return config
