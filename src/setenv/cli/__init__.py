"""CLI package for setenv."""

from setenv.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
