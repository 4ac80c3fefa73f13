"""CLI package."""

from typeunify.cli.app import app, main

__all__ = ["app", "main"]
