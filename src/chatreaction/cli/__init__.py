"""Command-line interface for chatreaction."""

from .app import app, main

__all__ = ["app", "main"]
