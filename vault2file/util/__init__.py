"""Shared utilities."""

from .env_file import EnvFile, quote, render_line, unquote

__all__ = [
    "EnvFile",
    "quote",
    "render_line",
    "unquote",
]
