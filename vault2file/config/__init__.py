"""Run configuration."""

from .settings import RunConfig

__all__ = ["RunConfig"]
