"""Logging setup for command-line entry points."""

from .logging import configure_logging

__all__ = ["configure_logging"]
