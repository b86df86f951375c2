"""Logging support shared by the translator stages and the CLI."""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
