"""Core utilities shared across bento-validator."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
