"""Logging configuration module for saudi-id."""

from saudi_id.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
