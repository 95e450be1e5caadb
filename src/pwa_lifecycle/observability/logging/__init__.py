"""Observability – structured logging helpers."""
from pwa_lifecycle.observability.logging.factory import configure_logging
from pwa_lifecycle.observability.logging.processors import get_logger
from pwa_lifecycle.observability.logging.protocol import Logger

__all__ = ["Logger", "configure_logging", "get_logger"]
