"""Utility helpers shared across the gateway."""

from .data_helpers import format_timestamp, parse_timestamp, utc_now
from .logging_config import get_logger, setup_logging

__all__ = [
    "format_timestamp",
    "parse_timestamp",
    "utc_now",
    "get_logger",
    "setup_logging",
]
