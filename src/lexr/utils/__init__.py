"""Utility modules for lexr.

Provides:
- logger: get_logger for logging
"""

from lexr.utils.logger import get_logger

__all__ = ["get_logger"]
