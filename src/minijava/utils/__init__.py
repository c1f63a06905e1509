"""Utility modules for MiniJava.

Provides:
- logger: get_logger for logging
"""

from minijava.utils.logger import get_logger

__all__ = ["get_logger"]
