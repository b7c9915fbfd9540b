"""Utility modules."""

from .logger import setup_logger, set_log_level
from .io_handler import CSVRowSource

__all__ = ["setup_logger", "set_log_level", "CSVRowSource"]
