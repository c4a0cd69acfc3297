"""
Utility Module for billscan.

Common utilities used across the other modules:
    - Logging configuration
    - Exception hierarchy
    - Small helpers (directories, extensions, date display)
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, get_file_extension, format_display_date

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'get_file_extension',
    'format_display_date'
]
