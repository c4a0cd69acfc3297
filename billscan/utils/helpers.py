"""
Helper Utilities Module.

Small generic functions shared by the engine and the CLI.
"""

from datetime import date
from pathlib import Path
from typing import Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it and its parents if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def get_file_extension(filepath: Union[str, Path]) -> str:
    """
    Extract the lowercase file extension, including the dot.

    Example:
        >>> get_file_extension("receipt.TXT")
        '.txt'
        >>> get_file_extension("noextension")
        ''
    """
    return Path(filepath).suffix.lower()


def format_display_date(value: date, format_str: str = "%d/%m/%Y") -> str:
    """
    Format a date for display in titles and form fields.

    Example:
        >>> format_display_date(date(2026, 1, 12))
        '12/01/2026'
    """
    return value.strftime(format_str)
