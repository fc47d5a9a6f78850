"""Utility modules for nmprune.

This module exports commonly used utility functions.
"""

from nmprune.utils.formatting import (
    console,
    create_matches_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from nmprune.utils.log import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "create_matches_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
