"""
Utilities module for genkit-migrate.

This module contains logging setup and file helpers used
throughout the application.
"""

from genkit_migrate.utils.files import (
    ensure_dir,
    write_file_with_dir,
    copy_file,
    relative_posix,
    module_name_for,
)
from genkit_migrate.utils.logging import (
    setup_logging,
    get_logger,
)

__all__ = [
    # File helpers
    "ensure_dir",
    "write_file_with_dir",
    "copy_file",
    "relative_posix",
    "module_name_for",
    # Logging utilities
    "setup_logging",
    "get_logger",
]
