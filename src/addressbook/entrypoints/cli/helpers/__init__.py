"""CLI helpers for ADDRESSBOOK.

Utilities used by the command-line interface: logger-level option parsing and
message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_logger_levels
from .messages import error, success, warn

__all__ = ["parse_logger_levels", "error", "success", "warn"]
