"""CLI helpers for the bookstore.

Utilities used by the command-line interface: lazy access to the bootstrapped
application, NAME=LEVEL logger option parsing, and message emitters that write
to stderr with emoji→ASCII fallbacks.
"""

from .app import get_app
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["get_app", "parse_log_level", "warn", "success", "error"]
