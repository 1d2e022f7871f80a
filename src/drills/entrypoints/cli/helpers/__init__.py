"""CLI helpers for DRILLS.

Message emitters that write to stderr with emoji->ASCII fallbacks, and the
parser for NAME=LEVEL logger options.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]
