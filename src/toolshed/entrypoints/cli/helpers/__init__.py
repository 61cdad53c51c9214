"""CLI helpers for toolshed.

Message emitters that write to stderr with emoji→ASCII fallbacks, and Click
callbacks for parsing option values.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .mode_parser import parse_mode

__all__ = ["error", "parse_log_level", "parse_mode", "success", "warn"]
