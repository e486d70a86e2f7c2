"""
Utility modules for the install script generator.
"""

from .logging import setup_root_logger
from .shell import escape_double_quoted, quote_word

__all__ = ["setup_root_logger", "escape_double_quoted", "quote_word"]
