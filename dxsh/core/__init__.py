"""
Core modules for the install script generator.
"""

from .errors import ClientError, DxshError, ServerError
from .registry import is_supported, list_supported_names, lookup

__all__ = [
    "ClientError",
    "DxshError",
    "ServerError",
    "is_supported",
    "list_supported_names",
    "lookup",
]
