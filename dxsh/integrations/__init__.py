"""
Integration modules for external services.
"""

from .http_transport import ReleaseTransport, UrllibTransport

__all__ = ["ReleaseTransport", "UrllibTransport"]
