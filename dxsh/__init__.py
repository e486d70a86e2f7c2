"""
dxsh - generates bash install scripts for developer tools from their latest GitHub release.
"""

__version__ = "0.1.0"
