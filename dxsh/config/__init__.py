"""
Application configuration.
"""

from .settings import Settings, GitHubConfig, ScriptConfig, ServerConfig, LoggingConfig

__all__ = ["Settings", "GitHubConfig", "ScriptConfig", "ServerConfig", "LoggingConfig"]
