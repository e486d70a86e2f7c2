"""
Release metadata analyzers.
"""

from .github_analyzer import GitHubReleaseResolver, find_asset

__all__ = ["GitHubReleaseResolver", "find_asset"]
