"""
Error taxonomy for script generation.

Client errors describe a request that can never succeed as asked (unknown
tool, nothing to download) and map to "not found" at the HTTP boundary.
Everything else is reported as a server failure with its message intact.
"""

from datetime import datetime
from typing import Optional


class DxshError(Exception):
    """Base class for all script generation failures."""


class ClientError(DxshError):
    """The requested script cannot be produced."""


class ServerError(DxshError):
    """The release provider misbehaved or could not be reached."""


class UnsupportedTool(ClientError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' is not supported")


class NoMatchingAsset(ClientError):
    def __init__(self, tool_name: str, asset_filter: str):
        self.tool_name = tool_name
        self.asset_filter = asset_filter
        super().__init__(
            f"No compatible binary found for {tool_name}. "
            f"No asset matching filter '{asset_filter}'"
        )


class InvalidAssetsInput(DxshError):
    pass


class InvalidFilter(DxshError):
    pass


class InvalidRepositoryFormat(DxshError):
    pass


class ReleaseNotFound(ServerError):
    def __init__(self, repository: str):
        self.repository = repository
        super().__init__(f"Repository {repository} not found or has no releases")


class RateLimited(ServerError):
    def __init__(self, reset_at: Optional[datetime] = None):
        self.reset_at = reset_at
        if reset_at is not None:
            reset = reset_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        else:
            reset = "unknown"
        super().__init__(f"GitHub API rate limit exceeded. Resets at {reset}")


class ProviderError(ServerError):
    def __init__(self, status: int, status_text: str):
        self.status = status
        self.status_text = status_text
        super().__init__(f"GitHub API request failed with status {status}: {status_text}")


class InvalidResponseShape(ServerError):
    def __init__(self, message: str = "Invalid release data received from GitHub API"):
        super().__init__(message)


class TransportError(ServerError):
    pass
