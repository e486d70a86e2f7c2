"""
GitHub release resolution.
Fetches the latest release of a repository and picks assets out of it.
"""

import asyncio
import http.client
import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional, Sequence, Union

from pydantic import ValidationError

from ..config.settings import GitHubConfig
from ..core.errors import (
    InvalidAssetsInput,
    InvalidFilter,
    InvalidRepositoryFormat,
    InvalidResponseShape,
    ProviderError,
    RateLimited,
    ReleaseNotFound,
    TransportError,
)
from ..integrations.http_transport import ReleaseTransport, UrllibTransport
from ..models.release import Asset, HttpResponse, ReleaseInfo


class GitHubReleaseResolver:
    """
    Resolves the latest release of a GitHub repository.

    One request per call: no retries and no caching. Provider statuses are
    translated into the error types in ``dxsh.core.errors``.
    """

    def __init__(self,
                 config: Optional[GitHubConfig] = None,
                 transport: Optional[ReleaseTransport] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or GitHubConfig()
        self.transport = transport or UrllibTransport(timeout=self.config.timeout_seconds)

        if self.config.token:
            self.logger.debug("Using GitHub authentication (rate limit: 5000/hour)")
        else:
            self.logger.debug("No GitHub token found. Using unauthenticated requests (rate limit: 60/hour)")

    async def fetch_latest_release(self, repository: str) -> ReleaseInfo:
        """
        Fetch the latest release of a repository.

        Args:
            repository: GitHub repository in "owner/repo" format

        Returns:
            ReleaseInfo with tag name and assets in provider order
        """
        self._validate_repository(repository)

        url = f"{self.config.api_base}/repos/{repository}/releases/latest"
        self.logger.info(f"Fetching latest release for {repository}")

        try:
            response = await asyncio.to_thread(self.transport.get, url, self._headers())
        except (OSError, http.client.HTTPException) as e:
            self.logger.warning(f"Transport failure for {repository}: {e}")
            raise TransportError(f"Failed to fetch release information from GitHub: {e}") from e

        return self._parse_response(repository, response)

    def _validate_repository(self, repository: Any) -> None:
        if not repository or not isinstance(repository, str):
            raise InvalidRepositoryFormat(
                'Repository must be a non-empty string in "owner/repo" format'
            )
        owner, sep, name = repository.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise InvalidRepositoryFormat('Repository must be in "owner/repo" format')

    def _headers(self) -> dict:
        headers = {
            "Accept": self.config.accept,
            "User-Agent": self.config.user_agent,
        }
        if self.config.token:
            headers["Authorization"] = f"token {self.config.token}"
        return headers

    def _parse_response(self, repository: str, response: HttpResponse) -> ReleaseInfo:
        if response.status == 403 and response.header("X-RateLimit-Remaining") == "0":
            reset_at = self._parse_reset(response.header("X-RateLimit-Reset"))
            self.logger.warning(f"GitHub API rate limit exceeded for {repository}")
            raise RateLimited(reset_at)

        if response.status == 404:
            raise ReleaseNotFound(repository)

        if not response.ok:
            self.logger.warning(f"GitHub API returned {response.status} for {repository}")
            raise ProviderError(response.status, response.reason)

        try:
            data = json.loads(response.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidResponseShape() from e

        if not isinstance(data, dict) or not data.get("tag_name") \
                or not isinstance(data.get("assets"), list):
            raise InvalidResponseShape()

        try:
            release = ReleaseInfo(**data)
        except ValidationError as e:
            raise InvalidResponseShape() from e

        self.logger.info(f"Latest release of {repository}: {release.tag_name} "
                         f"({len(release.assets)} assets)")
        return release

    @staticmethod
    def _parse_reset(value: Optional[str]) -> Optional[datetime]:
        if not value:
            return None
        try:
            return datetime.fromtimestamp(int(value), tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None


def find_asset(assets: Sequence[Union[Asset, dict]], filter: str) -> Optional[Asset]:
    """
    Return the first asset whose name contains ``filter``.

    Matching is a case-sensitive substring test in input order. Raw GitHub
    asset dicts are accepted alongside Asset models; entries without a
    string name or download URL are skipped. A matching dict that still
    fails validation raises InvalidAssetsInput.
    """
    if not isinstance(assets, (list, tuple)):
        raise InvalidAssetsInput("Assets must be a list")

    if not filter or not isinstance(filter, str):
        raise InvalidFilter("Filter must be a non-empty string")

    for candidate in assets:
        if isinstance(candidate, dict):
            name = candidate.get("name")
            if not isinstance(name, str) or filter not in name:
                continue
            if not isinstance(candidate.get("browser_download_url"), str):
                continue
            try:
                return Asset(**candidate)
            except ValidationError as e:
                raise InvalidAssetsInput(f"Malformed asset '{name}': {e}") from e
        if isinstance(candidate, Asset) and filter in candidate.name:
            return candidate

    return None
