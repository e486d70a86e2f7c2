"""
HTTP transport for the release provider.
"""

import logging
import urllib.error
import urllib.request
from typing import Dict, Protocol

from ..models.release import HttpResponse


class ReleaseTransport(Protocol):
    """
    Performs one GET request.

    Raises OSError or http.client.HTTPException when no complete response
    arrives.
    """

    def get(self, url: str, headers: Dict[str, str]) -> HttpResponse:
        ...


class UrllibTransport:
    """
    Blocking transport built on urllib.

    HTTP error statuses are returned as responses, not raised, so the
    caller can interpret them. Network failures propagate as OSError
    (urllib.error.URLError is a subclass); malformed or truncated
    responses as http.client.HTTPException (IncompleteRead, BadStatusLine).
    """

    def __init__(self, timeout: float = 10.0):
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout

    def get(self, url: str, headers: Dict[str, str]) -> HttpResponse:
        request = urllib.request.Request(url)
        for name, value in headers.items():
            request.add_header(name, value)

        self.logger.debug(f"GET {url}")
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return HttpResponse(
                    status=response.status,
                    reason=response.reason or "",
                    headers=dict(response.headers.items()),
                    body=response.read()
                )
        except urllib.error.HTTPError as e:
            body = e.read() if e.fp is not None else b""
            e.close()
            return HttpResponse(
                status=e.code,
                reason=str(e.reason or ""),
                headers=dict(e.headers.items()) if e.headers else {},
                body=body
            )
