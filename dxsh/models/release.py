"""
Release metadata and provider response models.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Asset(BaseModel):
    """One downloadable file attached to a release."""
    name: str = Field(..., description="Asset file name")
    download_url: str = Field(..., alias="browser_download_url", description="Direct download URL")
    size: Optional[int] = Field(None, description="Size in bytes")

    class Config:
        populate_by_name = True


class ReleaseInfo(BaseModel):
    """Latest release of a repository as reported by GitHub."""
    tag_name: str = Field(..., description="Version tag")
    name: Optional[str] = Field(None, description="Release title")
    assets: List[Asset] = Field(default_factory=list, description="Assets in provider order")

    class Config:
        json_schema_extra = {
            "example": {
                "tag_name": "v1.29.0",
                "name": "Kubernetes v1.29.0",
                "assets": [
                    {
                        "name": "kubernetes-client-linux-amd64.tar.gz",
                        "browser_download_url": "https://example.com/kubernetes-client-linux-amd64.tar.gz",
                        "size": 1024
                    }
                ]
            }
        }


@dataclass
class HttpResponse:
    """Raw response returned by a release transport."""
    status: int
    reason: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self):
        self.headers = {k.lower(): v for k, v in dict(self.headers).items()}

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())
