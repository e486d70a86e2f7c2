"""
Tool registry models.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, validator


class StandardAsset(BaseModel):
    """Binary attached to a GitHub release, picked by substring filter."""
    kind: Literal["asset"] = "asset"
    asset_filter: str = Field(..., description="Substring matched against asset names")

    @validator('asset_filter')
    def validate_filter_not_empty(cls, v):
        if not v:
            raise ValueError("asset_filter must be non-empty")
        return v

    class Config:
        frozen = True


class CustomURLTemplate(BaseModel):
    """Binary served from a predictable URL outside GitHub releases."""
    kind: Literal["template"] = "template"
    url_pattern: str = Field(
        ...,
        description="Format string with {version}, {semver}, {os} and {arch} placeholders"
    )

    @validator('url_pattern')
    def validate_pattern(cls, v):
        for placeholder in ("{os}", "{arch}"):
            if placeholder not in v:
                raise ValueError(f"url_pattern must contain {placeholder}")

        # The file name is discovered from a single sample platform, so its
        # suffix (and with it the archive format) must be platform invariant.
        if _basename(v).endswith("}"):
            raise ValueError(f"url_pattern file name must not end with a placeholder: {v}")

        return v

    def render(self, version: str, os_name: str, arch: str) -> str:
        """Render the download URL for a concrete (or placeholder) platform."""
        return _render(self.url_pattern, version, os_name, arch)

    def file_name(self, version: str, os_name: str, arch: str) -> str:
        """Filename portion of the rendered URL."""
        return _basename(self.render(version, os_name, arch))

    class Config:
        frozen = True


ToolSource = Annotated[Union[StandardAsset, CustomURLTemplate], Field(discriminator="kind")]


class ToolConfig(BaseModel):
    """Registry entry for a supported tool."""
    name: str = Field(..., description="Registry key")
    repository: str = Field(..., description="GitHub repository in owner/name form")
    source: ToolSource = Field(..., description="How the download URL is resolved")

    @validator('repository')
    def validate_repository(cls, v):
        owner, sep, repo = v.partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ValueError(f"repository must be in 'owner/name' format: {v}")
        return v

    @property
    def asset_filter(self) -> Optional[str]:
        if isinstance(self.source, StandardAsset):
            return self.source.asset_filter
        return None

    @property
    def custom_download(self) -> Optional[CustomURLTemplate]:
        if isinstance(self.source, CustomURLTemplate):
            return self.source
        return None

    class Config:
        frozen = True


def _render(pattern: str, version: str, os_name: str, arch: str) -> str:
    semver = version[1:] if version.startswith("v") else version
    return pattern.format(version=version, semver=semver, os=os_name, arch=arch)


def _basename(url: str) -> str:
    return url.rstrip("/").rsplit("/", 1)[-1]
