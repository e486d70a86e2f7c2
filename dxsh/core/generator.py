"""
Script generator - resolves a tool's latest release and renders its installer.
"""

import logging
from typing import Optional

from ..analyzers.github_analyzer import GitHubReleaseResolver, find_asset
from ..config.settings import Settings
from ..models.script import ScriptContext
from ..models.tool import StandardAsset
from . import registry
from .errors import NoMatchingAsset, UnsupportedTool
from .script_builder import ScriptBuilder


class ScriptGenerator:
    """Turns a tool name into a complete bash install script."""

    def __init__(self,
                 resolver: Optional[GitHubReleaseResolver] = None,
                 builder: Optional[ScriptBuilder] = None,
                 settings: Optional[Settings] = None):
        """
        Initialize the generator.

        Args:
            resolver: Release resolver (built from settings if omitted)
            builder: Script builder (built from settings if omitted)
            settings: Application settings
        """
        self.logger = logging.getLogger(__name__)
        settings = settings or Settings()
        self.resolver = resolver or GitHubReleaseResolver(config=settings.github)
        self.builder = builder or ScriptBuilder(config=settings.script)

    async def generate(self, tool_name: str) -> str:
        """
        Generate the install script for a tool.

        Errors from the registry, resolver and asset selection propagate
        unchanged; no partial script is ever returned.
        """
        tool = registry.lookup(tool_name)
        if tool is None:
            raise UnsupportedTool(tool_name)

        release = await self.resolver.fetch_latest_release(tool.repository)

        if isinstance(tool.source, StandardAsset):
            asset = find_asset(release.assets, tool.source.asset_filter)
            if asset is None:
                raise NoMatchingAsset(tool_name, tool.source.asset_filter)
            self.logger.info(f"Using asset {asset.name} for {tool_name} {release.tag_name}")
            context = ScriptContext.standard(
                tool_name=tool_name,
                file_name=asset.name,
                download_url=asset.download_url,
                version=release.tag_name
            )
        else:
            self.logger.info(f"Using URL template for {tool_name} {release.tag_name}")
            context = ScriptContext.dynamic(
                tool_name=tool_name,
                version=release.tag_name,
                custom_download=tool.source
            )

        return self.builder.build(context)


async def generate_script(tool_name: str,
                          resolver: Optional[GitHubReleaseResolver] = None,
                          settings: Optional[Settings] = None) -> str:
    """Generate the install script for ``tool_name``."""
    generator = ScriptGenerator(resolver=resolver, settings=settings)
    return await generator.generate(tool_name)
