"""
Tool registry: the fixed table of tools a script can be generated for.
"""

from typing import Dict, List, Optional

from ..models.tool import ToolConfig, StandardAsset, CustomURLTemplate


_TOOLS: List[ToolConfig] = [
    ToolConfig(
        name="kubectl",
        repository="kubernetes/kubernetes",
        source=CustomURLTemplate(
            url_pattern="https://dl.k8s.io/release/{version}/bin/{os}/{arch}/kubectl"
        ),
    ),
    ToolConfig(
        name="terraform",
        repository="hashicorp/terraform",
        source=CustomURLTemplate(
            url_pattern=(
                "https://releases.hashicorp.com/terraform/{semver}/"
                "terraform_{semver}_{os}_{arch}.zip"
            )
        ),
    ),
    ToolConfig(
        name="helm",
        repository="helm/helm",
        source=CustomURLTemplate(
            url_pattern="https://get.helm.sh/helm-{version}-{os}-{arch}.tar.gz"
        ),
    ),
    ToolConfig(
        name="node",
        repository="nodejs/node",
        source=StandardAsset(asset_filter="node-"),
    ),
    ToolConfig(
        name="docker-compose",
        repository="docker/compose",
        source=StandardAsset(asset_filter="docker-compose-"),
    ),
]

TOOLS: Dict[str, ToolConfig] = {tool.name: tool for tool in _TOOLS}


def lookup(name: str) -> Optional[ToolConfig]:
    """Return the tool configuration, or None if the tool is unknown."""
    return TOOLS.get(name)


def list_supported_names() -> List[str]:
    """Supported tool names in registry order."""
    return list(TOOLS)


def is_supported(name: str) -> bool:
    return name in TOOLS
