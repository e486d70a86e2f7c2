"""
Data models for the install script generator.
"""

from .tool import ToolConfig, StandardAsset, CustomURLTemplate
from .release import Asset, ReleaseInfo, HttpResponse
from .script import ScriptContext, ScriptStage, ScriptDocument

__all__ = [
    "ToolConfig",
    "StandardAsset",
    "CustomURLTemplate",
    "Asset",
    "ReleaseInfo",
    "HttpResponse",
    "ScriptContext",
    "ScriptStage",
    "ScriptDocument"
]
