"""
Script generation models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, root_validator

from .tool import CustomURLTemplate


class ScriptContext(BaseModel):
    """Inputs for one script build, in standard or dynamic mode."""
    tool_name: str = Field(..., description="Tool being installed")
    version: str = Field(..., description="Release tag")
    file_name: Optional[str] = Field(None, description="Downloaded file name (standard mode)")
    download_url: Optional[str] = Field(None, description="Literal download URL (standard mode)")
    custom_download: Optional[CustomURLTemplate] = Field(
        None, description="URL pattern rendered at script run time (dynamic mode)"
    )

    @root_validator(skip_on_failure=True)
    def validate_mode(cls, values):
        standard = values.get("file_name") is not None and values.get("download_url") is not None
        dynamic = values.get("custom_download") is not None
        if standard == dynamic:
            raise ValueError(
                "ScriptContext needs either file_name and download_url, or custom_download"
            )
        return values

    @classmethod
    def standard(cls, tool_name: str, file_name: str, download_url: str,
                 version: str) -> "ScriptContext":
        return cls(tool_name=tool_name, file_name=file_name,
                   download_url=download_url, version=version)

    @classmethod
    def dynamic(cls, tool_name: str, version: str,
                custom_download: CustomURLTemplate) -> "ScriptContext":
        return cls(tool_name=tool_name, version=version, custom_download=custom_download)

    @property
    def is_dynamic(self) -> bool:
        return self.custom_download is not None

    class Config:
        frozen = True


class ScriptStage(BaseModel):
    """A named block of the generated script."""
    name: str
    body: str


class ScriptDocument(BaseModel):
    """Ordered stages that render to a single bash script."""
    stages: List[ScriptStage] = Field(default_factory=list)

    def add(self, name: str, body: str) -> "ScriptDocument":
        self.stages.append(ScriptStage(name=name, body=body))
        return self

    @property
    def stage_names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def render(self) -> str:
        """Join stages with blank lines; always ends with a newline."""
        return "\n\n".join(stage.body.strip("\n") for stage in self.stages) + "\n"
