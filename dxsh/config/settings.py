"""
Configuration settings for the install script generator.
"""

import os
from typing import Optional
from pathlib import Path
from pydantic import BaseModel, Field, validator
from pydantic_settings import BaseSettings


class GitHubConfig(BaseModel):
    """GitHub Releases API configuration."""
    api_base: str = Field(default="https://api.github.com", description="GitHub API base URL")
    token: Optional[str] = Field(None, description="GitHub token (falls back to GITHUB_TOKEN)")
    user_agent: str = Field(default="dx.sh-script-generator", description="User-Agent header")
    accept: str = Field(default="application/vnd.github.v3+json", description="Accept media type")
    timeout_seconds: float = Field(default=10.0, description="Request timeout in seconds")

    @validator('api_base')
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @validator('token', always=True)
    def token_from_environment(cls, v):
        return v or os.environ.get("GITHUB_TOKEN") or None


class ScriptConfig(BaseModel):
    """Generated script configuration."""
    install_dir: str = Field(default="/usr/local/bin", description="Where the binary is installed")
    sample_os: str = Field(default="linux", description="Platform used to discover template file names")
    sample_arch: str = Field(default="amd64", description="Architecture used to discover template file names")


class ServerConfig(BaseModel):
    """HTTP server configuration."""
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    cache_max_age: int = Field(default=300, description="Cache-Control max-age for scripts")


class LoggingConfig(BaseModel):
    """Logging configuration. Console output always goes to stderr."""
    level: str = Field(default="INFO", description="Logging level")
    file_path: Optional[Path] = Field(default=None, description="Also log to this rotating file")

    @validator('level')
    def validate_level(cls, v):
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown logging level: {v}")
        return v.upper()


class Settings(BaseSettings):
    """Main application settings."""
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    script: ScriptConfig = Field(default_factory=ScriptConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        env_prefix = "DXSH_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"
        extra = "ignore"  # Ignore extra fields from environment
