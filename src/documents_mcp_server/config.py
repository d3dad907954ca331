"""Central configuration for the documents MCP server."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # HTTP transport
    host: str = Field(default_factory=lambda: _env("DOCUMENTS_MCP_HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: int(_env("DOCUMENTS_MCP_PORT", "8085"))
    )
    path: str = Field(default_factory=lambda: _env("DOCUMENTS_MCP_PATH", "/mcp"))
    cors_allowed_origins: str = Field(
        default_factory=lambda: _env(
            "CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000"
        )
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: _env("DOCUMENTS_MCP_LOG_LEVEL", "INFO")
    )
    log_json: bool = Field(
        default_factory=lambda: _env_flag("DOCUMENTS_MCP_LOG_JSON", "false")
    )

    # Backend
    mock_enabled: bool = Field(
        default_factory=lambda: _env_flag("DOCUMENTS_MOCK_ENABLED", "true")
    )
    output_dir: str = Field(
        default_factory=lambda: _env("DOCUMENTS_OUTPUT_DIR", "./generated-documents")
    )

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins as a list, ignoring blank entries."""
        return [
            origin.strip()
            for origin in self.cors_allowed_origins.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Load ``.env`` once and return the cached settings."""
    load_dotenv()
    return Settings()
