"""Runtime configuration for the Apprendo MCP server."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ServerSettings(BaseSettings):
    """Settings resolved from ``APPRENDO_*`` environment variables.

    The HTTP port also honours the conventional ``PORT`` variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="APPRENDO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    server_name: str = Field(
        default="apprendo-mcp-server",
        description="Server name reported during the MCP handshake",
    )
    server_version: str = Field(
        default="1.0.0",
        description="Server version reported by the handshake and health check",
    )
    data_path: Path = Field(
        default=Path("data/books.json"),
        description="JSON document holding the book catalogue",
    )
    transport: Literal["stdio", "http"] = Field(
        default="stdio",
        description="Transport used when the server starts",
    )
    host: str = Field(default="0.0.0.0", description="HTTP bind address")
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("APPRENDO_PORT", "PORT"),
        description="HTTP port",
    )
    http_path: str = Field(default="/mcp", description="MCP endpoint path")
    keepalive_interval: float = Field(
        default=30.0,
        gt=0,
        description="Seconds between ping events on the event stream",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the operational log",
    )


def configure_logging(level: str = "INFO") -> None:
    """Send the operational log to stderr so stdout stays protocol-only."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
