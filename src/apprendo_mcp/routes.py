"""HTTP routes served next to the MCP endpoint."""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, StreamingResponse

from apprendo_mcp.catalog import BookCatalog
from apprendo_mcp.config import ServerSettings
from apprendo_mcp.streaming import event_stream

logger = logging.getLogger(__name__)

DISPLAY_NAME = "Apprendo MCP Server"


def http_middleware() -> list[Middleware]:
    """Middleware applied to every HTTP route, including the MCP endpoint."""
    return [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["mcp-session-id"],
        )
    ]


def health_payload(catalog: BookCatalog, settings: ServerSettings) -> dict[str, object]:
    """Build the body returned by the health check."""
    return {
        "name": DISPLAY_NAME,
        "status": "running",
        "books": len(catalog),
        "version": settings.server_version,
        "endpoints": {
            "health": "/",
            "mcp": settings.http_path,
            "sse": "/sse",
        },
    }


def register_routes(
    app: FastMCP, catalog: BookCatalog, settings: ServerSettings
) -> None:
    """Attach the health check and keep-alive stream to ``app``."""

    @app.custom_route("/", methods=["GET"])
    async def health(_: Request) -> JSONResponse:
        return JSONResponse(health_payload(catalog, settings))

    @app.custom_route("/sse", methods=["GET"])
    async def sse(request: Request) -> StreamingResponse:
        client = request.client.host if request.client else "unknown"
        logger.info("Event stream client connected: %s", client)
        return StreamingResponse(
            event_stream(request.is_disconnected, settings.keepalive_interval),
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
        )
