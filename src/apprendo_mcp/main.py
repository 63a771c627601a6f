"""Entry point for the Apprendo MCP server."""

from __future__ import annotations

import argparse
import json
import logging

from apprendo_mcp.catalog import load_catalog
from apprendo_mcp.config import ServerSettings, configure_logging
from apprendo_mcp.fastmcp_adapter import build_fastmcp_app
from apprendo_mcp.routes import http_middleware

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Apprendo book catalogue MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        help="Transport to serve (default: stdio, or APPRENDO_TRANSPORT).",
    )
    parser.add_argument("--host", help="Bind address for the HTTP transport.")
    parser.add_argument("--port", type=int, help="Port for the HTTP transport.")
    parser.add_argument("--path", help="MCP endpoint path for the HTTP transport.")
    parser.add_argument("--data", help="Path to the books JSON document.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON and exit.",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> ServerSettings:
    """Overlay command-line flags on the environment-derived settings."""
    overrides = {
        "transport": args.transport,
        "host": args.host,
        "port": args.port,
        "http_path": args.path,
        "data_path": args.data,
    }
    return ServerSettings(
        **{key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: list[str] | None = None) -> int:
    """Load the catalogue and serve it over the selected transport."""
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    configure_logging(settings.log_level)

    catalog = load_catalog(settings.data_path)
    app, server = build_fastmcp_app(catalog, settings)

    if args.catalog:
        print(json.dumps(server.to_catalog(), indent=2))
        return 0

    if settings.transport == "http":
        base_url = f"http://{settings.host}:{settings.port}"
        logger.info("Apprendo HTTP MCP server running on port %d", settings.port)
        logger.info("Health check: %s/", base_url)
        logger.info("MCP endpoint: %s%s", base_url, settings.http_path)
        logger.info("Event stream: %s/sse", base_url)
        app.run(
            transport="http",
            host=settings.host,
            port=settings.port,
            path=settings.http_path,
            middleware=http_middleware(),
        )
    else:
        logger.info("Apprendo MCP server running on stdio")
        app.run(transport="stdio")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
