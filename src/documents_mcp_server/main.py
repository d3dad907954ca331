"""Entry point for the documents MCP server."""

from __future__ import annotations

import argparse
import json
import sys

import uvicorn

from documents_mcp_server.application import build_application
from documents_mcp_server.config import get_settings
from documents_mcp_server.fastmcp_adapter import build_fastmcp_app
from documents_mcp_server.http_app import create_app
from documents_mcp_server.logging_config import configure_logging
from documents_mcp_server.stdio import serve_stdio

TRANSPORTS = ("http", "stdio", "fastmcp-stdio", "fastmcp-http")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Documents MCP server")
    parser.add_argument("--transport", choices=TRANSPORTS, default="http")
    parser.add_argument("--host", help="Bind address for HTTP transports")
    parser.add_argument("--port", type=int, help="Port for HTTP transports")
    parser.add_argument("--path", help="Endpoint path for HTTP transports")
    parser.add_argument(
        "--catalog", action="store_true", help="Print the tool catalog and exit"
    )
    parser.add_argument("--call", metavar="TOOL", help="Call one tool and exit")
    parser.add_argument(
        "--arguments",
        default="{}",
        metavar="JSON",
        help="JSON object of arguments for --call",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the server with the requested transport."""
    parser = build_parser()
    args = parser.parse_args(argv)

    requested = {"host": args.host, "port": args.port, "path": args.path}
    settings = get_settings().model_copy(
        update={key: value for key, value in requested.items() if value is not None}
    )
    configure_logging(settings.log_level, json_output=settings.log_json)

    arguments: object = None
    if args.call:
        try:
            arguments = json.loads(args.arguments)
        except ValueError:
            parser.error("--arguments must be valid JSON")

    application = build_application(settings)
    try:
        if args.catalog:
            print(json.dumps(application.server.to_catalog(), indent=2))
        elif args.call:
            request = {
                "jsonrpc": "2.0",
                "id": 1,
                "method": "tools/call",
                "params": {"name": args.call, "arguments": arguments},
            }
            print(application.dispatcher.handle(json.dumps(request)))
        elif args.transport == "stdio":
            serve_stdio(application.dispatcher, sys.stdin, sys.stdout)
        elif args.transport == "http":
            uvicorn.run(
                create_app(application),
                host=settings.host,
                port=settings.port,
                log_config=None,
            )
        else:
            app = build_fastmcp_app(application.server)
            if args.transport == "fastmcp-stdio":
                app.run(transport="stdio")
            else:
                app.run(
                    transport="http",
                    host=settings.host,
                    port=settings.port,
                    path=settings.path,
                )
    finally:
        application.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
