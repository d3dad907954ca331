"""FastAPI transport serving the JSON-RPC endpoint over HTTP POST."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from documents_mcp_server.application import Application, build_application

logger = structlog.get_logger()


def create_app(application: Application | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Every JSON-RPC outcome, protocol errors included, is returned with HTTP 200.
    """
    application = application or build_application()
    settings = application.settings

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Documents MCP HTTP transport started", path=settings.path)
        yield
        application.close()
        logger.info("Documents MCP HTTP transport shut down")

    app = FastAPI(
        title="Documents MCP Server",
        description="JSON-RPC tool endpoint for bid document generation and review",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.application = application

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )

    @app.post(settings.path)
    async def handle_request(request: Request) -> Response:
        body = await request.body()
        # Handlers are synchronous; keep them off the event loop.
        envelope = await run_in_threadpool(application.dispatcher.handle, body)
        return Response(content=envelope, media_type="application/json")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
