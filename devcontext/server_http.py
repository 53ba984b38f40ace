#!/usr/bin/env python3
"""
DevContext MCP Server - HTTP Transport
Runs as a web server using the MCP Streamable HTTP protocol.

For local editor integration use stdio mode instead (`devcontext --stdio`).
"""

import contextlib
from typing import Optional

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Mount, Route

from devcontext import __version__
from devcontext.config import ConfigManager
from devcontext.patterns import (
    CategoryNotFoundError, PatternError, PatternNotFoundError, StoreIOError
)
from devcontext.server import DevContextMCPServer


def create_app(mcp_server: DevContextMCPServer) -> Starlette:
    """
    Build the Starlette app around an MCP server instance.

    Endpoints:
    - /mcp - MCP protocol (resources and tools)
    - /health - Deployment health check
    - /p/{category}/{name} - Raw pattern download (for curl)
    """
    session_manager = StreamableHTTPSessionManager(app=mcp_server.server)

    async def mcp_endpoint(scope, receive, send):
        await session_manager.handle_request(scope, receive, send)

    async def health_check(request: Request) -> PlainTextResponse:
        tool_count = len(mcp_server.tool_registry.listTools())
        return PlainTextResponse(
            f"DevContext MCP Server (HTTP)\n"
            f"Version: {__version__}\n"
            f"Status: Running\n"
            f"Tools: {tool_count}\n"
            f"MCP endpoint: /mcp\n"
        )

    async def get_pattern_raw(request: Request) -> Response:
        """Serve raw pattern content.

        Usage: curl -sL http://localhost:8000/p/architecture/frontend -o frontend.md
        """
        category = request.path_params.get("category", "")
        name = request.path_params.get("name", "")

        try:
            resolved = mcp_server.repository.resolve_pattern(category, name)
        except (CategoryNotFoundError, PatternNotFoundError) as e:
            return PlainTextResponse(str(e), status_code=404)
        except StoreIOError as e:
            mcp_server.logger.error(f"Failed to serve {category}/{name}: {e}")
            return PlainTextResponse(f"Error: {e}", status_code=503)
        except PatternError as e:
            return PlainTextResponse(str(e), status_code=404)

        return Response(
            content=resolved.content,
            media_type=f"{resolved.item.content_type}; charset=utf-8",
            headers={"Content-Disposition": f"inline; filename={resolved.item.filename}"}
        )

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        await mcp_server.initialize()
        async with session_manager.run():
            mcp_server.logger.info("DevContext MCP Server (HTTP) started")
            yield

    return Starlette(
        routes=[
            Route("/health", endpoint=health_check),
            Route("/p/{category}/{name}", endpoint=get_pattern_raw),
            Mount("/mcp", app=mcp_endpoint),
        ],
        lifespan=lifespan,
    )


async def main(config: Optional[ConfigManager] = None):
    """Run the HTTP server."""
    import uvicorn

    config = config or ConfigManager()
    settings = await config.load()
    app = create_app(DevContextMCPServer(config))

    server = uvicorn.Server(uvicorn.Config(
        app,
        host=settings.http_host,
        port=settings.http_port,
        log_level="info",
    ))

    print(f"DevContext MCP Server (HTTP) starting on http://{settings.http_host}:{settings.http_port}")
    print(f"  MCP:      http://{settings.http_host}:{settings.http_port}/mcp")
    print(f"  Health:   http://{settings.http_host}:{settings.http_port}/health")
    print(f"  Download: http://{settings.http_host}:{settings.http_port}/p/{{category}}/{{name}}")

    await server.serve()
