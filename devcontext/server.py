#!/usr/bin/env python3
"""
DevContext MCP Server
Serves the pattern store over MCP resources and tools.
"""

import asyncio
from typing import Iterable, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.models import InitializationOptions
from mcp.server.lowlevel import NotificationOptions
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp import types

from devcontext import __version__, __package_name__
from devcontext.config import ConfigManager
from devcontext.mcp_types import ToolContext
from devcontext.patterns import PatternRepository, PatternError
from devcontext.utils import Logger
from devcontext.tools import (
    ToolRegistry, GetPatternTool, ListPatternsTool, SearchPatternsTool, GetProjectTemplateTool
)


class DevContextMCPServer:
    """Main MCP Server for DevContext."""

    def __init__(self, config: Optional[ConfigManager] = None):
        self.config = config or ConfigManager()

        self.server = Server(__package_name__)
        self.logger = Logger(name=__package_name__, level=self.config.get().log_level)
        self.tool_registry = ToolRegistry(self.logger)
        self.repository: Optional[PatternRepository] = None

        self._setup_handlers()

    async def initialize(self) -> None:
        """Load configuration, open the pattern store and register tools."""
        config = await self.config.load()
        self.logger.setLevel(config.log_level)

        self.repository = PatternRepository.from_path(config.contexts_path, scheme=config.uri_scheme)
        if not config.contexts_path.is_dir():
            self.logger.warning(f"Contexts directory not found: {config.contexts_path}")

        self._register_tools()
        self.logger.info(f"Serving patterns from {config.contexts_path}")

    def _register_tools(self):
        """Register the 4 pattern tools."""
        tools = [
            GetPatternTool(self.logger, self.repository),
            ListPatternsTool(self.logger, self.repository),
            SearchPatternsTool(self.logger, self.repository),
            GetProjectTemplateTool(self.logger, self.repository),
        ]

        for tool in tools:
            self.tool_registry.register(tool)

        self.logger.info(f"Registered {len(tools)} tools: {', '.join(t.name for t in tools)}")

    def _require_repository(self) -> PatternRepository:
        if self.repository is None:
            raise RuntimeError("Server not initialized")
        return self.repository

    # =========================================================================
    # Request handling
    # =========================================================================

    async def list_resources(self) -> list[types.Resource]:
        """List every pattern as an MCP resource."""
        listing = self._require_repository().list_resources()

        for failure in listing.failures:
            self.logger.warning(f"Error listing resources: {failure.reason}")

        resources = []
        for resource in listing.resources:
            try:
                resources.append(types.Resource(
                    uri=resource.uri,
                    name=resource.name,
                    description=resource.description,
                    mimeType=resource.mime_type,
                ))
            except ValueError as e:
                # pydantic rejected the URI; skip this one, keep the rest
                self.logger.warning(f"Skipping resource {resource.name}: {e}")

        return resources

    async def read_resource(self, uri: str) -> list[ReadResourceContents]:
        """Read one pattern by URI."""
        try:
            content = self._require_repository().read_resource(uri)
        except PatternError as e:
            self.logger.error(f"Failed to read resource {uri}: {e}")
            raise ValueError(f"Failed to read resource: {e}") from e

        return [ReadResourceContents(content=content.text, mime_type=content.mime_type)]

    async def call_tool(self, name: str, arguments: dict) -> list[types.TextContent]:
        """Execute a tool and return its text content."""
        if not self.tool_registry.hasTool(name):
            raise ValueError(f"Unknown tool: {name}")

        loop_time = asyncio.get_event_loop().time()
        context = ToolContext(
            requestId=f"req_{loop_time}",
            timestamp=loop_time,
            toolName=name
        )

        result = await self.tool_registry.execute(name, arguments or {}, context)

        if result.success and result.result:
            return [
                types.TextContent(type="text", text=item.text)
                for item in result.result.content
            ]

        error_msg = result.error.message if result.error else "Unknown error"
        raise RuntimeError(f"Tool execution failed: {error_msg}")

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_resources()
        async def handle_list_resources() -> list[types.Resource]:
            try:
                return await self.list_resources()
            except Exception as e:
                self.logger.error(f"Error listing resources: {e}")
                return []

        @self.server.read_resource()
        async def handle_read_resource(uri) -> Iterable[ReadResourceContents]:
            return await self.read_resource(str(uri))

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            tools = self.tool_registry.getToolSchemas()
            self.logger.debug(f"Exposing {len(tools)} tools")
            return tools

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            try:
                return await self.call_tool(name, arguments)
            except ValueError as e:
                self.logger.error(f"Tool not found: {e}")
                raise
            except Exception as e:
                self.logger.error(f"Tool execution error: {e}")
                raise

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=__package_name__,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={}
            ),
        )

    async def start(self):
        """Start the MCP server on stdio."""
        try:
            await self.initialize()

            async with stdio_server() as (read_stream, write_stream):
                self.logger.info("DevContext MCP Server running on stdio")
                await self.server.run(read_stream, write_stream, self.initialization_options())

        except Exception as e:
            self.logger.error(f"Failed to start server: {e}")
            raise


async def run_stdio(config: Optional[ConfigManager] = None):
    """Run in stdio mode."""
    server = DevContextMCPServer(config)
    await server.start()
