"""
MCP Types Module
Dataclasses passed between the server, the tool registry and the tools.
"""

from .tools import (
    MCPErrorCode,

    # Calls
    ToolInput,
    ToolContext,
    ToolResult,
    ToolError,
    ToolHandlerResult,

    # Validation
    ToolValidationError,
    ToolValidationResult,

    # Registry bookkeeping
    ToolExecution,
    ToolExecutionResult,
    ToolMetrics,
    ToolHandler,
)

__all__ = [
    "MCPErrorCode",
    "ToolInput",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolHandlerResult",
    "ToolValidationError",
    "ToolValidationResult",
    "ToolExecution",
    "ToolExecutionResult",
    "ToolMetrics",
    "ToolHandler",
]
