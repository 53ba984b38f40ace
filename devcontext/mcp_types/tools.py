"""
Tool-related types
Requests, results and execution records for the pattern tools.
"""

from typing import Dict, Any, List, Optional, Callable, Awaitable
from dataclasses import dataclass, field
from enum import Enum

from mcp.types import TextContent


class MCPErrorCode(Enum):
    """Why a tool call failed; pattern store errors map onto these."""
    INVALID_INPUT = "INVALID_INPUT"
    TOOL_EXECUTION_ERROR = "TOOL_EXECUTION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    IO_ERROR = "IO_ERROR"


class ToolInput(dict):
    """Tool call arguments (category, pattern, query, stack)."""


@dataclass
class ToolContext:
    """Per-call context handed to every tool."""
    requestId: str
    timestamp: float
    toolName: Optional[str] = None


@dataclass
class ToolResult:
    """Text returned to the client. Pattern bodies are passed through as-is."""
    content: List[TextContent]
    isError: bool = False


@dataclass
class ToolError:
    code: MCPErrorCode
    message: str
    details: Optional[str] = None  # exception class name


@dataclass
class ToolHandlerResult:
    """What a tool's execute() returns."""
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolValidationError:
    field: str
    message: str
    code: str  # MISSING_REQUIRED_FIELD, INVALID_TYPE or INVALID_VALUE


@dataclass
class ToolValidationResult:
    valid: bool
    errors: List[ToolValidationError] = field(default_factory=list)


@dataclass
class ToolExecution:
    """One call as tracked by the registry; status is running, completed or failed."""
    id: str
    toolName: str
    input: Dict[str, Any]
    context: ToolContext
    startTime: str
    status: str
    endTime: Optional[str] = None
    duration: Optional[int] = None  # ms
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolExecutionResult:
    """Registry-level outcome: the execution record plus the tool's result."""
    execution: ToolExecution
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolMetrics:
    """Running per-tool counters kept by ToolMonitoring."""
    toolName: str
    totalExecutions: int
    successfulExecutions: int
    failedExecutions: int
    averageExecutionTime: float
    errorRate: float
    lastExecutionTime: Optional[str] = None


ToolHandler = Callable[[Dict[str, Any], ToolContext], Awaitable[ToolHandlerResult]]
