"""
Tool Registry
Manages tool registration, discovery, and execution.
"""

from typing import Dict, Any, List, Optional
from datetime import datetime, timezone

from mcp.types import Tool as MCPTool

from devcontext.mcp_types import (
    ToolHandler, ToolContext, ToolError, ToolExecution,
    ToolExecutionResult, MCPErrorCode, ToolMetrics
)
from devcontext.tools.base import BaseTool


class ToolMonitoring:
    """Map-based per-tool execution metrics."""

    def __init__(self):
        self.metrics: Dict[str, ToolMetrics] = {}

    def recordExecution(self, execution: ToolExecution) -> None:
        existing = self.metrics.get(execution.toolName) or self._empty(execution.toolName)

        existing.totalExecutions += 1
        existing.lastExecutionTime = execution.startTime

        if execution.status == 'completed' and execution.error is None:
            existing.successfulExecutions += 1
        else:
            existing.failedExecutions += 1

        if execution.duration:
            total_time = existing.averageExecutionTime * (existing.totalExecutions - 1) + execution.duration
            existing.averageExecutionTime = total_time / existing.totalExecutions

        existing.errorRate = existing.failedExecutions / existing.totalExecutions

        self.metrics[execution.toolName] = existing

    def getMetrics(self, toolName: str) -> ToolMetrics:
        return self.metrics.get(toolName) or self._empty(toolName)

    @staticmethod
    def _empty(toolName: str) -> ToolMetrics:
        return ToolMetrics(
            toolName=toolName,
            totalExecutions=0,
            successfulExecutions=0,
            failedExecutions=0,
            averageExecutionTime=0,
            errorRate=0
        )


class ToolRegistry:
    """Tool Registry Implementation."""

    def __init__(self, logger, monitoring: Optional[ToolMonitoring] = None):
        self.logger = logger
        self.tools: Dict[str, BaseTool] = {}
        self.handlers: Dict[str, ToolHandler] = {}
        self.monitoring = monitoring or ToolMonitoring()

    def register(self, tool: BaseTool) -> None:
        """Register a tool and its execute handler."""
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")

        self.tools[tool.name] = tool
        self.handlers[tool.name] = tool.execute
        self.logger.info(f"Tool registered: {tool.name}")

    def unregister(self, toolName: str) -> bool:
        """Unregister a tool from the registry."""
        removed = toolName in self.tools
        if removed:
            del self.tools[toolName]
            self.handlers.pop(toolName, None)
            self.logger.info(f"Tool unregistered: {toolName}")
        return removed

    def get(self, toolName: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self.tools.get(toolName)

    def listTools(self) -> List[BaseTool]:
        """List all registered tools."""
        return list(self.tools.values())

    def hasTool(self, toolName: str) -> bool:
        """Check if a tool is registered."""
        return toolName in self.tools

    async def execute(self, toolName: str, input: Dict[str, Any], context: ToolContext) -> ToolExecutionResult:
        """Execute a tool with input and context."""
        handler = self.handlers.get(toolName)
        if not handler:
            raise ValueError(f"Tool {toolName} not found")

        execution = ToolExecution(
            id=self._generateExecutionId(),
            toolName=toolName,
            input=input,
            context=context,
            startTime=datetime.now(timezone.utc).isoformat(),
            status='running'
        )

        try:
            result = await handler(input, context)

            execution.status = 'completed'
            execution.result = result.result
            execution.error = result.error
            self._finish(execution)

            return ToolExecutionResult(
                execution=execution,
                success=result.success,
                result=result.result,
                error=result.error
            )

        except Exception as error:
            self.logger.error(f"Tool {toolName} raised: {error}")
            execution.status = 'failed'
            execution.error = ToolError(
                code=MCPErrorCode.TOOL_EXECUTION_ERROR,
                message=str(error)
            )
            self._finish(execution)

            return ToolExecutionResult(
                execution=execution,
                success=False,
                error=execution.error
            )

    def getToolSchemas(self) -> List[MCPTool]:
        """Get tool schemas for MCP protocol - returns proper MCP Tool objects."""
        return [
            MCPTool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema
            )
            for tool in self.listTools()
        ]

    def getMetrics(self, toolName: str) -> ToolMetrics:
        """Get metrics for a tool."""
        return self.monitoring.getMetrics(toolName)

    def _finish(self, execution: ToolExecution) -> None:
        execution.endTime = datetime.now(timezone.utc).isoformat()
        execution.duration = int((datetime.fromisoformat(execution.endTime) -
                                  datetime.fromisoformat(execution.startTime)).total_seconds() * 1000)
        self.monitoring.recordExecution(execution)

    def _generateExecutionId(self) -> str:
        """Generate unique execution ID."""
        return f"exec_{int(datetime.now(timezone.utc).timestamp() * 1000)}_{id(self) % 10000}"
