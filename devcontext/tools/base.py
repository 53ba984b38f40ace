"""
Base Tool Classes
Abstract base classes for tool implementations.
"""

import json
from abc import ABC, abstractmethod
from typing import Dict, Any

from jsonschema import Draft202012Validator
from mcp.types import TextContent

from devcontext.mcp_types import (
    ToolInput, ToolResult, ToolError, ToolContext,
    ToolHandlerResult, ToolValidationResult, ToolValidationError,
    MCPErrorCode
)
from devcontext.patterns import (
    PatternRepository, PatternError, InvalidURIError, CategoryNotFoundError,
    ItemNotFoundError, PatternNotFoundError, StoreIOError, TemplateNotFoundError
)


# Pattern error type -> MCP error code
PATTERN_ERROR_CODES = {
    InvalidURIError: MCPErrorCode.INVALID_INPUT,
    CategoryNotFoundError: MCPErrorCode.RESOURCE_NOT_FOUND,
    ItemNotFoundError: MCPErrorCode.RESOURCE_NOT_FOUND,
    PatternNotFoundError: MCPErrorCode.RESOURCE_NOT_FOUND,
    TemplateNotFoundError: MCPErrorCode.RESOURCE_NOT_FOUND,
    StoreIOError: MCPErrorCode.IO_ERROR,
}


class BaseTool(ABC):
    """Abstract base class for all tool implementations."""

    def __init__(self, logger, repository: PatternRepository):
        self.logger = logger
        self.repository = repository

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""
        pass

    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """Tool input schema (JSON Schema)."""
        pass

    @abstractmethod
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute the tool with input and context."""
        pass

    def validateInput(self, input: ToolInput) -> ToolValidationResult:
        """Validate tool input against schema."""
        validator = Draft202012Validator(self.inputSchema)
        errors = []

        for error in sorted(validator.iter_errors(dict(input)), key=lambda e: list(e.path)):
            if error.validator == 'required':
                # "'x' is a required property" - the field lives in the message
                field = error.message.split("'")[1] if "'" in error.message else ""
                code = "MISSING_REQUIRED_FIELD"
            else:
                field = ".".join(str(p) for p in error.path)
                code = "INVALID_TYPE" if error.validator == 'type' else "INVALID_VALUE"
            errors.append(ToolValidationError(field=field, message=error.message, code=code))

        return ToolValidationResult(valid=len(errors) == 0, errors=errors)

    def invalidInputResult(self, validation: ToolValidationResult) -> ToolHandlerResult:
        """Build the failure result for input that did not validate."""
        message = "; ".join(e.message for e in validation.errors)
        error = ToolError(
            code=MCPErrorCode.INVALID_INPUT,
            message=f"Invalid input: {message}"
        )
        return ToolHandlerResult(
            success=False,
            error=error,
            result=self.createErrorResult(error)
        )

    def createSuccessResult(self, data: Any) -> ToolResult:
        """Strings (pattern bodies) go out verbatim; anything else as indented JSON."""
        try:
            if isinstance(data, str):
                text = data
            else:
                text = json.dumps(data, indent=2, default=str, ensure_ascii=False)

        except (TypeError, ValueError) as e:
            self.logger.warning(f"Failed to serialize tool result: {e}")
            text = json.dumps({"error": "Failed to serialize result"}, indent=2)

        return ToolResult(
            content=[TextContent(type="text", text=text)],
            isError=False
        )

    def createErrorResult(self, error: ToolError) -> ToolResult:
        """Wrap a ToolError as an isError result carrying its message."""
        return ToolResult(
            content=[TextContent(type="text", text=error.message)],
            isError=True
        )

    def handlePatternError(self, error: PatternError, prefix: str) -> ToolHandlerResult:
        """Translate a pattern store error into a failed tool result."""
        code = PATTERN_ERROR_CODES.get(type(error), MCPErrorCode.TOOL_EXECUTION_ERROR)
        if code == MCPErrorCode.IO_ERROR:
            self.logger.error(f"{prefix}: {error}")
        else:
            self.logger.debug(f"{prefix}: {error}")

        tool_error = ToolError(
            code=code,
            message=f"{prefix}: {error}",
            details=type(error).__name__
        )
        return ToolHandlerResult(
            success=False,
            error=tool_error,
            result=self.createErrorResult(tool_error)
        )

    async def handleError(self, error: Exception, context: ToolContext) -> ToolHandlerResult:
        """Handle unexpected errors during tool execution."""
        self.logger.error(f"Tool execution error in {self.name}: {error}")

        tool_error = ToolError(
            code=MCPErrorCode.INTERNAL_ERROR,
            message=str(error),
            details=type(error).__name__
        )
        return ToolHandlerResult(
            success=False,
            error=tool_error,
            result=self.createErrorResult(tool_error)
        )

    def logExecution(self, input: ToolInput, context: ToolContext, success: bool):
        """Log tool execution."""
        self.logger.debug(f"Tool executed: {self.name}", extra={
            'tool': self.name,
            'success': success,
            'requestId': context.requestId
        })
