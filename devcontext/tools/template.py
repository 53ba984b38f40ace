"""
Project Template Tool

Return the project structure section for a technology stack.
"""

from typing import Any

from devcontext.mcp_types import (
    ToolContext,
    ToolHandlerResult,
    ToolInput,
)
from devcontext.patterns import PatternError
from devcontext.patterns.templates import list_stacks
from devcontext.tools.base import BaseTool


class GetProjectTemplateTool(BaseTool):
    """Get the project structure template for a stack."""

    @property
    def name(self) -> str:
        return "get-project-template"

    @property
    def description(self) -> str:
        return "Get project structure template for a specific stack"

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "stack": {
                    "type": "string",
                    "description": "Technology stack",
                    "enum": list_stacks()
                }
            },
            "required": ["stack"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute get-project-template."""
        validation = self.validateInput(input)
        if not validation.valid:
            return self.invalidInputResult(validation)

        stack = input.get("stack")

        try:
            section = self.repository.get_project_template(stack)
        except PatternError as e:
            return self.handlePatternError(e, "Failed to get project template")
        except Exception as e:
            return await self.handleError(e, context)

        self.logExecution(input, context, True)
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(section)
        )
