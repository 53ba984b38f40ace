"""
List Patterns Tool

List the patterns available in a category.
"""

from typing import Any

from devcontext.mcp_types import (
    ToolContext,
    ToolHandlerResult,
    ToolInput,
)
from devcontext.patterns import PatternError
from devcontext.tools.base import BaseTool


class ListPatternsTool(BaseTool):
    """List all available patterns in a category."""

    @property
    def name(self) -> str:
        return "list-patterns"

    @property
    def description(self) -> str:
        return "List all available patterns in a category"

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Pattern category to list"
                }
            },
            "required": ["category"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute list-patterns."""
        validation = self.validateInput(input)
        if not validation.valid:
            return self.invalidInputResult(validation)

        category = input.get("category")

        try:
            patterns = self.repository.list_patterns(category)
        except PatternError as e:
            return self.handlePatternError(e, "Failed to list patterns")
        except Exception as e:
            return await self.handleError(e, context)

        lines = "\n".join(f"- {p}" for p in patterns)

        self.logExecution(input, context, True)
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(f"Available patterns in '{category}':\n{lines}")
        )
