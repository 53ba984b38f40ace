"""
Search Patterns Tool

Find patterns whose content contains a keyword.
"""

from typing import Any

from devcontext.mcp_types import (
    ToolContext,
    ToolHandlerResult,
    ToolInput,
)
from devcontext.tools.base import BaseTool


class SearchPatternsTool(BaseTool):
    """
    Search every pattern for a keyword.

    Matching is plain case-insensitive containment; results come back in
    category order with no ranking.
    """

    @property
    def name(self) -> str:
        return "search-patterns"

    @property
    def description(self) -> str:
        return """Search for patterns containing specific keywords.

REQUIRED: query

Matching is case-insensitive: "tailwind" finds patterns mentioning "Tailwind"."""

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Search query"
                }
            },
            "required": ["query"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute search-patterns."""
        validation = self.validateInput(input)
        if not validation.valid:
            return self.invalidInputResult(validation)

        query = input.get("query")

        try:
            result = self.repository.search(query)
        except Exception as e:
            return await self.handleError(e, context)

        if result.failures:
            self.logger.warning(
                f"Search for '{query}' skipped {len(result.failures)} unreadable entries"
            )

        self.logExecution(input, context, True)

        if not result.hits:
            return ToolHandlerResult(
                success=True,
                result=self.createSuccessResult(f"No patterns found containing '{query}'")
            )

        lines = "\n".join(f"- {hit.path}" for hit in result.hits)
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(f"Patterns containing '{query}':\n{lines}")
        )
