"""
Get Pattern Tool

Fetch one pattern by category and (possibly partial) name.
"""

from typing import Any

from devcontext.mcp_types import (
    ToolContext,
    ToolHandlerResult,
    ToolInput,
)
from devcontext.patterns import PatternError, PatternNotFoundError
from devcontext.tools.base import BaseTool


class GetPatternTool(BaseTool):
    """
    Get a specific development pattern.

    Exact name matches win; otherwise the first filename (in lexical
    order) containing the requested name is returned.
    """

    @property
    def name(self) -> str:
        return "get-pattern"

    @property
    def description(self) -> str:
        return """Get a specific development pattern by category and name.

REQUIRED: category, pattern

Partial names are accepted: "front" finds "frontend" when no pattern is
named exactly "front". Use list-patterns to see what a category holds.

Examples:
- get-pattern("architecture", "frontend")
- get-pattern("components", "ui")"""

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Pattern category (e.g. architecture, components, auth, naming, logging, api)"
                },
                "pattern": {
                    "type": "string",
                    "description": "Specific pattern name (exact or partial)"
                }
            },
            "required": ["category", "pattern"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute get-pattern."""
        validation = self.validateInput(input)
        if not validation.valid:
            return self.invalidInputResult(validation)

        category = input.get("category")
        pattern = input.get("pattern")

        try:
            resolved = self.repository.resolve_pattern(category, pattern)
        except PatternNotFoundError as e:
            # Not a failure: tell the caller what they can ask for instead
            self.logger.debug(f"Pattern '{pattern}' not found in '{category}'")
            self.logExecution(input, context, True)
            return ToolHandlerResult(
                success=True,
                result=self.createSuccessResult(str(e))
            )
        except PatternError as e:
            return self.handlePatternError(e, "Failed to get pattern")
        except Exception as e:
            return await self.handleError(e, context)

        if not resolved.exact:
            self.logger.debug(f"Resolved '{category}/{pattern}' to {resolved.item.filename}")

        self.logExecution(input, context, True)
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(resolved.content)
        )
