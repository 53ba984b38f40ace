"""
Tools Module

The 4 MCP tools for DevContext:
- get-pattern: Fetch a pattern by category and name
- list-patterns: List patterns in a category
- search-patterns: Keyword search across all patterns
- get-project-template: Project structure for a stack
"""

from .base import BaseTool
from .registry import ToolRegistry, ToolMonitoring

from .get_pattern import GetPatternTool
from .list_patterns import ListPatternsTool
from .search import SearchPatternsTool
from .template import GetProjectTemplateTool

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "ToolMonitoring",
    "GetPatternTool",
    "ListPatternsTool",
    "SearchPatternsTool",
    "GetProjectTemplateTool",
]
