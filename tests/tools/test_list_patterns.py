"""Tests for ListPatternsTool."""

import pytest
from devcontext.tools.list_patterns import ListPatternsTool
from devcontext.mcp_types import MCPErrorCode, ToolInput


@pytest.mark.asyncio
class TestListPatternsTool:
    """Test ListPatternsTool."""
    
    async def test_requires_category(self, logger, repository, mock_context):
        tool = ListPatternsTool(logger, repository)
        
        result = await tool.execute(ToolInput(), mock_context)
        
        assert not result.success
        assert "required" in result.error.message.lower()
    
    async def test_lists_patterns(self, logger, repository, mock_context):
        """Should list names without extensions."""
        tool = ListPatternsTool(logger, repository)
        
        result = await tool.execute(ToolInput(category="architecture"), mock_context)
        
        assert result.success
        text = result.result.content[0].text
        assert text.startswith("Available patterns in 'architecture':")
        assert "- frontend" in text
        assert "- backend" in text
        assert "notes" not in text
    
    async def test_unknown_category(self, logger, repository, mock_context):
        tool = ListPatternsTool(logger, repository)
        
        result = await tool.execute(ToolInput(category="missing"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.RESOURCE_NOT_FOUND
