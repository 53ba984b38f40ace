"""Tests for GetProjectTemplateTool."""

import pytest
from devcontext.tools.template import GetProjectTemplateTool
from devcontext.mcp_types import MCPErrorCode, ToolInput
from devcontext.patterns import MemoryStore, PatternRepository


@pytest.mark.asyncio
class TestGetProjectTemplateTool:
    """Test GetProjectTemplateTool."""
    
    async def test_section(self, logger, repository, mock_context):
        """Should return only the stack's section."""
        tool = GetProjectTemplateTool(logger, repository)
        
        result = await tool.execute(ToolInput(stack="express-api"), mock_context)
        
        assert result.success
        # Last section runs to end of file, trailing newline included
        assert result.result.content[0].text == "## Express API\nsrc/routes/\n"
    
    async def test_unknown_stack_rejected(self, logger, repository, mock_context):
        tool = GetProjectTemplateTool(logger, repository)
        
        result = await tool.execute(ToolInput(stack="django"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.INVALID_INPUT
    
    async def test_missing_template_document(self, logger, mock_context):
        repo = PatternRepository(MemoryStore({}))
        tool = GetProjectTemplateTool(logger, repo)
        
        result = await tool.execute(ToolInput(stack="nextjs"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.RESOURCE_NOT_FOUND
