"""Tests for GetPatternTool."""

import pytest
from unittest.mock import Mock
from devcontext.tools.get_pattern import GetPatternTool
from devcontext.mcp_types import MCPErrorCode, ToolInput
from devcontext.patterns import StoreIOError


@pytest.mark.asyncio
class TestGetPatternTool:
    """Test GetPatternTool."""
    
    async def test_requires_category_and_pattern(self, logger, repository, mock_context):
        """Should return error when inputs are missing."""
        tool = GetPatternTool(logger, repository)
        
        result = await tool.execute(ToolInput(pattern="frontend"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.INVALID_INPUT
        assert "category" in result.error.message
        assert result.result.isError
    
    async def test_rejects_non_string(self, logger, repository, mock_context):
        tool = GetPatternTool(logger, repository)
        
        result = await tool.execute(ToolInput(category="architecture", pattern=3), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.INVALID_INPUT
    
    async def test_exact_match(self, logger, repository, mock_context, contexts_root):
        """Should return the pattern content."""
        tool = GetPatternTool(logger, repository)
        
        result = await tool.execute(ToolInput(category="architecture", pattern="backend"), mock_context)
        
        assert result.success
        expected = (contexts_root / "architecture" / "backend.md").read_text()
        assert result.result.content[0].text == expected
    
    async def test_partial_name(self, logger, repository, mock_context):
        """'front' resolves to frontend.md."""
        tool = GetPatternTool(logger, repository)
        
        result = await tool.execute(ToolInput(category="architecture", pattern="front"), mock_context)
        
        assert result.success
        assert result.result.content[0].text.startswith("# Frontend")
    
    async def test_not_found_lists_available(self, logger, repository, mock_context):
        """Unknown pattern is not an error; it lists what exists."""
        tool = GetPatternTool(logger, repository)
        
        result = await tool.execute(ToolInput(category="architecture", pattern="zzz"), mock_context)
        
        assert result.success
        text = result.result.content[0].text
        assert "Pattern 'zzz' not found in category 'architecture'" in text
        assert "frontend" in text and "backend" in text
    
    async def test_unknown_category(self, logger, repository, mock_context):
        tool = GetPatternTool(logger, repository)
        
        result = await tool.execute(ToolInput(category="missing", pattern="x"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.RESOURCE_NOT_FOUND
        assert "missing" in result.error.message
    
    async def test_io_failure(self, logger, mock_context):
        """Store read failures surface as IO errors."""
        repo = Mock()
        repo.resolve_pattern.side_effect = StoreIOError("a/b.md", PermissionError("denied"))
        tool = GetPatternTool(logger, repo)
        
        result = await tool.execute(ToolInput(category="a", pattern="b"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.IO_ERROR
        logger.error.assert_called_once()
    
    async def test_unexpected_error(self, logger, mock_context):
        repo = Mock()
        repo.resolve_pattern.side_effect = RuntimeError("boom")
        tool = GetPatternTool(logger, repo)
        
        result = await tool.execute(ToolInput(category="a", pattern="b"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.INTERNAL_ERROR
