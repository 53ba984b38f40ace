"""Tests for ToolRegistry."""

import pytest
from unittest.mock import AsyncMock
from devcontext.tools import ToolRegistry, ListPatternsTool
from devcontext.mcp_types import ToolHandlerResult


class TestToolRegistry:
    """Test ToolRegistry."""
    
    def test_register(self, logger, repository):
        registry = ToolRegistry(logger)
        registry.register(ListPatternsTool(logger, repository))
        
        assert registry.hasTool("list-patterns")
        assert [t.name for t in registry.getToolSchemas()] == ["list-patterns"]
    
    def test_register_twice_fails(self, logger, repository):
        registry = ToolRegistry(logger)
        registry.register(ListPatternsTool(logger, repository))
        
        with pytest.raises(ValueError):
            registry.register(ListPatternsTool(logger, repository))
    
    def test_unregister(self, logger, repository):
        registry = ToolRegistry(logger)
        registry.register(ListPatternsTool(logger, repository))
        
        assert registry.unregister("list-patterns")
        assert not registry.hasTool("list-patterns")
        assert not registry.unregister("list-patterns")
    
    @pytest.mark.asyncio
    async def test_execute_records_metrics(self, logger, repository, mock_context):
        registry = ToolRegistry(logger)
        registry.register(ListPatternsTool(logger, repository))
        
        ok = await registry.execute("list-patterns", {"category": "architecture"}, mock_context)
        bad = await registry.execute("list-patterns", {"category": "missing"}, mock_context)
        
        assert ok.success
        assert not bad.success
        metrics = registry.getMetrics("list-patterns")
        assert metrics.totalExecutions == 2
        assert metrics.successfulExecutions == 1
        assert metrics.failedExecutions == 1
        assert metrics.errorRate == 0.5
    
    @pytest.mark.asyncio
    async def test_execute_unknown(self, logger, mock_context):
        registry = ToolRegistry(logger)
        
        with pytest.raises(ValueError):
            await registry.execute("nope", {}, mock_context)
    
    @pytest.mark.asyncio
    async def test_handler_exception_becomes_failure(self, logger, repository, mock_context):
        registry = ToolRegistry(logger)
        tool = ListPatternsTool(logger, repository)
        registry.register(tool)
        registry.handlers["list-patterns"] = AsyncMock(side_effect=RuntimeError("boom"))
        
        result = await registry.execute("list-patterns", {}, mock_context)
        
        assert not result.success
        assert result.execution.status == "failed"
        assert "boom" in result.error.message
