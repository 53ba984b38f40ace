"""
DevContext MCP Server
Serves categorized development patterns as MCP resources and tools.
"""

__version__ = "1.0.0"
__package_name__ = "devcontext-server"
