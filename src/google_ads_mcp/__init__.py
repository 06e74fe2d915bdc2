"""Google Ads MCP Server.

A Model Context Protocol server exposing Google Ads reporting (accounts,
campaigns, ad groups and ads) as tools.
"""

__version__ = "1.0.0"

from google_ads_mcp.server import create_mcp_server

__all__ = ["create_mcp_server"]
