#!/usr/bin/env python3
"""MCP server for the Sleeper fantasy API.

Run with: python mcp_server.py
Then register it as a stdio server in your MCP client (e.g. Claude Desktop).
"""

import sys

from sleeper_mcp.server import run

if __name__ == "__main__":
    sys.exit(run())
