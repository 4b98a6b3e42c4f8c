"""Tool catalog and request dispatch"""
from .catalog import TOOLS, TOOL_NAMES, list_tools
from .dispatch import build_request

__all__ = ["TOOLS", "TOOL_NAMES", "list_tools", "build_request"]
