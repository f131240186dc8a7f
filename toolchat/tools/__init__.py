"""Tool system — registry, router, executor."""
from .registry import register_tool, get_tool, all_tools, list_tools, tool_descriptions, ToolResult, ToolParam, ToolDef
from .router import classify, Intent
from .executor import execute_tool

# Auto-import builtin tools to trigger @register_tool decorators
from .builtin import *  # noqa
