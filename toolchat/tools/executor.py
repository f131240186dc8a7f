"""Tool executor — dispatches a tool call by name through the registry."""
import logging
import time
from typing import Any, Dict, Optional

from .registry import get_tool, ToolResult

logger = logging.getLogger(__name__)


async def execute_tool(tool_name: str, args: Optional[Dict[str, Any]] = None) -> ToolResult:
    """Execute a registered tool by name.

    Never raises: unknown tools and handler failures come back as error results.
    Parameter schemas are descriptive only and are not validated here.
    """
    tool = get_tool(tool_name)
    if not tool:
        logger.warning(f"Unknown tool: {tool_name}")
        return ToolResult.failure(f"Unknown tool: {tool_name}")

    args = dict(args or {})
    arg_str = ", ".join(f"{k}={v!r}" for k, v in args.items())
    logger.info(f"Executing tool: {tool_name}({arg_str})")
    t0 = time.monotonic()

    try:
        result = await tool.handler(**args)
    except Exception as e:
        logger.error(f"Tool {tool_name} failed: {e}", exc_info=True)
        result = ToolResult.failure(f"Tool execution failed: {e}")

    elapsed = time.monotonic() - t0
    status = "ok" if result.ok else f"error={result.error!r}"
    logger.info(f"Tool {tool_name}: {elapsed * 1000:.1f}ms -> {status}")
    return result
