"""Web search tool — simulated results, no search backend is called."""
import logging

from ..registry import register_tool, ToolResult, ToolParam

logger = logging.getLogger(__name__)

_NOTE = (
    "This is a simulated search result. In production, this would connect "
    "to a real search API like Google, Bing, or Brave Search."
)


@register_tool(
    "web_search",
    description="Search the web for current information, news, or facts",
    params=[
        ToolParam("query", description="the search query"),
    ],
    category="info",
)
async def web_search(query: str = "", **kwargs) -> ToolResult:
    results = [
        {
            "title": f'Information about "{query}"',
            "snippet": (
                f'This is simulated search result for "{query}". In a production system, '
                f"this would connect to a real search API like Google, Bing, or Brave Search."
            ),
            "url": "https://example.com",
        }
    ]
    return ToolResult(data={"query": query, "results": results, "note": _NOTE})
