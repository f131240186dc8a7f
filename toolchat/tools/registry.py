"""Tool registry — decorator-based tool registration and lookup.

The registry is the tool catalogue used for execution lookup and
self-description. It is not consulted by the intent router.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ToolParam:
    name: str
    type: str = "string"
    description: str = ""
    required: bool = True


@dataclass(frozen=True)
class ToolResult:
    """Structured tool output: tool-specific fields, or an error message."""
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        return dict(self.data)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(error=message)


@dataclass
class ToolDef:
    name: str
    description: str
    params: List[ToolParam]
    handler: Callable[..., Awaitable[ToolResult]]
    category: str = ""

    @property
    def parameter_schema(self) -> Dict[str, str]:
        """Map of parameter name to "type - meaning" (documentation only)."""
        return {p.name: f"{p.type} - {p.description}" for p in self.params}


_tools: Dict[str, ToolDef] = {}


def register_tool(
    name: str,
    description: str = "",
    params: Optional[List[ToolParam]] = None,
    category: str = "",
):
    """Decorator to register a tool function.

    Registering an existing name replaces its handler, so a real backend can
    take over a mocked tool without touching the router or renderer.
    """
    def decorator(func):
        tool = ToolDef(
            name=name,
            description=description or func.__doc__ or "",
            params=params or [],
            handler=func,
            category=category,
        )
        if name in _tools:
            logger.info(f"Replacing tool: {name}")
        _tools[name] = tool
        logger.info(f"Registered tool: {name}")
        return func
    return decorator


def get_tool(name: str) -> Optional[ToolDef]:
    return _tools.get(name)


def all_tools() -> Dict[str, ToolDef]:
    return dict(_tools)


def list_tools() -> List[ToolDef]:
    return [_tools[name] for name in sorted(_tools)]


def tool_descriptions() -> str:
    """Generate a plain-text tool list, one line per tool."""
    lines = []
    for tool in list_tools():
        params = []
        for p in tool.params:
            req = "required" if p.required else "optional"
            params.append(f"{p.name}({req}): {p.description}")
        params_text = ", ".join(params) if params else "none"
        lines.append(f"- {tool.name}: {tool.description} | params: {params_text}")
    return "\n".join(lines)
