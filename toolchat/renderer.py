"""Response renderer — turns a tool result, or its absence, into reply text.

Same inputs always give the same string: templates are fixed and nothing
here reads random or external state.
"""
import re
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from .tools.registry import ToolResult

logger = logging.getLogger(__name__)

GREETING_REPLY = (
    "Hello! I'm an agentic AI assistant. I can help you with calculations, weather "
    "information, web searches, and currency conversions. What would you like to know?"
)

STATUS_REPLY = (
    "I'm functioning perfectly! Ready to assist you with various tasks. "
    "What can I help you with today?"
)

CAPABILITIES_REPLY = (
    "I'm an agentic AI with the following capabilities:\n\n"
    "🔍 Web Search - Find current information\n"
    "🧮 Calculator - Perform mathematical calculations\n"
    "🌤️ Weather - Get weather information for any location\n"
    "💱 Currency Converter - Convert between different currencies\n\n"
    "Try asking me something like:\n"
    '- "What\'s the weather in Paris?"\n'
    '- "Calculate 15 * 23 + 45"\n'
    '- "Convert 100 USD to EUR"'
)

FALLBACK_REPLY = (
    "I understand your message. I can help with calculations, weather queries, web "
    "searches, and currency conversions. Could you please provide more specific "
    "details about what you'd like me to do?"
)

GENERIC_TOOL_REPLY = "I executed the tool successfully."

ERROR_REPLY = "Sorry, I couldn't complete that request: {error}"


def _render_calculator(r: Mapping[str, Any]) -> str:
    return f"I calculated the result: {r.get('expression')} = {r.get('result')}"


def _render_weather(r: Mapping[str, Any]) -> str:
    return (
        f"The weather in {r.get('location')} is currently {r.get('condition')} "
        f"with a temperature of {r.get('temperature')} and humidity at {r.get('humidity')}."
    )


def _render_currency(r: Mapping[str, Any]) -> str:
    amount = r.get("amount")
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    result = r.get("result")
    if isinstance(result, (int, float)):
        result = f"{result:.2f}"
    return f"Converting {amount} {r.get('from')} to {r.get('to')}: {result} {r.get('to')}"


def _render_search(r: Mapping[str, Any]) -> str:
    results = r.get("results") or []
    snippet = results[0].get("snippet", "") if results else "No results found."
    return f'I found information about "{r.get("query")}":\n\n{snippet}'


_TOOL_TEMPLATES: Dict[str, Callable[[Mapping[str, Any]], str]] = {
    "calculator": _render_calculator,
    "get_weather": _render_weather,
    "currency_converter": _render_currency,
    "web_search": _render_search,
}

# Conversational fallbacks, checked in order. Greeting words match whole
# words only, so "which" or "this" do not count as "hi".
_CHAT_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"\b(?:hello|hi|hey|greetings)\b", re.IGNORECASE), GREETING_REPLY),
    (re.compile(r"how are you|what's up", re.IGNORECASE), STATUS_REPLY),
    (re.compile(r"what can you do|capabilities|help", re.IGNORECASE), CAPABILITIES_REPLY),
]


def render(
    utterance: str,
    tool_result: Optional[Union[ToolResult, Mapping[str, Any]]] = None,
    tool_name: Optional[str] = None,
) -> str:
    """Render the assistant reply for one turn."""
    if tool_result is not None and tool_name:
        if isinstance(tool_result, ToolResult):
            tool_result = tool_result.to_dict()

        if tool_result.get("error"):
            return ERROR_REPLY.format(error=tool_result["error"])

        template = _TOOL_TEMPLATES.get(tool_name)
        if template is None:
            logger.warning(f"No reply template for tool: {tool_name}")
            return GENERIC_TOOL_REPLY
        return template(tool_result)

    for pattern, reply in _CHAT_RULES:
        if pattern.search(utterance):
            return reply
    return FALLBACK_REPLY
