"""Weather tool — simulated current conditions for a location."""
import logging
import random

from ..registry import register_tool, ToolResult, ToolParam

logger = logging.getLogger(__name__)

CONDITIONS = ("Sunny", "Cloudy", "Rainy", "Partly Cloudy", "Clear")
TEMPERATURE_RANGE = (10, 39)  # °C, inclusive
HUMIDITY_RANGE = (40, 79)  # %, inclusive

_NOTE = (
    "This is simulated weather data. In production, this would connect "
    "to a real weather API."
)


@register_tool(
    "get_weather",
    description="Get current weather information for a location",
    params=[
        ToolParam("location", description="the city or location name"),
    ],
    category="info",
)
async def get_weather(location: str = "", **kwargs) -> ToolResult:
    condition = random.choice(CONDITIONS)
    temperature = random.randint(*TEMPERATURE_RANGE)
    humidity = random.randint(*HUMIDITY_RANGE)
    return ToolResult(data={
        "location": location,
        "condition": condition,
        "temperature": f"{temperature}°C",
        "humidity": f"{humidity}%",
        "note": _NOTE,
    })
