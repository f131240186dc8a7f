"""Currency converter — static mock exchange rates, quoted against USD."""
import logging
from typing import Dict

from ..registry import register_tool, ToolResult, ToolParam
from ...config import settings

logger = logging.getLogger(__name__)

RATES: Dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 148.5,
    "CAD": 1.36,
    "AUD": 1.52,
}
FALLBACK_RATE = 1.0

_NOTE = (
    "This uses simulated exchange rates. In production, this would use "
    "real-time rates from a currency API."
)


def _rate(code: str) -> float:
    rate = RATES.get(code)
    if rate is None:
        logger.warning(f"Unknown currency code {code!r}, using rate {FALLBACK_RATE}")
        return FALLBACK_RATE
    return rate


def convert(amount: float, from_code: str, to_code: str) -> float:
    """Convert via USD, rounded to 2 decimal places."""
    return round(amount / _rate(from_code) * _rate(to_code), 2)


@register_tool(
    "currency_converter",
    description="Convert between different currencies",
    params=[
        ToolParam("amount", type="number", description="the amount to convert"),
        ToolParam("from", description="source currency code (e.g., USD)"),
        ToolParam("to", description="target currency code (e.g., EUR)"),
    ],
    category="finance",
)
async def currency_converter(amount: float = 0, to: str = "", **kwargs) -> ToolResult:
    # "from" is a keyword, so it only arrives through kwargs
    from_code = str(kwargs.get("from", "")).upper()
    to_code = str(to).upper()

    if settings.strict_currency_codes:
        unknown = [c for c in (from_code, to_code) if c not in RATES]
        if unknown:
            return ToolResult.failure(f"Unsupported currency code: {unknown[0]}")

    return ToolResult(data={
        "amount": amount,
        "from": from_code,
        "to": to_code,
        "result": convert(amount, from_code, to_code),
        "note": _NOTE,
    })
