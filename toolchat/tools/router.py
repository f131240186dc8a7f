"""Rule-based intent router — ordered regex cascade over the user's utterance.

Each rule is a (predicate, extractor) pair. A rule fires only when its
predicate matches AND its extractor returns parameters; an extractor that
returns None lets evaluation fall through to the next rule. First firing
rule wins.

The rule table is independent of the tool registry: registering a tool does
not make it routable until a rule here points at it.
"""
import re
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any, List, Callable

from ..config import settings

logger = logging.getLogger(__name__)

Extractor = Callable[[str], Optional[Dict[str, Any]]]


@dataclass(frozen=True)
class Intent:
    needs_tool: bool
    tool_name: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None

    @classmethod
    def none(cls) -> "Intent":
        return cls(needs_tool=False)


@dataclass(frozen=True)
class Rule:
    tool: str
    predicate: re.Pattern
    extractor: Extractor


_RULES: List[Rule] = []


# ── Calculator ────────────────────────────────────────

_EXPRESSION_RUN = re.compile(r"[\d+\-*/().\s]+")


def _extract_expression(text: str) -> Optional[Dict[str, Any]]:
    """Longest run of arithmetic characters; must contain a digit."""
    runs = _EXPRESSION_RUN.findall(text)
    if not runs:
        return None
    expression = max(runs, key=len).strip()
    if not any(ch.isdigit() for ch in expression):
        return None
    return {"expression": expression}


# ── Weather ───────────────────────────────────────────

_LOCATION_PATTERNS = [
    re.compile(r"\bin\s+([a-z\s]+)", re.IGNORECASE),
    re.compile(r"\bfor\s+([a-z\s]+)", re.IGNORECASE),
    re.compile(r"\bat\s+([a-z\s]+)", re.IGNORECASE),
    re.compile(r"\bweather\s+([a-z\s]+)", re.IGNORECASE),
]


def _extract_location(text: str) -> Optional[Dict[str, Any]]:
    lowered = text.lower()
    for pattern in _LOCATION_PATTERNS:
        m = pattern.search(lowered)
        if m and m.group(1).strip():
            return {"location": m.group(1).strip()}
    return {"location": settings.weather_default_city}


# ── Currency ──────────────────────────────────────────

_AMOUNT = re.compile(r"(\d+\.?\d*)")
_CURRENCY_PAIRS = [
    re.compile(r"\b([a-z]{3})\s+to\s+([a-z]{3})\b", re.IGNORECASE),
    re.compile(r"\bfrom\s+([a-z]{3})\s+to\s+([a-z]{3})\b", re.IGNORECASE),
]


def _extract_conversion(text: str) -> Optional[Dict[str, Any]]:
    amount = _AMOUNT.search(text)
    if not amount:
        return None
    for pattern in _CURRENCY_PAIRS:
        m = pattern.search(text)
        if m:
            return {
                "amount": float(amount.group(1)),
                "from": m.group(1).upper(),
                "to": m.group(2).upper(),
            }
    return None


def _build_rules():
    global _RULES

    rules = [
        (r"calculate|compute|what is|solve|\+|-|\*|/|\d+\s*[+\-*/]",
         "calculator",
         _extract_expression),

        (r"weather|temperature|forecast|climate",
         "get_weather",
         _extract_location),

        (r"convert|currency|exchange|usd|eur|gbp|jpy",
         "currency_converter",
         _extract_conversion),

        (r"search|find|look up|who is|what is|when did|where is|how to",
         "web_search",
         lambda text: {"query": text}),
    ]

    _RULES.clear()
    for pattern, tool, extractor in rules:
        _RULES.append(Rule(tool=tool, predicate=re.compile(pattern, re.IGNORECASE), extractor=extractor))


def classify(text: str) -> Intent:
    """Run the cascade over text. Returns Intent.none() when nothing fires."""
    text = text.strip()
    for rule in _RULES:
        if not rule.predicate.search(text):
            continue
        params = rule.extractor(text)
        if params is None:
            logger.debug(f"Router: '{text}' matched {rule.tool} vocabulary, extraction missed")
            continue
        logger.info(f"Router matched: '{text}' -> {rule.tool}({params})")
        return Intent(needs_tool=True, tool_name=rule.tool, parameters=params)
    return Intent.none()


_build_rules()
