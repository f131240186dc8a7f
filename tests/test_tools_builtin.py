"""Tests for builtin tools — search, calculator, weather, currency."""
from unittest.mock import patch

import pytest

from toolchat.config import settings
from toolchat.tools.registry import ToolResult


# ──────────────────────────────────────────────────────────
# Search
# ──────────────────────────────────────────────────────────

class TestWebSearch:
    @pytest.mark.asyncio
    async def test_single_synthetic_result(self):
        from toolchat.tools.builtin.search import web_search
        result = await web_search(query="python asyncio")
        assert result.ok
        assert result.get("query") == "python asyncio"
        assert len(result.get("results")) == 1
        item = result.get("results")[0]
        assert set(item) == {"title", "snippet", "url"}
        assert "python asyncio" in item["title"]
        assert "python asyncio" in item["snippet"]

    @pytest.mark.asyncio
    async def test_empty_query_still_succeeds(self):
        from toolchat.tools.builtin.search import web_search
        result = await web_search(query="")
        assert result.ok


# ──────────────────────────────────────────────────────────
# Calculator
# ──────────────────────────────────────────────────────────

class TestSanitizeExpression:
    def test_strips_letters(self):
        from toolchat.tools.builtin.calculator import sanitize_expression
        assert sanitize_expression("2 + abc3") == "2 + 3"

    def test_strips_code(self):
        from toolchat.tools.builtin.calculator import sanitize_expression
        assert sanitize_expression("__import__('os').system('ls')") == "().()"

    def test_idempotent(self):
        from toolchat.tools.builtin.calculator import sanitize_expression
        for raw in ["1+1", "x = 4 ** 2; y", "(3.5 * 2) / 7 !", "¼ + ½"]:
            once = sanitize_expression(raw)
            assert sanitize_expression(once) == once

    def test_keeps_allowed(self):
        from toolchat.tools.builtin.calculator import sanitize_expression
        assert sanitize_expression("(1.5 + 2) * 3 / 4 - 5") == "(1.5 + 2) * 3 / 4 - 5"


class TestEvaluate:
    @pytest.mark.parametrize("expr,expected", [
        ("15 * 23 + 45", 390),
        ("2 + 3 * 4", 14),
        ("(2 + 3) * 4", 20),
        ("10 / 4", 2.5),
        ("6 / 3", 2),
        ("-5 + 2", -3),
        ("1.5 * 2", 3),
        ("0.1 + 0.2", 0.1 + 0.2),
    ])
    def test_arithmetic(self, expr, expected):
        from toolchat.tools.builtin.calculator import evaluate
        assert evaluate(expr) == expected

    def test_integral_result_is_int(self):
        from toolchat.tools.builtin.calculator import evaluate
        assert isinstance(evaluate("6 / 3"), int)

    @pytest.mark.parametrize("expr", [
        "1 / 0",
        "2 **",
        "()",
        "",
        "2 ** 8",
        "7 // 2",
        "1 2",
        "+",
    ])
    def test_rejected(self, expr):
        from toolchat.tools.builtin.calculator import evaluate, ExpressionError
        with pytest.raises(ExpressionError):
            evaluate(expr)

    def test_disallowed_chars_stripped_before_eval(self):
        from toolchat.tools.builtin.calculator import evaluate
        assert evaluate("2 apples + 3 pears") == 5

    def test_past_float_range_rejected(self):
        from toolchat.tools.builtin.calculator import evaluate, ExpressionError
        with pytest.raises(ExpressionError):
            evaluate(" * ".join(["10000000000"] * 35))

    def test_overflow_then_cancel_is_not_finite(self):
        from toolchat.tools.builtin.calculator import evaluate, ExpressionError
        huge = " * ".join(["9" * 99] * 4)
        with pytest.raises(ExpressionError):
            evaluate(f"{huge} - {huge}")

    def test_large_but_finite(self):
        from toolchat.tools.builtin.calculator import evaluate
        assert evaluate("123456789 * 1000000") == 123456789000000
        big = evaluate("1" + "0" * 300)
        assert isinstance(big, int)
        assert big == int(1e300)


class TestCalculatorTool:
    @pytest.mark.asyncio
    async def test_result(self):
        from toolchat.tools.builtin.calculator import calculator
        result = await calculator(expression="15 * 23 + 45")
        assert isinstance(result, ToolResult)
        assert result.ok
        assert result.to_dict() == {"expression": "15 * 23 + 45", "result": 390}

    @pytest.mark.asyncio
    async def test_division_by_zero(self):
        from toolchat.tools.builtin.calculator import calculator
        result = await calculator(expression="5 / 0")
        assert result.to_dict() == {"error": "Invalid mathematical expression"}

    @pytest.mark.asyncio
    async def test_malformed(self):
        from toolchat.tools.builtin.calculator import calculator
        result = await calculator(expression="((1 +")
        assert result.error == "Invalid mathematical expression"

    @pytest.mark.asyncio
    async def test_code_never_evaluated(self):
        from toolchat.tools.builtin.calculator import calculator
        result = await calculator(expression="__import__('os').getcwd()")
        assert result.error == "Invalid mathematical expression"

    @pytest.mark.asyncio
    async def test_huge_product_is_error(self):
        from toolchat.tools.builtin.calculator import calculator
        result = await calculator(expression=" * ".join(["9" * 99] * 45))
        assert result.to_dict() == {"error": "Invalid mathematical expression"}


# ──────────────────────────────────────────────────────────
# Weather
# ──────────────────────────────────────────────────────────

class TestGetWeather:
    @pytest.mark.asyncio
    async def test_shape(self):
        from toolchat.tools.builtin.weather import get_weather, CONDITIONS
        result = await get_weather(location="paris")
        assert result.ok
        assert result.get("location") == "paris"
        assert result.get("condition") in CONDITIONS
        assert result.get("temperature").endswith("°C")
        assert result.get("humidity").endswith("%")

    @pytest.mark.asyncio
    async def test_ranges(self):
        from toolchat.tools.builtin.weather import get_weather
        for _ in range(50):
            result = await get_weather(location="x")
            assert 10 <= int(result.get("temperature")[:-2]) <= 39
            assert 40 <= int(result.get("humidity")[:-1]) <= 79

    @pytest.mark.asyncio
    async def test_sampled_values(self):
        from toolchat.tools.builtin.weather import get_weather
        with patch("toolchat.tools.builtin.weather.random") as mock_random:
            mock_random.choice.return_value = "Rainy"
            mock_random.randint.side_effect = [21, 55]
            result = await get_weather(location="london")
        assert result.get("condition") == "Rainy"
        assert result.get("temperature") == "21°C"
        assert result.get("humidity") == "55%"


# ──────────────────────────────────────────────────────────
# Currency
# ──────────────────────────────────────────────────────────

class TestCurrencyConverter:
    @pytest.mark.asyncio
    async def test_usd_to_eur(self):
        from toolchat.tools.builtin.currency import currency_converter
        result = await currency_converter(**{"amount": 100.0, "from": "USD", "to": "EUR"})
        assert result.ok
        assert result.get("result") == 92.0
        assert result.get("from") == "USD"
        assert result.get("to") == "EUR"

    @pytest.mark.asyncio
    async def test_known_pairs_match_formula(self):
        from toolchat.tools.builtin.currency import currency_converter, RATES
        for src in RATES:
            for dst in RATES:
                result = await currency_converter(**{"amount": 37.5, "from": src, "to": dst})
                assert result.get("result") == round(37.5 / RATES[src] * RATES[dst], 2)

    @pytest.mark.asyncio
    async def test_lowercase_codes(self):
        from toolchat.tools.builtin.currency import currency_converter
        result = await currency_converter(**{"amount": 10, "from": "gbp", "to": "usd"})
        assert result.get("from") == "GBP"
        assert result.get("result") == round(10 / 0.79, 2)

    @pytest.mark.asyncio
    async def test_unknown_code_falls_back_to_neutral_rate(self):
        from toolchat.tools.builtin.currency import currency_converter
        with patch.object(settings, "strict_currency_codes", False):
            result = await currency_converter(**{"amount": 50, "from": "XYZ", "to": "EUR"})
        assert result.ok
        assert result.get("result") == 46.0

    @pytest.mark.asyncio
    async def test_unknown_code_strict(self):
        from toolchat.tools.builtin.currency import currency_converter
        with patch.object(settings, "strict_currency_codes", True):
            result = await currency_converter(**{"amount": 50, "from": "USD", "to": "ABC"})
        assert result.to_dict() == {"error": "Unsupported currency code: ABC"}

    @pytest.mark.asyncio
    async def test_strict_allows_known(self):
        from toolchat.tools.builtin.currency import currency_converter
        with patch.object(settings, "strict_currency_codes", True):
            result = await currency_converter(**{"amount": 1, "from": "USD", "to": "JPY"})
        assert result.get("result") == 148.5

