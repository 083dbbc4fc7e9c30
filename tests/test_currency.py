"""Tests for exchange rates, conversion and the budget aggregation."""

from decimal import Decimal

import httpx
import pytest

from tripplanner.core.cache import RedisCache
from tripplanner.services.budget.budget_service import summarize
from tripplanner.utils import currency
from tripplanner.utils.currency import convert, currency_symbol, default_rates, get_rates, quantize

# Bound before the autouse fixture swaps in the offline stub
real_fetch_live_rates = currency.fetch_live_rates


class TestRates:
    def test_default_rates_in_shekels(self):
        rates = default_rates("ILS")
        assert rates["ILS"] == Decimal("1")
        assert rates["USD"] == Decimal("3.65")

    def test_default_rates_rebased(self):
        rates = default_rates("USD")
        assert rates["USD"] == Decimal("1")
        assert quantize(rates["EUR"]) == pytest.approx(1.08, abs=0.01)

    def test_unknown_base_only_knows_itself(self):
        assert default_rates("XYZ") == {"XYZ": Decimal("1")}

    def test_unknown_currency_converts_at_one(self):
        assert convert(Decimal("10"), "XYZ", {"USD": Decimal("3")}) == Decimal("10")

    def test_missing_currency_treated_as_usd(self):
        assert convert(Decimal("2"), None, {"USD": Decimal("3")}) == Decimal("6")

    def test_symbols(self):
        assert currency_symbol("eur") == "€"
        assert currency_symbol("XYZ") == "XYZ"


class TestGetRates:
    @pytest.mark.asyncio
    async def test_falls_back_to_default_table(self):
        rates, source = await get_rates("ILS")
        assert source == "default"
        assert rates["USD"] == Decimal("3.65")

    @pytest.mark.asyncio
    async def test_live_rates_are_cached(self, monkeypatch, fake_redis):
        calls = []

        async def live(base):
            calls.append(base)
            return {"USD": Decimal("3.5"), "ILS": Decimal("1")}

        monkeypatch.setattr(currency, "fetch_live_rates", live)
        cache = RedisCache(fake_redis)

        rates, source = await get_rates("ils", cache)
        assert source == "live"
        assert rates["USD"] == Decimal("3.5")

        rates, source = await get_rates("ILS", cache)
        assert source == "live"
        assert rates["USD"] == Decimal("3.5")
        assert calls == ["ILS"]

    @pytest.mark.asyncio
    async def test_live_table_gaps_use_default_rates(self, monkeypatch):
        async def partial(base):
            return {"USD": Decimal("3.6"), "ILS": Decimal("1")}

        monkeypatch.setattr(currency, "fetch_live_rates", partial)
        rates, source = await get_rates("ILS")
        assert source == "live"
        assert rates["USD"] == Decimal("3.6")
        assert rates["EUR"] == Decimal("3.95")

        summary = summarize({"hotels": [(Decimal("100"), "EUR", "pending")]}, rates)
        assert summary["total_unpaid"] == Decimal("395")


@pytest.fixture
def rates_api(monkeypatch):
    """Route the exchange-rate client through an in-process transport."""
    requests = []
    real_client = httpx.AsyncClient

    def install(handler):
        def recording(request):
            requests.append(request)
            return handler(request)

        monkeypatch.setattr(
            currency.httpx, "AsyncClient",
            lambda **kwargs: real_client(transport=httpx.MockTransport(recording), **kwargs),
        )
        return requests

    return install


class TestFetchLiveRates:
    @pytest.mark.asyncio
    async def test_inverts_rates_and_skips_bad_values(self, rates_api):
        requests = rates_api(lambda request: httpx.Response(200, json={
            "base": "ILS",
            "rates": {"usd": 0.25, "JPY": 40, "EUR": "n/a", "GBP": 0},
        }))

        rates = await real_fetch_live_rates("ils")
        assert rates == {"USD": Decimal("4"), "JPY": Decimal("0.025"), "ILS": Decimal("1")}
        assert requests[0].url.path.endswith("/ILS")

    @pytest.mark.asyncio
    async def test_http_error_returns_none(self, rates_api):
        rates_api(lambda request: httpx.Response(503, text="unavailable"))
        assert await real_fetch_live_rates("ILS") is None

    @pytest.mark.asyncio
    async def test_invalid_json_returns_none(self, rates_api):
        rates_api(lambda request: httpx.Response(200, text="<html>"))
        assert await real_fetch_live_rates("ILS") is None

    @pytest.mark.asyncio
    async def test_empty_table_returns_none(self, rates_api):
        rates_api(lambda request: httpx.Response(200, json={"rates": {}}))
        assert await real_fetch_live_rates("ILS") is None


class TestSummarize:
    def test_paid_and_unpaid_split(self):
        rates = {"USD": Decimal("4"), "EUR": Decimal("5"), "ILS": Decimal("1")}
        summary = summarize({
            "hotels": [(Decimal("100"), "USD", "paid"), (Decimal("50"), "EUR", "pending")],
            "restaurants": [(Decimal("20"), None, "pending")],
            "tourist_sites": [],
        }, rates)

        assert summary["by_category"]["hotels"] == Decimal("150")
        assert summary["by_category"]["restaurants"] == Decimal("20")
        assert summary["by_category"]["tourist_sites"] == Decimal("0")
        assert summary["total_paid"] == Decimal("400")
        assert summary["total_unpaid"] == Decimal("250") + Decimal("80")

    def test_currencies_sorted_by_total(self):
        summary = summarize({
            "hotels": [(Decimal("10"), "EUR", "paid"), (Decimal("300"), "USD", "pending")],
        }, {"USD": Decimal("1"), "EUR": Decimal("1")})
        codes = [code for code, _ in summary["by_currency"]]
        assert codes == ["USD", "EUR"]
