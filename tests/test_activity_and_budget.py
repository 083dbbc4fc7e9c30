"""Tests for the trip activity log and the budget endpoint."""

import pytest


class TestActivityLog:
    @pytest.mark.asyncio
    async def test_records_changes_newest_first(self, client, owner, owner_headers, trip):
        hotel = (await client.post(f"/trips/{trip['id']}/hotels", json={
            "name": "Hotel Devin", "check_in_date": "2025-07-01", "check_out_date": "2025-07-02",
        }, headers=owner_headers)).json()
        await client.put(f"/hotels/{hotel['id']}", json={"name": "Hotel Tatra"}, headers=owner_headers)
        await client.delete(f"/hotels/{hotel['id']}", headers=owner_headers)

        entries = (await client.get(f"/trips/{trip['id']}/activity", headers=owner_headers)).json()
        assert [e["action"] for e in entries] == ["deleted", "updated", "created"]
        assert entries[0]["entity_type"] == "hotel"
        assert entries[0]["entity_name"] == "Hotel Tatra"
        assert entries[2]["entity_name"] == "Hotel Devin"
        assert entries[0]["user"] == {"id": owner.id, "name": owner.name, "email": owner.email}

    @pytest.mark.asyncio
    async def test_limit(self, client, owner_headers, trip):
        for title in ("a", "b", "c"):
            await client.post(f"/trips/{trip['id']}/checklist", json={"title": title}, headers=owner_headers)
        entries = (await client.get(f"/trips/{trip['id']}/activity?limit=2", headers=owner_headers)).json()
        assert [e["entity_name"] for e in entries] == ["c", "b"]


class TestBudget:
    @pytest.mark.asyncio
    async def test_totals_with_default_rates(self, client, owner_headers, trip):
        tid = trip["id"]
        await client.post(f"/trips/{tid}/hotels", json={
            "name": "Hotel Devin", "check_in_date": "2025-07-01", "check_out_date": "2025-07-02",
            "price": "100", "currency": "USD", "payment_status": "paid",
        }, headers=owner_headers)
        await client.post(f"/trips/{tid}/restaurants", json={
            "name": "Modra Hviezda", "price": "50", "currency": "EUR",
        }, headers=owner_headers)
        await client.post(f"/trips/{tid}/tourist-sites", json={"name": "Free walk"}, headers=owner_headers)

        budget = (await client.get(f"/trips/{tid}/budget", headers=owner_headers)).json()
        assert budget["rates_source"] == "default"
        assert budget["base_currency"] == "ILS"
        assert budget["base_symbol"] == "₪"
        assert budget["by_category"] == {
            "hotels": 100.0, "transportation": 0.0, "car_rentals": 0.0, "restaurants": 50.0, "tourist_sites": 0.0,
        }
        assert budget["total_paid"] == 365.0
        assert budget["total_unpaid"] == 197.5
        assert budget["grand_total"] == 562.5
        assert [c["currency"] for c in budget["by_currency"]] == ["USD", "EUR"]

    @pytest.mark.asyncio
    async def test_other_base_currency(self, client, owner_headers, trip):
        await client.post(f"/trips/{trip['id']}/restaurants", json={
            "name": "Diner", "price": "10", "currency": "USD",
        }, headers=owner_headers)
        budget = (await client.get(f"/trips/{trip['id']}/budget?base_currency=usd", headers=owner_headers)).json()
        assert budget["base_currency"] == "USD"
        assert budget["grand_total"] == 10.0

    @pytest.mark.asyncio
    async def test_empty_trip(self, client, owner_headers, trip):
        budget = (await client.get(f"/trips/{trip['id']}/budget", headers=owner_headers)).json()
        assert budget["grand_total"] == 0.0
        assert budget["by_currency"] == []
