"""Tests for day trips, driving routes with points of interest, and the
timeline and daily views."""

import pytest

from tripplanner.utils.time_format import DAY_COLORS

ROUTE = {
    "name": "Bratislava to Tatras",
    "name_he": "מברטיסלבה לטטרה",
    "date": "2025-07-03",
    "time": "9:00 AM",
    "distance_km": "320.5",
    "estimated_duration": 240,
}


class TestDayTrips:
    @pytest.mark.asyncio
    async def test_crud_and_order(self, client, owner_headers, trip):
        url = f"/trips/{trip['id']}/day-trips"
        base = {"start_location": "Bratislava", "end_location": "Bratislava", "stops": ["Devin", "Stupava"]}
        early = (await client.post(url, json={
            **base, "name": "Devin", "start_time": "2025-07-02T08:00:00", "end_time": "2025-07-02T18:00:00",
        }, headers=owner_headers)).json()
        await client.post(url, json={
            **base, "name": "Trencin", "start_time": "2025-07-05T08:00:00+02:00", "end_time": "2025-07-05T20:00:00+02:00",
        }, headers=owner_headers)

        day_trips = (await client.get(url, headers=owner_headers)).json()
        assert [d["name"] for d in day_trips] == ["Trencin", "Devin"]
        assert day_trips[0]["start_time"].startswith("2025-07-05T06:00:00")
        assert early["stops"] == ["Devin", "Stupava"]

        resp = await client.put(f"/day-trips/{early['id']}", json={"notes": "Bring water"}, headers=owner_headers)
        assert resp.json()["notes"] == "Bring water"
        assert (await client.delete(f"/day-trips/{early['id']}", headers=owner_headers)).status_code == 200

    @pytest.mark.asyncio
    async def test_end_before_start(self, client, owner_headers, trip):
        url = f"/trips/{trip['id']}/day-trips"
        payload = {
            "name": "Backwards", "start_location": "A", "end_location": "B",
            "start_time": "2025-07-02T18:00:00", "end_time": "2025-07-02T08:00:00",
        }
        assert (await client.post(url, json=payload, headers=owner_headers)).status_code == 400

        ok = (await client.post(url, json={**payload, "end_time": "2025-07-02T19:00:00"}, headers=owner_headers)).json()
        resp = await client.put(f"/day-trips/{ok['id']}", json={"end_time": "2025-07-01T00:00:00"}, headers=owner_headers)
        assert resp.status_code == 400


class TestRoutes:
    @pytest.mark.asyncio
    async def test_route_with_points(self, client, owner_headers, trip):
        route = (await client.post(f"/trips/{trip['id']}/routes", json=ROUTE, headers=owner_headers)).json()
        assert route["time"] == "09:00"
        assert route["distance_km"] == 320.5
        assert route["points"] == []

        for name, order in (("Strbske Pleso", 2), ("Cicmany", 1)):
            resp = await client.post(f"/routes/{route['id']}/points", json={
                "name": name, "latitude": 49.1, "longitude": 20.0, "poi_type": "viewpoint", "sort_order": order,
            }, headers=owner_headers)
            assert resp.status_code == 201

        routes = (await client.get(f"/trips/{trip['id']}/routes", headers=owner_headers)).json()
        assert [p["name"] for p in routes[0]["points"]] == ["Cicmany", "Strbske Pleso"]

        points = (await client.get(f"/trips/{trip['id']}/points-of-interest", headers=owner_headers)).json()
        assert len(points) == 2

        resp = await client.delete(f"/route-points/{points[0]['id']}", headers=owner_headers)
        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_update_keeps_points(self, client, owner_headers, trip):
        route = (await client.post(f"/trips/{trip['id']}/routes", json=ROUTE, headers=owner_headers)).json()
        await client.post(f"/routes/{route['id']}/points", json={
            "name": "Cicmany", "latitude": 49.0, "longitude": 18.5,
        }, headers=owner_headers)

        resp = await client.put(f"/routes/{route['id']}", json={"road_type": "highway"}, headers=owner_headers)
        assert resp.json()["road_type"] == "highway"
        assert len(resp.json()["points"]) == 1

    @pytest.mark.asyncio
    async def test_delete_route_removes_points(self, client, owner_headers, trip):
        route = (await client.post(f"/trips/{trip['id']}/routes", json=ROUTE, headers=owner_headers)).json()
        await client.post(f"/routes/{route['id']}/points", json={
            "name": "Cicmany", "latitude": 49.0, "longitude": 18.5,
        }, headers=owner_headers)

        assert (await client.delete(f"/routes/{route['id']}", headers=owner_headers)).status_code == 200
        assert (await client.get(f"/trips/{trip['id']}/points-of-interest", headers=owner_headers)).json() == []

    @pytest.mark.asyncio
    async def test_invalid_coordinates(self, client, owner_headers, trip):
        route = (await client.post(f"/trips/{trip['id']}/routes", json=ROUTE, headers=owner_headers)).json()
        resp = await client.post(f"/routes/{route['id']}/points", json={
            "name": "Nowhere", "latitude": 120, "longitude": 0,
        }, headers=owner_headers)
        assert resp.status_code == 422


class TestViews:
    @pytest.mark.asyncio
    async def test_timeline_groups_days(self, client, owner_headers, trip):
        tid = trip["id"]
        await client.post(f"/trips/{tid}/hotels", json={
            "name": "Hotel Devin", "check_in_date": "2025-07-01", "check_in_time": "15:00",
            "check_out_date": "2025-07-03", "check_out_time": "11:00", "price": "200", "currency": "EUR",
        }, headers=owner_headers)
        await client.post(f"/trips/{tid}/transportation", json={
            "type": "flight", "origin": "TLV", "destination": "BTS",
            "departure_date": "2025-07-01", "departure_time": "06:30",
        }, headers=owner_headers)
        await client.post(f"/trips/{tid}/routes", json=ROUTE, headers=owner_headers)

        timeline = (await client.get(f"/trips/{tid}/timeline", headers=owner_headers)).json()
        assert timeline["language"] == "en"
        days = timeline["days"]
        assert [d["date"] for d in days] == ["2025-07-01", "2025-07-03"]
        assert [e["type"] for e in days[0]["events"]] == ["transport", "hotel_checkin"]
        assert [e["type"] for e in days[1]["events"]] == ["route", "hotel_checkout"]
        assert days[1]["day_number"] == 3
        assert days[1]["color_index"] == 2

    @pytest.mark.asyncio
    async def test_timeline_in_hebrew(self, client, owner_headers, trip):
        await client.post(f"/trips/{trip['id']}/routes", json=ROUTE, headers=owner_headers)
        timeline = (await client.get(f"/trips/{trip['id']}/timeline?lang=he", headers=owner_headers)).json()
        event = timeline["days"][0]["events"][0]
        assert event["title"] == ROUTE["name_he"]
        assert event["subtitle"] == "מסלול נסיעה"

    @pytest.mark.asyncio
    async def test_preferred_language_used_by_default(self, client, owner_headers, trip):
        await client.put("/auth/language", json={"language": "he"}, headers=owner_headers)
        timeline = (await client.get(f"/trips/{trip['id']}/timeline", headers=owner_headers)).json()
        assert timeline["language"] == "he"

    @pytest.mark.asyncio
    async def test_daily_view(self, client, owner, owner_headers, trip):
        tid = trip["id"]
        doc = (await client.post(f"/trips/{tid}/documents", json={
            "name": "Reservation", "file_url": "/files/r.pdf", "file_key": f"documents/{owner.id}/{tid}/r.pdf",
        }, headers=owner_headers)).json()
        await client.post(f"/trips/{tid}/restaurants", json={
            "name": "Modra Hviezda", "reservation_date": "2025-07-09", "reservation_time": "8:00 PM",
            "price": "80", "currency": "EUR", "linked_document_id": doc["id"],
        }, headers=owner_headers)
        await client.post(f"/trips/{tid}/tourist-sites", json={
            "name": "Blue Church", "planned_visit_date": "2025-07-09",
        }, headers=owner_headers)

        day = (await client.get(f"/trips/{tid}/days/2025-07-09", headers=owner_headers)).json()
        assert day["day_number"] == 9
        assert day["color_index"] == 0
        assert day["color"] == DAY_COLORS[0]
        assert [e["title"] for e in day["events"]] == ["Blue Church", "Modra Hviezda"]
        dinner = day["events"][1]
        assert dinner["time"] == "20:00"
        assert dinner["price"] == 80.0
        assert dinner["linked_document"] == {"id": doc["id"], "name": "Reservation", "file_url": "/files/r.pdf"}

    @pytest.mark.asyncio
    async def test_empty_day(self, client, owner_headers, trip):
        day = (await client.get(f"/trips/{trip['id']}/days/2025-07-02", headers=owner_headers)).json()
        assert day["events"] == []
        assert day["day_number"] == 2
