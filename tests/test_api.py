"""
Tests for the REST API

Covers:
- Health endpoint
- Region listing and detail
- Holiday JSON and iCalendar endpoints
- Holidays of the configured default region
- Single-day and no-work-day queries
- Domain errors mapped to HTTP status codes
"""
import pytest
from fastapi.testclient import TestClient

from api.main import app, settings


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestHealth:
    """Tests for /health."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["regions_loaded"] > 0
        assert body["default_region"] == settings.default_region


class TestRegions:
    """Tests for /regions."""

    def test_list(self, client):
        response = client.get("/regions")
        assert response.status_code == 200
        ids = [r["id"] for r in response.json()]
        assert "DE" in ids
        assert "BE-VLG" in ids

    def test_list_children(self, client):
        regions = client.get("/regions", params={"parent": "DE"}).json()
        assert len(regions) == 16
        assert all(r["parent"] == "DE" for r in regions)

    def test_detail(self, client):
        body = client.get("/regions/ch").json()
        assert body["id"] == "CH"
        assert body["name"] == "Switzerland"
        assert body["parent"] is None
        assert "CH-BL" in body["children"]

    def test_unknown_region(self, client):
        response = client.get("/regions/ZZ")
        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "HC_REGION_NOT_FOUND"
        assert body["region_id"] == "ZZ"


class TestHolidays:
    """Tests for /regions/{id}/holidays."""

    def test_year(self, client):
        body = client.get("/regions/FR/holidays", params={"year": 2004}).json()
        assert body["count"] == 11
        assert [h["date"] for h in body["holidays"]][:2] == ["2004-01-01", "2004-04-12"]

    def test_item_layout(self, client):
        body = client.get("/regions/US/holidays", params={"year": 2021, "lang": "en"}).json()
        observed = [h for h in body["holidays"] if h["name"] == "independence_day_compensatory"][0]
        assert observed == {
            "name": "independence_day_compensatory",
            "display_name": "Independence Day (observed)",
            "date": "2021-07-05",
            "types": ["other", "official", "day_off", "compensatory"],
            "compensatory": True,
        }

    def test_month_and_day_off_only(self, client):
        body = client.get(
            "/regions/DE/holidays", params={"year": 2024, "month": 12, "day_off_only": True}
        ).json()
        assert [h["date"] for h in body["holidays"]] == ["2024-12-25", "2024-12-26"]

    def test_invalid_month(self, client):
        assert client.get("/regions/DE/holidays", params={"year": 2024, "month": 13}).status_code == 422

    def test_invalid_year(self, client):
        response = client.get("/regions/DE/holidays", params={"year": 1500})
        assert response.status_code == 422
        assert response.json()["code"] == "HC_INVALID_YEAR"

    def test_unknown_language(self, client):
        assert client.get("/regions/DE/holidays", params={"year": 2024, "lang": "xx"}).status_code == 422

    def test_icalendar(self, client):
        response = client.get("/regions/DE/holidays.ics", params={"year": 2024, "lang": "de"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/calendar")
        assert 'filename="DE-2024.ics"' in response.headers["content-disposition"]
        assert response.text.startswith("BEGIN:VCALENDAR\r\n")
        assert "SUMMARY:Karfreitag\r\n" in response.text


class TestDefaultRegion:
    """Tests for /holidays."""

    def test_uses_default_region(self, client):
        body = client.get("/holidays", params={"year": 2024}).json()
        assert body["region_id"] == settings.default_region
        expected = client.get(f"/regions/{settings.default_region}/holidays", params={"year": 2024}).json()
        assert body == expected

    def test_invalid_month(self, client):
        assert client.get("/holidays", params={"year": 2024, "month": 13}).status_code == 422


class TestDayQueries:
    """Tests for is-holiday and no-work-days."""

    def test_is_holiday(self, client):
        body = client.get("/regions/DE/is-holiday", params={"date": "2024-10-03"}).json()
        assert body["is_holiday"] is True
        assert [h["name"] for h in body["holidays"]] == ["german_unity_day"]

    def test_is_not_holiday(self, client):
        body = client.get("/regions/DE/is-holiday", params={"date": "2024-10-04"}).json()
        assert body["is_holiday"] is False
        assert body["holidays"] == []

    def test_no_work_days(self, client):
        body = client.get(
            "/regions/DE/no-work-days", params={"first_day": "2024-10-01", "last_day": "2024-10-07"}
        ).json()
        assert body["total_days"] == 7
        assert body["work_days"] == 5
        assert [h["date"] for h in body["no_work_days"]] == ["2024-10-03", "2024-10-06"]

    def test_no_work_days_with_weekdays(self, client):
        body = client.get(
            "/regions/DE/no-work-days",
            params={"first_day": "2024-10-01", "last_day": "2024-10-07", "weekday": [0, 6]},
        ).json()
        assert body["work_days"] == 4

    def test_invalid_weekday(self, client):
        response = client.get(
            "/regions/DE/no-work-days",
            params={"first_day": "2024-10-01", "last_day": "2024-10-07", "weekday": [7]},
        )
        assert response.status_code == 422

    def test_inverted_range(self, client):
        response = client.get(
            "/regions/DE/no-work-days", params={"first_day": "2024-10-07", "last_day": "2024-10-01"}
        )
        assert response.status_code == 422
        assert response.json()["code"] == "HC_INVALID_DATE_RANGE"
