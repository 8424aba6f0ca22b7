"""Tests for the holiday HTTP routes."""

from holidays_jp_api.services import calculator
from holidays_jp_api.utils.solar_longitude import EquinoxNotFoundError


class TestDayRoute:
    def test_holiday(self, client):
        response = client.get("/api/holidays/2021/8/8")
        assert response.status_code == 200
        body = response.get_json()
        assert body["success"] is True
        assert body["is_holiday"] is True
        assert body["data"] == [{"date": "2021-08-08", "name": "山の日"}]

    def test_not_holiday(self, client):
        body = client.get("/api/holidays/1950/1/1").get_json()
        assert body["is_holiday"] is False
        assert body["data"] == []

    def test_invalid_date(self, client):
        response = client.get("/api/holidays/2023/2/30")
        assert response.status_code == 400
        assert response.get_json()["success"] is False


class TestMonthAndYearRoutes:
    def test_month(self, client):
        body = client.get("/api/holidays/2023/1").get_json()
        assert [h["date"] for h in body["data"]] == ["2023-01-01", "2023-01-02", "2023-01-09"]

    def test_invalid_month(self, client):
        assert client.get("/api/holidays/2023/13").status_code == 400

    def test_year(self, client):
        body = client.get("/api/holidays/2024").get_json()
        assert len(body["data"]) == 21
        assert body["data"][0] == {"date": "2024-01-01", "name": "元日"}

    def test_equinox_failure(self, client, monkeypatch):
        def fail(year, tz):
            raise EquinoxNotFoundError(year, 3)

        monkeypatch.setattr(calculator, "vernal_equinox_day", fail)
        response = client.get("/api/holidays/2040/3")
        assert response.status_code == 500
        assert response.get_json()["success"] is False


class TestRangeRoute:
    def test_range(self, client):
        body = client.get("/api/holidays?from=2024-04-27&to=2024-05-06").get_json()
        assert body["from"] == "2024-04-27"
        assert body["to"] == "2024-05-06"
        assert [h["date"] for h in body["data"]] == [
            "2024-04-29", "2024-05-03", "2024-05-04", "2024-05-05", "2024-05-06",
        ]

    def test_single_day_when_to_missing(self, client):
        body = client.get("/api/holidays?from=2024-01-01").get_json()
        assert body["data"] == [{"date": "2024-01-01", "name": "元日"}]

    def test_defaults_to_today(self, client):
        response = client.get("/api/holidays")
        assert response.status_code == 200
        body = response.get_json()
        assert body["from"] == body["to"]

    def test_reversed_range(self, client):
        assert client.get("/api/holidays?from=2024-05-06&to=2024-05-01").status_code == 400

    def test_malformed_date(self, client):
        assert client.get("/api/holidays?from=2024/05/06").status_code == 400
