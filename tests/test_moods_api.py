"""
Tests for the Mood Tracker HTTP API.

Runs the FastAPI app in-process with TestClient over a temporary JSON store.
"""
import json
import logging

import pytest
from fastapi.testclient import TestClient

from server.mood_api.config import Settings
from server.mood_api.errors import StorageFailure
from server.mood_api.main import create_app
from server.mood_api.store import InMemoryMoodStore

from conftest import FIXED_TODAY, make_record


class TestMoodRoutes:
    """Test the /api/moods routes."""

    def test_list_empty(self, client):
        response = client.get("/api/moods")
        assert response.status_code == 200
        assert response.json() == {}

    def test_upsert_then_get(self, client, sample_record):
        response = client.post("/api/moods", json={"date": "2024-12-08", "data": sample_record})
        assert response.status_code == 200
        assert response.json() == {"date": "2024-12-08", "data": sample_record}

        response = client.get("/api/moods/2024-12-08")
        assert response.status_code == 200
        assert response.json() == {"date": "2024-12-08", "data": sample_record}

    def test_upsert_persists_to_document(self, client, db_path, sample_record):
        client.post("/api/moods", json={"date": "2024-12-08", "data": sample_record})
        document = json.loads(db_path.read_text(encoding="utf-8"))
        assert document["moods"] == {"2024-12-08": sample_record}

    def test_get_missing_is_404(self, client):
        response = client.get("/api/moods/2024-12-08")
        assert response.status_code == 404
        assert response.json() == {"error": "Mood not found for this date"}

    @pytest.mark.parametrize("body", [{"data": make_record(0)}, {"date": "2024-12-08"}, {}])
    def test_upsert_missing_fields_is_400(self, client, body):
        response = client.post("/api/moods", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Date and data are required"}

    def test_upsert_malformed_date_is_400(self, client, sample_record):
        response = client.post("/api/moods", json={"date": "12/08/2024", "data": sample_record})
        assert response.status_code == 400
        assert "YYYY-MM-DD" in response.json()["error"]
        assert client.get("/api/moods").json() == {}

    def test_upsert_incomplete_record_is_400(self, client):
        response = client.post("/api/moods", json={"date": "2024-12-08", "data": {"overall": 1}})
        assert response.status_code == 400
        assert "Missing dimensions" in response.json()["error"]

    def test_upsert_huge_rating_is_400(self, client):
        response = client.post("/api/moods", json={"date": "2024-12-08", "data": make_record(0, overall=10**400)})
        assert response.status_code == 400
        assert "overall" in response.json()["error"]
        assert client.get("/api/moods").json() == {}

    def test_second_upsert_replaces(self, client):
        client.post("/api/moods", json={"date": "2024-12-08", "data": make_record(2)})
        client.post("/api/moods", json={"date": "2024-12-08", "data": make_record(-2)})
        assert client.get("/api/moods/2024-12-08").json()["data"] == make_record(-2)

    def test_delete(self, client, sample_record):
        client.post("/api/moods", json={"date": "2024-12-08", "data": sample_record})
        response = client.delete("/api/moods/2024-12-08")
        assert response.status_code == 200
        assert response.json() == {"message": "Mood deleted", "date": "2024-12-08"}
        assert client.get("/api/moods/2024-12-08").status_code == 404

    def test_delete_missing_is_404(self, client):
        response = client.delete("/api/moods/2024-12-08")
        assert response.status_code == 404

    def test_export_all(self, client, sample_record):
        client.post("/api/moods", json={"date": "2024-12-08", "data": sample_record})
        response = client.get("/api/moods/export/all")
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"exportDate", "moods", "version"}
        assert body["moods"] == {"2024-12-08": sample_record}
        assert body["version"] == "1.0"


class TestTrackerRoutes:
    """Test the facade-level routes."""

    def test_dimensions(self, client):
        response = client.get("/api/dimensions")
        assert response.status_code == 200
        body = response.json()
        assert [dim["id"] for dim in body] == ["overall", "home", "work", "health", "sleep", "social"]
        assert body[0]["left"] == "Low"

    def test_today_defaults_to_neutral(self, client):
        response = client.get("/api/today")
        assert response.status_code == 200
        assert response.json() == {"date": "2024-12-11", "data": make_record(0)}

    def test_submit_today_then_history(self, client, sample_record):
        client.post("/api/moods", json={"date": "2024-12-10", "data": make_record(1)})

        response = client.put("/api/today", json=sample_record)
        assert response.status_code == 200
        assert response.json() == {"date": "2024-12-11", "data": sample_record}

        history = client.get("/api/history", params={"limit": 10}).json()
        assert history[0] == {"date": "2024-12-11", "data": sample_record}
        assert history[1]["date"] == "2024-12-10"

    def test_submit_today_out_of_range_is_400(self, client):
        response = client.put("/api/today", json=make_record(0, overall=4))
        assert response.status_code == 400
        assert "overall" in response.json()["error"]

    def test_submit_today_non_object_is_400(self, client):
        response = client.put("/api/today", json=[1, 2, 3])
        assert response.status_code == 400

    def test_history_limit_validation(self, client):
        assert client.get("/api/history", params={"limit": 0}).status_code == 400

    def test_calendar(self, client, sample_record):
        client.put("/api/today", json=sample_record)
        client.post("/api/moods", json={"date": "2024-12-13", "data": make_record(2)})

        grid = client.get("/api/calendar", params={"weeks": 2}).json()
        assert len(grid) == 2
        assert all(len(week) == 7 for week in grid)
        assert grid[-1][-1]["date"] == "2024-12-14"

        wednesday, friday = grid[-1][3], grid[-1][5]
        assert wednesday["isToday"] is True
        assert wednesday["data"] == sample_record
        assert friday["isFuture"] is True
        assert friday["data"] is None
        assert friday["avg"] is None

    def test_calendar_default_weeks(self, client):
        grid = client.get("/api/calendar").json()
        assert len(grid) == 12

    def test_calendar_bad_end_is_400(self, client):
        assert client.get("/api/calendar", params={"end": "soon"}).status_code == 400

    def test_insights(self, client):
        for day in ("2024-12-09", "2024-12-10", "2024-12-11"):
            client.post("/api/moods", json={"date": day, "data": make_record(1)})
        insights = client.get("/api/insights").json()
        assert len(insights) == 6
        assert insights[0] == {
            "dimension": "overall",
            "label": "Overall",
            "emoji": "\U0001F60A",
            "average": 1.0,
            "trend": 0.0,
            "direction": "steady",
        }

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "service": "mood-api"}


class TestStorageFailureResponses:
    """Storage failures surface as 503 with an error body."""

    class BrokenStore(InMemoryMoodStore):
        def _read_document(self) -> dict:
            raise StorageFailure("Mood store is not valid JSON")

    @pytest.fixture
    def broken_client(self, tmp_path):
        app = create_app(
            settings=Settings(data_path=str(tmp_path)),
            store=self.BrokenStore(),
            today=lambda: FIXED_TODAY,
        )
        with TestClient(app) as test_client:
            yield test_client

    @pytest.mark.parametrize("path", ["/api/moods", "/api/today", "/api/history", "/api/moods/2024-12-08"])
    def test_reads_return_503(self, broken_client, path):
        response = broken_client.get(path)
        assert response.status_code == 503
        assert response.json() == {"error": "Mood store is not valid JSON"}

    def test_corrupt_file_returns_503(self, client, db_path):
        db_path.parent.mkdir(parents=True, exist_ok=True)
        db_path.write_text("{not json", encoding="utf-8")
        response = client.get("/api/today")
        assert response.status_code == 503
        assert "error" in response.json()

    @pytest.mark.parametrize("path", ["/api/moods", "/api/history", "/api/insights", "/api/calendar", "/api/moods/export/all"])
    def test_malformed_stored_record_returns_503(self, client, db_path, sample_record, path):
        db_path.parent.mkdir(parents=True, exist_ok=True)
        moods = {"2024-12-09": sample_record, "2024-12-10": sample_record, "2024-12-11": None}
        db_path.write_text(json.dumps({"moods": moods}), encoding="utf-8")
        response = client.get(path)
        assert response.status_code == 503
        assert "2024-12-11" in response.json()["error"]


class TestAppLogging:
    """Logging is configured by create_app itself."""

    def test_log_level_applies_to_app_loggers(self, tmp_path):
        app_logger = logging.getLogger("server.mood_api")
        previous = app_logger.level
        try:
            create_app(settings=Settings(data_path=str(tmp_path), log_level="DEBUG"), store=InMemoryMoodStore())
            assert logging.getLogger("server.mood_api.store").getEffectiveLevel() == logging.DEBUG
        finally:
            app_logger.setLevel(previous)


class TestRouteFunctions:
    """Call route handlers directly with an injected service."""

    @pytest.mark.asyncio
    async def test_get_today_handler(self, service, sample_record):
        from server.mood_api.routes.tracker import get_today

        service.submit(sample_record)
        entry = await get_today(service=service)
        assert entry.date == FIXED_TODAY.isoformat()
        assert entry.data == sample_record

    @pytest.mark.asyncio
    async def test_get_mood_handler_missing_raises_404(self, service):
        from fastapi import HTTPException
        from server.mood_api.routes.moods import get_mood

        with pytest.raises(HTTPException) as exc_info:
            await get_mood("2024-12-08", service=service)
        assert exc_info.value.status_code == 404
