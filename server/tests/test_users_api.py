# server/tests/test_users_api.py
import logging
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.main import app

client = TestClient(app)

VALID_USER = {
    "age": 30,
    "goals": ["weight loss", "general health"],
    "intensity": "beginner",
}

class TestCreateUser:
    """Test cases for POST /api/users"""

    @patch('app.services.plan_store.db')
    def test_create_user(self, mock_db):
        user_oid = ObjectId()
        mock_db.users.insert_one.return_value = MagicMock(inserted_id=user_oid)

        response = client.post("/api/users", json=VALID_USER)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == str(user_oid)
        assert data["age"] == 30
        assert data["goals"] == ["weight loss", "general health"]
        assert data["intensity"] == "beginner"
        assert "createdAt" in data

        saved = mock_db.users.insert_one.call_args[0][0]
        assert saved["goals"] == ["weight loss", "general health"]
        assert isinstance(saved["created_at"], datetime)

    @patch('app.services.plan_store.db')
    def test_boundary_ages_accepted(self, mock_db):
        mock_db.users.insert_one.return_value = MagicMock(inserted_id=ObjectId())

        for age in (13, 100):
            response = client.post("/api/users", json={**VALID_USER, "age": age})
            assert response.status_code == 201

    @patch('app.services.plan_store.db')
    def test_age_out_of_range_rejected(self, mock_db):
        for age in (12, 101):
            response = client.post("/api/users", json={**VALID_USER, "age": age})

            assert response.status_code == 400
            data = response.json()
            assert data["error"] == "Invalid input"
            assert data["details"][0]["loc"] == ["body", "age"]

        mock_db.users.insert_one.assert_not_called()

    @patch('app.services.plan_store.db')
    def test_unknown_intensity_rejected(self, mock_db):
        response = client.post("/api/users", json={**VALID_USER, "intensity": "expert"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid input"
        mock_db.users.insert_one.assert_not_called()

    @patch('app.services.plan_store.db')
    def test_empty_goals_rejected(self, mock_db):
        response = client.post("/api/users", json={**VALID_USER, "goals": []})

        assert response.status_code == 400
        assert response.json()["details"][0]["loc"] == ["body", "goals"]

    @patch('app.services.plan_store.db')
    def test_unknown_goal_rejected(self, mock_db):
        response = client.post("/api/users", json={**VALID_USER, "goals": ["juggling"]})

        assert response.status_code == 400

    @patch('app.services.plan_store.db')
    def test_goal_without_exercises_accepted(self, mock_db):
        mock_db.users.insert_one.return_value = MagicMock(inserted_id=ObjectId())

        response = client.post("/api/users", json={**VALID_USER, "goals": ["endurance"]})

        assert response.status_code == 201

    @patch('app.services.plan_store.db')
    def test_missing_fields_rejected(self, mock_db):
        response = client.post("/api/users", json={"age": 30})

        assert response.status_code == 400
        missing = {tuple(d["loc"]) for d in response.json()["details"]}
        assert ("body", "goals") in missing
        assert ("body", "intensity") in missing

    @patch('app.services.plan_store.db')
    def test_database_failure_returns_500(self, mock_db):
        mock_db.users.insert_one.side_effect = ServerSelectionTimeoutError("no servers")

        response = client.post("/api/users", json=VALID_USER)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    @patch('app.services.plan_store.db', None)
    def test_no_database_connection_returns_500(self):
        response = client.post("/api/users", json=VALID_USER)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

class TestServiceEndpoints:
    """Test cases for health and app-wide behaviour"""

    def test_health(self):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Fitness Planner API is running"}

    def test_security_headers(self):
        response = client.get("/api/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"

    def test_cors_preflight(self):
        response = client.options(
            "/api/users",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_unknown_route_uses_error_body(self):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

FAILING_PATH = "/api/test-unhandled-error"

@pytest.fixture
def failing_route():
    @app.get(FAILING_PATH)
    def _fail():
        raise RuntimeError("unexpected failure")

    yield FAILING_PATH
    app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != FAILING_PATH]

class TestUnhandledErrors:
    """Test cases for the catch-all 500 handler"""

    def test_unhandled_error_body_and_headers(self, failing_route):
        error_client = TestClient(app, raise_server_exceptions=False)

        response = error_client.get(failing_route)

        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong!"}
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"

    def test_unhandled_error_is_access_logged(self, failing_route, caplog):
        caplog.set_level(logging.INFO, logger="app.main")
        error_client = TestClient(app, raise_server_exceptions=False)

        error_client.get(failing_route)

        assert f"GET {failing_route} 500" in caplog.text
