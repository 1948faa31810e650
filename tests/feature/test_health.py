from fastapi.testclient import TestClient

from src.core.application import create_application


class TestHealth:
    def test_reports_healthy_database(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["env"] == "test"
        assert body["services"]["database"]["status"] == "healthy"
        assert body["services"]["database"]["checked_out"] == 0


class TestUnavailableDatabase:
    def test_app_starts_and_storage_failures_become_500(self, test_settings, tmp_path):
        missing = tmp_path / "missing" / "hostel.db"
        settings = test_settings.model_copy(
            update={"DATABASE_URL": f"sqlite+aiosqlite:///{missing}"}
        )

        with TestClient(create_application(settings)) as client:
            health = client.get("/api/v1/health")
            register = client.post(
                "/api/v1/auth/register",
                json={
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "email": "ada@example.com",
                    "password": "Str0ngP@ss",
                },
            )

        assert health.status_code == 200
        assert health.json()["services"]["database"]["status"] == "unhealthy"
        assert register.status_code == 500
        assert register.json() == {"detail": "Internal server error"}
