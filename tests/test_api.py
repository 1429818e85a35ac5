"""Tests for the admin HTTP routes."""

from sqlalchemy import create_engine

from app.config import Settings, get_settings
from app.db.engine import get_engine
from app.main import app
from app.seed_data import CUSTOMER_SEEDS, INVOICE_SEEDS
from app.services import deduplicator, seeder


class TestHealth:

    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestProductionGuard:

    def test_routes_are_forbidden_in_production(self, test_client):
        app.dependency_overrides[get_settings] = lambda: Settings(environment="production")

        for path in ("/seed", "/admin/cleanup-invoices"):
            response = test_client.get(path)
            assert response.status_code == 403
            assert response.text == "Forbidden"

    def test_read_routes_stay_open_in_production(self, test_client):
        test_client.get("/seed")
        app.dependency_overrides[get_settings] = lambda: Settings(environment="production")

        assert test_client.get("/customers/").status_code == 200


class TestSeedRoute:

    def test_seed_is_idempotent(self, test_client):
        first = test_client.get("/seed")
        second = test_client.get("/seed")

        assert first.status_code == 200
        assert first.json()["message"] == "Database seeded successfully (idempotent)."
        assert first.json()["invoices_inserted"] == len(INVOICE_SEEDS)
        assert second.json()["invoices_inserted"] == 0

        assert len(test_client.get("/customers/").json()) == len(CUSTOMER_SEEDS)
        assert len(test_client.get("/invoices/").json()) == len(INVOICE_SEEDS)

    def test_database_error_returns_500(self, test_client, tmp_path):
        # a directory is not an openable database file
        broken = create_engine(f"sqlite:///{tmp_path}", future=True)
        app.dependency_overrides[get_engine] = lambda: broken

        response = test_client.get("/seed")

        assert response.status_code == 500
        assert "error" in response.json()


class TestCleanupRoute:

    def test_cleanup_without_duplicates(self, test_client):
        test_client.get("/seed")

        response = test_client.get("/admin/cleanup-invoices")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "No duplicate invoices found."
        assert body["duplicates_found"] == []
        assert body["deleted"] == 0

    def test_cleanup_reports_and_removes_duplicates(self, test_client, engine):
        test_client.get("/seed")
        with engine.begin() as conn:
            conn.exec_driver_sql(
                "INSERT INTO invoices (id, customer_id, amount, status, date) "
                "SELECT 'ffffffffffffffffffffffffffffffff', customer_id, amount, status, date "
                "FROM invoices LIMIT 1"
            )

        response = test_client.get("/admin/cleanup-invoices")

        body = response.json()
        assert response.status_code == 200
        assert body["message"] == "Duplicates removed and unique index ensured."
        assert len(body["duplicates_found"]) == 1
        assert body["duplicates_found"][0]["count"] == 2
        assert body["deleted"] == 1
        assert len(test_client.get("/invoices/").json()) == len(INVOICE_SEEDS)

    def test_missing_table_returns_500(self, test_client):
        response = test_client.get("/admin/cleanup-invoices")

        assert response.status_code == 500
        assert "no such table" in response.json()["error"]


class TestUnexpectedFailures:

    def test_seed_reports_non_database_error_as_json(self, test_client, monkeypatch):
        def unsupported(conn):
            raise NotImplementedError("Unsupported database dialect: mysql")

        monkeypatch.setattr(seeder, "insert_for", unsupported)

        response = test_client.get("/seed")

        assert response.status_code == 500
        assert response.json() == {"error": "Unsupported database dialect: mysql"}

    def test_cleanup_reports_non_database_error_as_json(self, test_client, monkeypatch):
        def broken(conn):
            raise ValueError("bad duplicate row")

        test_client.get("/seed")
        monkeypatch.setattr(deduplicator, "find_duplicate_invoices", broken)

        response = test_client.get("/admin/cleanup-invoices")

        assert response.status_code == 500
        assert response.json() == {"error": "bad duplicate row"}
