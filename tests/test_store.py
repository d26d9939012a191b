import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from app.config import settings
from app.database import Store, normalize_database_url
from app.main import app
from check_schema import describe_tables, detect_order_creator_column


def test_normalize_database_url():
    assert normalize_database_url(" 'postgres://u:p@host:5432/db' ") == "postgresql://u:p@host:5432/db"
    assert normalize_database_url("sqlite://") == "sqlite://"


def test_store_lifecycle():
    store = Store("sqlite://")
    assert not store.is_open
    assert store.check_health() is False

    assert store.open(create_tables=True, max_retries=1, delay=0) is True
    assert store.is_open
    assert store.check_health() is True

    store.close()
    store.close()
    assert not store.is_open
    with pytest.raises(RuntimeError):
        store.session()


def test_health_endpoint(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_lifespan_closes_store():
    with TestClient(app) as test_client:
        store = test_client.app.state.store
        assert store.is_open
    assert not store.is_open


def _break_orders_table(client):
    with client.app.state.store.engine.begin() as conn:
        conn.execute(text("DROP TABLE orders"))


def test_store_errors_hide_details_by_default(client):
    _break_orders_table(client)

    response = client.get("/orders")

    assert response.status_code == 500
    assert response.json() == {"error": "A database error occurred"}


def test_store_errors_expose_details_when_enabled(client, monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_ERROR_DETAILS", True)
    _break_orders_table(client)

    response = client.get("/pending-orders")

    assert response.status_code == 500
    assert "orders" in response.json()["details"]


def test_describe_tables_reports_creator_column(store):
    schema = describe_tables(store.engine)

    assert set(schema) == {"users", "customers", "orders"}
    assert detect_order_creator_column(schema["orders"]) == "recharge_by_id"


def test_detect_order_creator_column_legacy_name():
    columns = [{"name": "id"}, {"name": "order_created_by_id"}]
    assert detect_order_creator_column(columns) == "order_created_by_id"
    assert detect_order_creator_column([{"name": "id"}]) is None
