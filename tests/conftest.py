import os

# Settings are read at import time, so configure before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DB_CONNECT_RETRIES"] = "1"
os.environ["DB_CONNECT_DELAY"] = "0"
os.environ["EXPOSE_ERROR_DETAILS"] = "false"

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.database import Store
from app.main import app
from app.models.customer import Customer
from app.models.order import Order
from app.models.user import User
from app.utils.security import hash_password


@pytest.fixture
def client():
    # Entering the client runs the lifespan, which opens a fresh in-memory store
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client):
    """Session on the same store the app is serving from"""
    session = client.app.state.store.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store():
    """Standalone store for tests that do not need HTTP"""
    s = Store("sqlite://")
    s.open(create_tables=True, max_retries=1, delay=0)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def session(store):
    s = store.session()
    try:
        yield s
    finally:
        s.close()


BASE_TIME = datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)


def make_user(db, email="agent@example.com", password="secret123", **kwargs) -> User:
    user = User(
        first_name=kwargs.pop("first_name", "Field"),
        last_name=kwargs.pop("last_name", "Agent"),
        email=email,
        password=hash_password(password),
        user_type_id=kwargs.pop("user_type_id", 2),
        mobile_phone=kwargs.pop("mobile_phone", "9876543210"),
        **kwargs,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_customer(db, **kwargs) -> Customer:
    defaults = dict(
        address="12 Market Road",
        stb_number="STB-0001",
        vc_number="VC-0001",
        subscription_status="active",
        area_id=1,
    )
    defaults.update(kwargs)
    customer = Customer(**defaults)
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


def make_order(db, customer, status=1, due="0", paid="0", minutes=0, **kwargs) -> Order:
    """Order whose created_at is BASE_TIME + minutes, so ordering is deterministic"""
    created = BASE_TIME + timedelta(minutes=minutes)
    order = Order(
        customer_id=customer.id,
        product_id=kwargs.pop("product_id", 1),
        payment_method_id=kwargs.pop("payment_method_id", 1),
        status=status,
        paid_amount=Decimal(paid),
        due_amount=Decimal(due) if due is not None else None,
        portal_recharge_status=kwargs.pop("portal_recharge_status", 0),
        created_at=created,
        updated_at=created,
        **kwargs,
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    return order
