from decimal import Decimal

import pytest

from app.errors import NotFoundError, ValidationError
from app.models.order import Order
from app.services.dues_service import DuesService, NO_FIELD_USER_DUES_MESSAGE, sum_due_amounts
from conftest import make_customer, make_order, make_user


def test_customer_dues_example(session):
    customer = make_customer(session, id=7)
    first = make_order(session, customer, status=1, due="50", minutes=1)
    make_order(session, customer, status=4, due="0", minutes=2)
    third = make_order(session, customer, status=1, due="30", minutes=3)

    result = DuesService(session).customer_dues("7")

    assert result.customer_id == 7
    assert result.due_count == 2
    assert result.total_due == Decimal("80")
    assert [item.order_id for item in result.dues] == [third.id, first.id]
    assert {item.status for item in result.dues} == {"Pending Payment"}


def test_customer_dues_total_matches_items(session):
    customer = make_customer(session)
    make_order(session, customer, status=4, due="10.25", minutes=1)
    make_order(session, customer, status=1, due="0.10", minutes=2)
    make_order(session, customer, status=1, due="19.65", minutes=3)
    make_order(session, customer, status=2, due="500", minutes=4)
    make_order(session, customer, status=3, due="75", minutes=5)

    result = DuesService(session).customer_dues(str(customer.id))

    assert result.total_due == sum(item.due_amount for item in result.dues)
    assert result.total_due == Decimal("30.00")
    assert result.due_count == 3
    labels = {item.order_id: item.status for item in result.dues}
    assert "Partial Payment" in labels.values()


def test_customer_without_dues_reports_zero(session):
    customer = make_customer(session)
    make_order(session, customer, status=2, due="40")
    make_order(session, customer, status=1, due="0")
    # Legacy rows written before amounts were validated
    make_order(session, customer, status=4, due="-15")
    make_order(session, customer, status=1, due="-0.01")

    result = DuesService(session).customer_dues(str(customer.id))

    assert result.total_due == 0
    assert result.due_count == 0
    assert result.dues == []


def test_customer_dues_identity_fields(session):
    customer = make_customer(session, vc_number="VC-42", stb_number="STB-42", address="7 Hill St")

    result = DuesService(session).customer_dues(str(customer.id))

    assert (result.vc_number, result.stb_number, result.address) == ("VC-42", "STB-42", "7 Hill St")


@pytest.mark.parametrize("bad_id", ["abc", "7.5", "", "7a", "\u0667", "99999999999999999999999"])
def test_customer_dues_rejects_non_numeric_id(session, bad_id):
    with pytest.raises(ValidationError):
        DuesService(session).customer_dues(bad_id)


def test_customer_dues_missing_customer(session):
    with pytest.raises(NotFoundError):
        DuesService(session).customer_dues("404")


def test_field_user_dues_keeps_zero_balances(session):
    agent = make_user(session)
    other = make_user(session, email="other@example.com")
    customer = make_customer(session)
    older = make_order(session, customer, status=1, due="25", minutes=1, recharge_by_id=agent.id)
    newer = make_order(session, customer, status=4, due="0", minutes=2, recharge_by_id=agent.id)
    make_order(session, customer, status=2, due="10", minutes=3, recharge_by_id=agent.id)
    make_order(session, customer, status=1, due="99", minutes=4, recharge_by_id=other.id)

    result = DuesService(session).field_user_dues(agent.id)

    assert result.count == 2
    assert [order.id for order in result.dues] == [newer.id, older.id]
    assert result.message is None


def test_field_user_without_dues_is_soft_empty(session):
    agent = make_user(session)

    result = DuesService(session).field_user_dues(agent.id)

    assert result.count == 0
    assert result.dues == []
    assert result.message == NO_FIELD_USER_DUES_MESSAGE


def test_pending_orders_lists_all_due_statuses(session):
    first = make_customer(session)
    second = make_customer(session, stb_number="STB-0002")
    a = make_order(session, first, status=1, due="5", minutes=1)
    make_order(session, first, status=3, due="5", minutes=2)
    b = make_order(session, second, status=4, due="0", minutes=3)

    result = DuesService(session).pending_orders()

    assert result.count == 2
    assert [order.id for order in result.orders] == [b.id, a.id]


def test_sum_due_amounts_treats_none_as_zero():
    assert sum_due_amounts([Decimal("1.10"), None, Decimal("2.20")]) == Decimal("3.30")
    assert sum_due_amounts([]) == Decimal("0")


def test_order_created_by_id_is_recharge_by_id(session):
    agent = make_user(session)
    customer = make_customer(session)
    order = make_order(session, customer, recharge_by_id=agent.id)
    make_order(session, customer)

    found = session.query(Order).filter(Order.order_created_by_id == agent.id).all()

    assert [o.id for o in found] == [order.id]
    assert order.order_created_by_id == order.recharge_by_id == agent.id
