import pytest

from app.services.order_status import (
    DUE_STATUSES, DuesState, OrderStatus, classify, has_dues, is_valid_status, status_label,
)


@pytest.mark.parametrize("code, state", [
    (1, DuesState.PENDING),
    (4, DuesState.PARTIAL),
    (2, DuesState.OTHER),
    (3, DuesState.OTHER),
    (0, DuesState.OTHER),
    (99, DuesState.OTHER),
    (None, DuesState.OTHER),
])
def test_classify(code, state):
    assert classify(code) is state


def test_only_pending_and_partial_have_dues():
    assert [code for code in range(0, 6) if has_dues(code)] == [1, 4]
    assert set(DUE_STATUSES) == {OrderStatus.PENDING, OrderStatus.PARTIAL}


def test_status_labels():
    assert status_label(1) == "Pending Payment"
    assert status_label(4) == "Partial Payment"
    assert status_label(2) == "Paid/Other"


def test_is_valid_status():
    assert all(is_valid_status(code) for code in (1, 2, 3, 4))
    assert not is_valid_status(0)
    assert not is_valid_status(5)
