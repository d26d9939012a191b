import enum
from typing import Optional


class OrderStatus(enum.IntEnum):
    PENDING = 1
    ACTIVE = 2  # recharged and settled
    CANCELLED = 3
    PARTIAL = 4


class DuesState(str, enum.Enum):
    PENDING = "pending"
    PARTIAL = "partial"
    OTHER = "other"


# Only these codes carry an outstanding balance
DUE_STATUSES = (OrderStatus.PENDING, OrderStatus.PARTIAL)

_STATE_BY_CODE = {
    OrderStatus.PENDING: DuesState.PENDING,
    OrderStatus.PARTIAL: DuesState.PARTIAL,
}

_LABELS = {
    DuesState.PENDING: "Pending Payment",
    DuesState.PARTIAL: "Partial Payment",
    DuesState.OTHER: "Paid/Other",
}


def classify(code: Optional[int]) -> DuesState:
    """Map a stored status code to its dues state; unknown codes are OTHER."""
    return _STATE_BY_CODE.get(code, DuesState.OTHER)


def has_dues(code: Optional[int]) -> bool:
    return classify(code) is not DuesState.OTHER


def status_label(code: Optional[int]) -> str:
    return _LABELS[classify(code)]


def is_valid_status(code: int) -> bool:
    try:
        OrderStatus(code)
    except ValueError:
        return False
    return True
