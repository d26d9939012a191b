"""
Dues aggregation over orders.

Customer view: pending/partial orders with a positive balance, summed.
Field-agent view: every pending/partial order the agent recorded, with no
balance filter; an empty set is reported as a notice, not a 404.
"""
import logging
from decimal import Decimal
from typing import Iterable, Optional
from sqlalchemy.orm import Session
from app.errors import NotFoundError
from app.models.order import Order
from app.repositories.customer_repo import CustomerRepository
from app.repositories.order_repo import OrderRepository
from app.schemas.dues import CustomerDuesResponse, DueItem, FieldUserDuesResponse, PendingOrdersResponse
from app.schemas.order import OrderResponse
from app.services.order_status import DUE_STATUSES, status_label
from app.utils.helpers import parse_numeric_id

logger = logging.getLogger(__name__)

NO_FIELD_USER_DUES_MESSAGE = "No dues found for this field user"


def sum_due_amounts(amounts: Iterable[Optional[Decimal]]) -> Decimal:
    """Exact Decimal total; a missing amount counts as zero"""
    total = Decimal("0")
    for amount in amounts:
        if amount is not None:
            total += Decimal(str(amount))
    return total


class DuesService:
    def __init__(self, db: Session):
        self.db = db
        self.orders = OrderRepository(db)
        self.customers = CustomerRepository(db)

    def customer_dues(self, customer_id: str) -> CustomerDuesResponse:
        """Outstanding balance for one customer"""
        # Reject malformed ids before touching the database
        cid = parse_numeric_id(customer_id, "customer id")

        customer = self.customers.get_by_id(cid)
        if not customer:
            raise NotFoundError("Customer not found")

        orders = self.orders.get_with_statuses(
            DUE_STATUSES, customer_id=cid, positive_due_only=True
        )
        dues = [
            DueItem(
                order_id=order.id,
                due_amount=order.due_amount if order.due_amount is not None else Decimal("0"),
                status=status_label(order.status),
                created_at=order.created_at,
            )
            for order in orders
        ]
        total_due = sum_due_amounts(order.due_amount for order in orders)
        logger.info(f"Customer {cid}: {len(dues)} dues totalling {total_due}")

        return CustomerDuesResponse(
            customer_id=customer.id,
            vc_number=customer.vc_number,
            stb_number=customer.stb_number,
            address=customer.address,
            dues=dues,
            total_due=total_due,
            due_count=len(dues),
        )

    def field_user_dues(self, field_user_id: int) -> FieldUserDuesResponse:
        """Pending/partial orders recorded by one field agent, newest first"""
        orders = self.orders.get_with_statuses(DUE_STATUSES, recharge_by_id=field_user_id)
        if not orders:
            return FieldUserDuesResponse(
                field_user_id=field_user_id,
                message=NO_FIELD_USER_DUES_MESSAGE,
                dues=[],
                count=0,
            )

        return FieldUserDuesResponse(
            field_user_id=field_user_id,
            dues=[self._to_response(order) for order in orders],
            count=len(orders),
        )

    def pending_orders(self) -> PendingOrdersResponse:
        orders = self.orders.get_with_statuses(DUE_STATUSES)
        return PendingOrdersResponse(
            orders=[self._to_response(order) for order in orders],
            count=len(orders),
        )

    @staticmethod
    def _to_response(order: Order) -> OrderResponse:
        return OrderResponse.model_validate(order)
