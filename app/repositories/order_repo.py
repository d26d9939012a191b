from sqlalchemy.orm import Session
from typing import Optional, List, Iterable
from datetime import datetime, timezone
from decimal import Decimal
from app.models.order import Order
from app.services.order_status import DUE_STATUSES


# Columns a PUT may write; anything else in the body is ignored
ORDER_UPDATABLE_FIELDS = (
    "status",
    "paid_amount",
    "due_amount",
    "comments",
    "portal_recharge_status",
    "product_id",
    "payment_method_id",
    "recharge_by_id",
)


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self, query):
        return query.order_by(Order.created_at.desc(), Order.id.desc())

    def create(
        self,
        customer_id: int,
        product_id: int,
        payment_method_id: int,
        status: int,
        paid_amount: Decimal,
        due_amount: Decimal,
        portal_recharge_status: int,
        recharge_by_id: Optional[int] = None,
        comments: Optional[str] = None,
    ) -> Order:
        """Create a new order"""
        order = Order(
            customer_id=customer_id,
            product_id=product_id,
            payment_method_id=payment_method_id,
            status=status,
            paid_amount=paid_amount,
            due_amount=due_amount,
            portal_recharge_status=portal_recharge_status,
            recharge_by_id=recharge_by_id,
            comments=comments,
        )
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_by_id(self, order_id: int) -> Optional[Order]:
        return self.db.query(Order).filter(Order.id == order_id).first()

    def get_all(self) -> List[Order]:
        return self._newest_first(self.db.query(Order)).all()

    def update(self, order_id: int, **fields) -> Optional[Order]:
        """Write whitelisted fields and stamp updated_at"""
        order = self.get_by_id(order_id)
        if not order:
            return None

        for key, value in fields.items():
            if key in ORDER_UPDATABLE_FIELDS:
                setattr(order, key, value)

        order.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(order)
        return order

    def delete(self, order_id: int) -> bool:
        deleted = self.db.query(Order).filter(Order.id == order_id).delete()
        self.db.commit()
        return deleted > 0

    def get_with_statuses(
        self,
        statuses: Iterable[int] = DUE_STATUSES,
        customer_id: Optional[int] = None,
        recharge_by_id: Optional[int] = None,
        positive_due_only: bool = False,
    ) -> List[Order]:
        """Orders in the given status set, newest first"""
        query = self.db.query(Order).filter(Order.status.in_([int(s) for s in statuses]))

        if customer_id is not None:
            query = query.filter(Order.customer_id == customer_id)
        if recharge_by_id is not None:
            query = query.filter(Order.recharge_by_id == recharge_by_id)
        if positive_due_only:
            query = query.filter(Order.due_amount > 0)

        return self._newest_first(query).all()
