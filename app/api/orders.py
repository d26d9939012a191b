import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.errors import NotFoundError, ValidationError
from app.repositories.customer_repo import CustomerRepository
from app.repositories.order_repo import OrderRepository, ORDER_UPDATABLE_FIELDS
from app.repositories.user_repo import UserRepository
from app.schemas.order import OrderCreate, OrderUpdate, OrderResponse, ORDER_REQUIRED_FIELDS
from app.utils.helpers import PathId, require_fields

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger(__name__)


@router.get("", response_model=dict)
def list_orders(db: Session = Depends(get_db)):
    """All orders, newest first"""
    orders = OrderRepository(db).get_all()
    return {
        "orders": [OrderResponse.model_validate(o) for o in orders],
        "count": len(orders),
    }


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: PathId, db: Session = Depends(get_db)):
    order = OrderRepository(db).get_by_id(order_id)
    if not order:
        raise NotFoundError("Order not found")
    return order


def _check_references(db: Session, customer_id: Optional[int] = None, recharge_by_id: Optional[int] = None) -> None:
    """404 for a customer or field user that does not exist"""
    if customer_id is not None and not CustomerRepository(db).get_by_id(customer_id):
        raise NotFoundError("Customer not found")
    if recharge_by_id is not None and not UserRepository(db).get_by_id(recharge_by_id):
        raise NotFoundError("Field user not found")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_order(
    order_data: OrderCreate,
    db: Session = Depends(get_db)
):
    """Create an order; every required field must be present"""
    require_fields(order_data.model_dump(), ORDER_REQUIRED_FIELDS)
    _check_references(db, order_data.customer_id, order_data.recharge_by_id)

    order = OrderRepository(db).create(
        customer_id=order_data.customer_id,
        product_id=order_data.product_id,
        payment_method_id=order_data.payment_method_id,
        status=order_data.status,
        paid_amount=order_data.paid_amount,
        due_amount=order_data.due_amount,
        portal_recharge_status=order_data.portal_recharge_status,
        recharge_by_id=order_data.recharge_by_id,
        comments=order_data.comments,
    )
    logger.info(f"Order created: id={order.id} customer={order.customer_id} status={order.status}")

    return {"message": "Order created", "order": OrderResponse.model_validate(order)}


@router.put("/{order_id}", response_model=dict)
def update_order(
    order_id: PathId,
    order_data: OrderUpdate,
    db: Session = Depends(get_db)
):
    """Update the whitelisted fields present in the body"""
    update_data = order_data.model_dump(exclude_unset=True)
    if not update_data:
        raise ValidationError(
            "No updatable fields provided",
            allowed_fields=list(ORDER_UPDATABLE_FIELDS),
        )
    _check_references(db, recharge_by_id=update_data.get("recharge_by_id"))

    order = OrderRepository(db).update(order_id, **update_data)
    if not order:
        raise NotFoundError("Order not found")

    return {"message": "Order updated", "order": OrderResponse.model_validate(order)}


@router.delete("/{order_id}")
def delete_order(order_id: PathId, db: Session = Depends(get_db)):
    success = OrderRepository(db).delete(order_id)
    if not success:
        raise NotFoundError("Order not found")

    logger.info(f"Order deleted: id={order_id}")
    return {"message": "Order deleted"}
