from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.dues import CustomerDuesResponse, FieldUserDuesResponse, PendingOrdersResponse
from app.services.dues_service import DuesService
from app.utils.helpers import PathId

router = APIRouter(tags=["Dues"])


@router.get("/customers/{customer_id}/dues", response_model=CustomerDuesResponse)
def get_customer_dues(customer_id: str, db: Session = Depends(get_db)):
    """
    Outstanding dues of one customer.

    The id is taken as a raw string so a non-numeric value is reported as a
    400 before any query runs.
    """
    return DuesService(db).customer_dues(customer_id)


@router.get("/field-users/{field_user_id}/dues", response_model=FieldUserDuesResponse)
def get_field_user_dues(field_user_id: PathId, db: Session = Depends(get_db)):
    """Pending and partial orders recorded by a field agent"""
    return DuesService(db).field_user_dues(field_user_id)


@router.get("/pending-orders", response_model=PendingOrdersResponse)
def get_pending_orders(db: Session = Depends(get_db)):
    return DuesService(db).pending_orders()
