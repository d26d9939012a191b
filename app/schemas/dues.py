from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from app.schemas.order import OrderResponse


class DueItem(BaseModel):
    order_id: int
    due_amount: Decimal
    status: str  # human-readable label, e.g. "Pending Payment"
    created_at: Optional[datetime] = None


class CustomerDuesResponse(BaseModel):
    customer_id: int
    vc_number: Optional[str] = None
    stb_number: Optional[str] = None
    address: Optional[str] = None
    dues: List[DueItem] = []
    total_due: Decimal
    due_count: int


class FieldUserDuesResponse(BaseModel):
    field_user_id: int
    message: Optional[str] = None
    dues: List[OrderResponse] = []
    count: int


class PendingOrdersResponse(BaseModel):
    orders: List[OrderResponse] = []
    count: int
