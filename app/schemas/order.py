from pydantic import AfterValidator, AliasChoices, BaseModel, Field, field_validator
from typing import Optional
from typing_extensions import Annotated
from datetime import datetime
from decimal import Decimal
from app.services.order_status import is_valid_status
from app.utils.helpers import MIN_INT_ID, MAX_INT_ID


ORDER_REQUIRED_FIELDS = (
    "customer_id",
    "product_id",
    "payment_method_id",
    "status",
    "paid_amount",
    "due_amount",
    "portal_recharge_status",
)


def _check_status(value):
    if value is not None and not is_valid_status(value):
        raise ValueError("status must be one of 1 (pending), 2 (active), 3 (cancelled), 4 (partial)")
    return value


StatusCode = Annotated[int, AfterValidator(_check_status)]
RowId = Annotated[int, Field(ge=MIN_INT_ID, le=MAX_INT_ID)]


class OrderCreate(BaseModel):
    """
    Every field is optional at parse time so a missing one can be reported
    together with the full list of required fields.
    """
    customer_id: Optional[RowId] = None
    product_id: Optional[RowId] = None
    payment_method_id: Optional[RowId] = None
    status: Optional[StatusCode] = None
    paid_amount: Optional[Decimal] = Field(None, ge=0)
    due_amount: Optional[Decimal] = Field(None, ge=0)
    portal_recharge_status: Optional[int] = None
    recharge_by_id: Optional[RowId] = Field(
        None, validation_alias=AliasChoices("recharge_by_id", "order_created_by_id")
    )
    comments: Optional[str] = None


class OrderUpdate(BaseModel):
    """Only keys sent by the client are applied; see ORDER_UPDATABLE_FIELDS."""
    status: Optional[StatusCode] = None
    paid_amount: Optional[Decimal] = Field(None, ge=0)
    due_amount: Optional[Decimal] = Field(None, ge=0)
    comments: Optional[str] = None
    portal_recharge_status: Optional[int] = None
    product_id: Optional[RowId] = None
    payment_method_id: Optional[RowId] = None
    recharge_by_id: Optional[RowId] = Field(
        None, validation_alias=AliasChoices("recharge_by_id", "order_created_by_id")
    )

    @field_validator(
        "status", "paid_amount", "due_amount", "portal_recharge_status",
        "product_id", "payment_method_id",
        mode="before",
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class OrderResponse(BaseModel):
    id: int
    customer_id: int
    product_id: int
    payment_method_id: int
    recharge_by_id: Optional[int] = None
    status: int
    paid_amount: Optional[Decimal] = None
    due_amount: Optional[Decimal] = None
    comments: Optional[str] = None
    portal_recharge_status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
