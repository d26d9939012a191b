from pydantic import BaseModel
from app.schemas.order import RowId
from typing import Optional
from datetime import date, datetime


CUSTOMER_REQUIRED_FIELDS = ("user_id", "address", "stb_number", "subscription_status", "area_id")


class CustomerCreate(BaseModel):
    user_id: Optional[RowId] = None
    address: Optional[str] = None
    stb_number: Optional[str] = None
    subscription_status: Optional[str] = None
    area_id: Optional[RowId] = None
    vc_number: Optional[str] = None
    old_vc_number: Optional[str] = None
    old_stb_number: Optional[str] = None
    installation_date: Optional[date] = None
    expiry_date: Optional[date] = None


class CustomerResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    address: str
    stb_number: str
    vc_number: Optional[str] = None
    old_vc_number: Optional[str] = None
    old_stb_number: Optional[str] = None
    subscription_status: str
    area_id: int
    installation_date: Optional[date] = None
    expiry_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CustomerWithUserResponse(BaseModel):
    id: int
    address: str
    stb_number: str
    vc_number: Optional[str] = None
    subscription_status: str
    area_id: int
    old_vc_number: Optional[str] = None
    old_stb_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    mobile_phone: Optional[str] = None
