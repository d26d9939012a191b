from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.errors import NotFoundError
from app.repositories.customer_repo import CustomerRepository
from app.repositories.user_repo import UserRepository
from app.schemas.customer import (
    CustomerCreate, CustomerResponse, CustomerWithUserResponse, CUSTOMER_REQUIRED_FIELDS,
)
from app.utils.helpers import PathId, require_fields

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db)
):
    """Create a customer owned by an existing user"""
    require_fields(customer_data.model_dump(), CUSTOMER_REQUIRED_FIELDS)

    if not UserRepository(db).get_by_id(customer_data.user_id):
        raise NotFoundError("User not found")

    customer = CustomerRepository(db).create(**customer_data.model_dump())
    return {"message": "Customer created", "customer": CustomerResponse.model_validate(customer)}


@router.get("", response_model=dict)
def list_customers(db: Session = Depends(get_db)):
    """All customers with the owning user's details"""
    customers = CustomerRepository(db).get_all_with_users()
    return {"customers": [CustomerWithUserResponse(**c) for c in customers]}


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: PathId, db: Session = Depends(get_db)):
    """Get customer by ID"""
    customer = CustomerRepository(db).get_by_id(customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    return customer
