from sqlalchemy.orm import Session
from typing import Optional, List
from datetime import date
from app.models.customer import Customer
from app.models.user import User


class CustomerRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: int,
        address: str,
        stb_number: str,
        subscription_status: str,
        area_id: int,
        vc_number: Optional[str] = None,
        old_vc_number: Optional[str] = None,
        old_stb_number: Optional[str] = None,
        installation_date: Optional[date] = None,
        expiry_date: Optional[date] = None,
    ) -> Customer:
        """Create a new customer"""
        customer = Customer(
            user_id=user_id,
            address=address,
            stb_number=stb_number,
            subscription_status=subscription_status,
            area_id=area_id,
            vc_number=vc_number,
            old_vc_number=old_vc_number,
            old_stb_number=old_stb_number,
            installation_date=installation_date,
            expiry_date=expiry_date,
        )
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID"""
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def get_all_with_users(self) -> List[dict]:
        """All customers with the owning user's contact details"""
        rows = (
            self.db.query(Customer, User)
            .outerjoin(User, Customer.user_id == User.id)
            .order_by(Customer.id)
            .all()
        )

        customers = []
        for customer, user in rows:
            customers.append({
                'id': customer.id,
                'address': customer.address,
                'stb_number': customer.stb_number,
                'vc_number': customer.vc_number,
                'subscription_status': customer.subscription_status,
                'area_id': customer.area_id,
                'old_vc_number': customer.old_vc_number,
                'old_stb_number': customer.old_stb_number,
                'first_name': user.first_name if user else None,
                'last_name': user.last_name if user else None,
                'email': user.email if user else None,
                'mobile_phone': user.mobile_phone if user else None,
            })
        return customers
