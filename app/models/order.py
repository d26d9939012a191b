from sqlalchemy import Column, Integer, DateTime, Numeric, Text, ForeignKey
from sqlalchemy.orm import synonym
from sqlalchemy.sql import func
from app.database import Base


class Order(Base):
    """A recharge/payment record taken by a field agent for a customer."""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)  # References products.id (lookup table, no FK)
    payment_method_id = Column(Integer, nullable=False)  # References payment_methods.id (lookup table, no FK)

    # Field agent who recorded the order
    recharge_by_id = Column(Integer, ForeignKey("users.id"), index=True)
    order_created_by_id = synonym("recharge_by_id")

    # Status codes: see app.services.order_status.OrderStatus
    status = Column(Integer, nullable=False, index=True)
    portal_recharge_status = Column(Integer, nullable=False)

    # Amounts; due_amount is the outstanding balance as last written
    paid_amount = Column(Numeric(10, 2), default=0)
    due_amount = Column(Numeric(10, 2), default=0)

    comments = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

