from sqlalchemy import Column, Integer, String, Date, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)

    # Address
    address = Column(Text, nullable=False)
    area_id = Column(Integer, nullable=False)  # References areas.id (lookup table, no FK)

    # Set-top box and viewing card
    stb_number = Column(String, nullable=False)
    vc_number = Column(String)
    old_stb_number = Column(String)
    old_vc_number = Column(String)

    # Subscription
    subscription_status = Column(String, nullable=False)
    installation_date = Column(Date)
    expiry_date = Column(Date)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

