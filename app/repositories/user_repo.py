from sqlalchemy.orm import Session
from typing import Optional
from app.models.user import User
from app.utils.security import hash_password


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        user_type_id: int,
        mobile_phone: str,
    ) -> User:
        """Create a user, storing only the password hash"""
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=hash_password(password),
            user_type_id=user_type_id,
            mobile_phone=mobile_phone,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
