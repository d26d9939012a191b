from pydantic import BaseModel
from typing import Optional


SIGNUP_REQUIRED_FIELDS = ("first_name", "last_name", "email", "password", "user_type_id", "mobile_phone")


class SignupRequest(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    user_type_id: Optional[int] = None
    mobile_phone: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    user_type_id: int
    mobile_phone: str

    class Config:
        from_attributes = True


class SignupResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    token: str
    token_type: str = "bearer"
    user: UserResponse


class MeResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
