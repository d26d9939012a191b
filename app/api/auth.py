import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from app.database import get_db
from app.errors import ValidationError, NotFoundError
from app.middleware.auth import get_current_user
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.auth import (
    SignupRequest, SignupResponse, LoginRequest, LoginResponse,
    MeResponse, UserResponse, SIGNUP_REQUIRED_FIELDS,
)
from app.utils.helpers import is_valid_mobile_phone, require_fields
from app.utils.security import create_access_token, verify_password

router = APIRouter(tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    request: SignupRequest,
    db: Session = Depends(get_db)
):
    """Register a user; the password is stored hashed"""
    require_fields(request.model_dump(), SIGNUP_REQUIRED_FIELDS, message="All fields are required")

    if not is_valid_mobile_phone(request.mobile_phone):
        raise ValidationError("Mobile number must be exactly 10 digits")

    user_repo = UserRepository(db)
    if user_repo.get_by_email(request.email):
        raise ValidationError("Email already exists")

    try:
        user = user_repo.create(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            user_type_id=request.user_type_id,
            mobile_phone=request.mobile_phone,
        )
    except IntegrityError:
        # A concurrent signup committed the same email first
        db.rollback()
        raise ValidationError("Email already exists")

    logger.info(f"User created: id={user.id}")

    return SignupResponse(message="User created", user=UserResponse.model_validate(user))


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db)
):
    """Verify credentials and issue a bearer token"""
    require_fields(request.model_dump(), ("email", "password"), message="Email and password are required")

    user = UserRepository(db).get_by_email(request.email)
    if not user:
        raise NotFoundError("User not found")

    if not verify_password(request.password, user.password):
        raise ValidationError("Invalid credentials")

    token = create_access_token(
        data={"id": user.id, "email": user.email, "user_type_id": user.user_type_id}
    )

    return LoginResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/api/user/me", response_model=MeResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """Name fields of the token's user"""
    return MeResponse(
        id=current_user.id,
        first_name=current_user.first_name,
        last_name=current_user.last_name,
    )
