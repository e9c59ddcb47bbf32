"""
Authentication API endpoints.

Handles signup, signin and signout with JWT bearer tokens, plus the
`get_current_user` / `require_admin` dependencies used by the other routers.
"""

from datetime import datetime
from typing import Optional
import logging
import re

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from freelancer_platform.core.config import settings
from freelancer_platform.core.security import (
    create_user_token,
    get_password_hash,
    get_token_subject,
    verify_password,
)
from freelancer_platform.db.session import get_db
from freelancer_platform.models import User

logger = logging.getLogger("auth")

router = APIRouter()

# OAuth2 scheme for token authentication (reads "Authorization: Bearer <token>")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/signin")

SIGNUP_ROLES = ["client", "freelancer", "user"]


# ============== Pydantic Schemas ==============


class UserSignup(BaseModel):
    """Schema for user registration."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    password: str = Field(min_length=1)
    full_name: str = Field(alias="fullName", min_length=1)
    role: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format."""
        email_pattern = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"
        if not re.match(email_pattern, v.strip()):
            raise ValueError("Invalid email format")
        return v.strip().lower()


class UserSignin(BaseModel):
    """Schema for signin credentials."""

    email: str
    password: str


class UserResponse(BaseModel):
    """Schema for user response (without password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: Optional[str] = Field(default=None, serialization_alias="fullName")
    role: str
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    """Token plus the user it was issued for."""

    token: str
    user: UserResponse


class MeResponse(BaseModel):
    user: UserResponse


# ============== Helper Functions ==============


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get a user by email address."""
    return db.query(User).filter(User.email == email.strip().lower()).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.

    Raises HTTPException if token is invalid or user not found.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user_id = get_token_subject(token)
    if user_id is None:
        raise credentials_exception

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise credentials_exception

    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Dependency that only lets admins through."""
    if current_user.role != "admin":
        logger.warning(f"Admin access denied for user {current_user.id} (role: {current_user.role})")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        token=create_user_token(user),
        user=UserResponse.model_validate(user),
    )


# ============== API Endpoints ==============


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user_data: UserSignup, db: Session = Depends(get_db)):
    """
    Register a new user and sign them in.

    Role defaults to 'client'. 'admin' is only accepted when
    ALLOW_ADMIN_SIGNUP is enabled.
    """
    role = user_data.role or "client"
    allowed_roles = SIGNUP_ROLES + (["admin"] if settings.ALLOW_ADMIN_SIGNUP else [])
    if role not in allowed_roles:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid role specified",
        )

    if get_user_by_email(db, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )

    new_user = User(
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        role=role,
    )

    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )
    db.refresh(new_user)

    logger.info(f"New user {new_user.id} signed up as {new_user.role}")

    return _auth_response(new_user)


@router.post("/signin", response_model=AuthResponse)
def signin(credentials: UserSignin, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _auth_response(user)


@router.post("/signout")
def signout(current_user: User = Depends(get_current_user)):
    """
    Sign out. Tokens are stateless, so the client just discards its copy.
    """
    logger.info(f"User {current_user.id} signed out")
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=MeResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Get the current authenticated user's profile."""
    return MeResponse(user=UserResponse.model_validate(current_user))
