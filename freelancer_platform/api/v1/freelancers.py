"""
Freelancer API endpoints.

Public listing and lookup of freelancer profiles; creating requires a
signed-in user, and editing or deleting requires the owner or an admin.
"""

from datetime import datetime
from typing import Literal, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session

from freelancer_platform.api.v1.auth import get_current_user
from freelancer_platform.db.session import get_db
from freelancer_platform.models import Freelancer, User

logger = logging.getLogger("freelancers")

router = APIRouter()

FreelancerStatus = Literal["active", "inactive", "pending"]
NON_NULLABLE_FIELDS = {"name", "email", "status", "skills", "total_projects"}


# ============== Pydantic Schemas ==============


class FreelancerCreate(BaseModel):
    """Schema for creating a freelancer profile."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    hourly_rate: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("hourly_rate", "hourlyRate"),
    )
    experience_years: Optional[int] = None
    bio: Optional[str] = None
    portfolio_url: Optional[str] = None
    availability: Optional[str] = None
    total_projects: int = 0
    status: FreelancerStatus = "active"


class FreelancerUpdate(BaseModel):
    """Schema for a partial freelancer update. Only sent fields change."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    skills: Optional[list[str]] = None
    hourly_rate: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("hourly_rate", "hourlyRate"),
    )
    experience_years: Optional[int] = None
    bio: Optional[str] = None
    portfolio_url: Optional[str] = None
    availability: Optional[str] = None
    total_projects: Optional[int] = None
    status: Optional[FreelancerStatus] = None


class FreelancerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    skills: list[str] = []
    hourly_rate: Optional[float] = None
    experience_years: Optional[int] = None
    bio: Optional[str] = None
    portfolio_url: Optional[str] = None
    availability: Optional[str] = None
    total_projects: Optional[int] = 0
    status: str
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FreelancerListResponse(BaseModel):
    data: list[FreelancerResponse]
    count: int
    limit: int
    offset: int


class FreelancerEnvelope(BaseModel):
    data: FreelancerResponse
    message: Optional[str] = None


# ============== Helper Functions ==============


def get_freelancer_or_404(db: Session, freelancer_id: int) -> Freelancer:
    freelancer = db.query(Freelancer).filter(Freelancer.id == freelancer_id).first()
    if not freelancer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Freelancer not found",
        )
    return freelancer


def ensure_can_modify(freelancer: Freelancer, user: User) -> None:
    """Only the owning user or an admin may change a profile."""
    if user.role == "admin":
        return
    if freelancer.user_id is not None and freelancer.user_id == user.id:
        return
    logger.warning(f"User {user.id} denied write access to freelancer {freelancer.id}")
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Not authorized to modify this freelancer",
    )


# ============== API Endpoints ==============


@router.get("", response_model=FreelancerListResponse)
def list_freelancers(
    status_filter: Optional[FreelancerStatus] = Query(default=None, alias="status"),
    search: Optional[str] = None,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    """
    List freelancers, newest first.

    Optional filters:
    - status: active / inactive / pending
    - search: case-insensitive substring of name, email or skills
    - limit/offset: Pagination
    """
    query = db.query(Freelancer)

    if status_filter:
        query = query.filter(Freelancer.status == status_filter)

    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(
            or_(
                Freelancer.name.ilike(pattern),
                Freelancer.email.ilike(pattern),
                cast(Freelancer.skills, String).ilike(pattern),
            )
        )

    total = query.count()
    freelancers = (
        query.order_by(Freelancer.created_at.desc(), Freelancer.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )

    return FreelancerListResponse(
        data=[FreelancerResponse.model_validate(f) for f in freelancers],
        count=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{freelancer_id}", response_model=FreelancerEnvelope)
def get_freelancer(freelancer_id: int, db: Session = Depends(get_db)):
    """Get a single freelancer by id."""
    freelancer = get_freelancer_or_404(db, freelancer_id)
    return FreelancerEnvelope(data=FreelancerResponse.model_validate(freelancer))


@router.post("", response_model=FreelancerEnvelope, status_code=status.HTTP_201_CREATED)
def create_freelancer(
    payload: FreelancerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a freelancer profile owned by the current user."""
    freelancer = Freelancer(**payload.model_dump(), user_id=current_user.id)

    db.add(freelancer)
    db.commit()
    db.refresh(freelancer)

    logger.info(f"User {current_user.id} created freelancer {freelancer.id}")

    return FreelancerEnvelope(
        data=FreelancerResponse.model_validate(freelancer),
        message="Freelancer created successfully",
    )


@router.put("/{freelancer_id}", response_model=FreelancerEnvelope)
def update_freelancer(
    freelancer_id: int,
    payload: FreelancerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update the fields sent in the body; everything else is left alone."""
    freelancer = get_freelancer_or_404(db, freelancer_id)
    ensure_can_modify(freelancer, current_user)

    for field, value in payload.model_dump(exclude_unset=True).items():
        # Required columns cannot be cleared
        if value is None and field in NON_NULLABLE_FIELDS:
            continue
        setattr(freelancer, field, value)
    freelancer.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(freelancer)

    logger.info(f"User {current_user.id} updated freelancer {freelancer_id}")

    return FreelancerEnvelope(
        data=FreelancerResponse.model_validate(freelancer),
        message="Freelancer updated successfully",
    )


@router.delete("/{freelancer_id}")
def delete_freelancer(
    freelancer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    freelancer = get_freelancer_or_404(db, freelancer_id)
    ensure_can_modify(freelancer, current_user)

    db.delete(freelancer)
    db.commit()

    logger.info(f"User {current_user.id} deleted freelancer {freelancer_id}")

    return {"message": "Freelancer deleted successfully", "id": freelancer_id}
