"""
Admin API endpoints.

User listing, role management and platform counters. Every route here
requires an admin token.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy import func
from sqlalchemy.orm import Session

from freelancer_platform.api.v1.auth import UserResponse, require_admin
from freelancer_platform.db.session import get_db
from freelancer_platform.models import ROLES, Freelancer, Report, User

logger = logging.getLogger("admin")

router = APIRouter(dependencies=[Depends(require_admin)])


class RoleUpdateRequest(BaseModel):
    role: str


class AdminStats(BaseModel):
    """Schema for the admin dashboard counters."""

    total_users: int = Field(serialization_alias="totalUsers")
    total_freelancers: int = Field(serialization_alias="totalFreelancers")
    total_reports: int = Field(serialization_alias="totalReports")
    freelancers_by_status: dict[str, int] = Field(serialization_alias="freelancersByStatus")


@router.get("/users", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
    return [UserResponse.model_validate(u) for u in users]


@router.put("/users/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: int,
    request: RoleUpdateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    if request.role not in ROLES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid role. Must be one of: {list(ROLES)}",
        )

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    previous_role = user.role
    user.role = request.role
    db.commit()
    db.refresh(user)

    logger.info(f"Admin {admin.id} changed role of user {user_id}: {previous_role} -> {user.role}")

    return UserResponse.model_validate(user)


@router.get("/stats", response_model=AdminStats)
def get_stats(db: Session = Depends(get_db)):
    status_rows = (
        db.query(Freelancer.status, func.count(Freelancer.id))
        .group_by(Freelancer.status)
        .all()
    )

    return AdminStats(
        total_users=db.query(User).count(),
        total_freelancers=db.query(Freelancer).count(),
        total_reports=db.query(Report).count(),
        freelancers_by_status={row_status: count for row_status, count in status_rows},
    )
