"""
Report API endpoints.

Reports are write-once: anyone signed in can save one, only admins can
delete them, and there is no update.
"""

from datetime import datetime
from typing import Any, Literal, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session, joinedload

from freelancer_platform.api.v1.auth import get_current_user, require_admin
from freelancer_platform.db.session import get_db
from freelancer_platform.models import Report, User

logger = logging.getLogger("reports")

router = APIRouter()

ReportType = Literal["freelancers", "earnings", "activity", "performance"]


# ============== Pydantic Schemas ==============


class ReportCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: ReportType
    data: Any = None


class ReportCreator(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: Optional[str] = Field(default=None, serialization_alias="fullName")


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    type: str
    data: Any = None
    created_by: Optional[int] = None
    creator: Optional[ReportCreator] = None
    created_at: Optional[datetime] = None


# ============== Helper Functions ==============


def get_report_or_404(db: Session, report_id: int) -> Report:
    report = (
        db.query(Report)
        .options(joinedload(Report.creator))
        .filter(Report.id == report_id)
        .first()
    )
    if not report:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found",
        )
    return report


# ============== API Endpoints ==============


@router.get("", response_model=list[ReportResponse])
def list_reports(
    report_type: Optional[ReportType] = Query(default=None, alias="type"),
    limit: int = Query(default=50, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List reports newest first, optionally filtered by type."""
    query = db.query(Report).options(joinedload(Report.creator))

    if report_type:
        query = query.filter(Report.type == report_type)

    reports = query.order_by(Report.created_at.desc(), Report.id.desc()).limit(limit).all()
    return [ReportResponse.model_validate(r) for r in reports]


@router.get("/{report_id}", response_model=ReportResponse)
def get_report(report_id: int, db: Session = Depends(get_db)):
    return ReportResponse.model_validate(get_report_or_404(db, report_id))


@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
def create_report(
    payload: ReportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Save a report authored by the current user."""
    report = Report(
        title=payload.title,
        description=payload.description,
        type=payload.type,
        data=payload.data if payload.data is not None else {},
        created_by=current_user.id,
    )

    db.add(report)
    db.commit()
    db.refresh(report)

    logger.info(f"User {current_user.id} created {report.type} report {report.id}")

    return ReportResponse.model_validate(report)


@router.delete("/{report_id}")
def delete_report(
    report_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    report = get_report_or_404(db, report_id)

    db.delete(report)
    db.commit()

    logger.info(f"Admin {admin.id} deleted report {report_id}")

    return {"message": "Report deleted", "id": report_id}
