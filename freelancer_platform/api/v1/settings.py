"""
Settings API endpoints.

Key/value platform settings. Reading is public; writes are admin-only and
upsert by key, so repeating a PUT leaves exactly one row holding the latest
value.
"""

from datetime import datetime
from typing import Any, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from freelancer_platform.api.v1.auth import require_admin
from freelancer_platform.db.session import get_db
from freelancer_platform.models import Setting, User

logger = logging.getLogger("settings")

router = APIRouter()


class SettingUpsert(BaseModel):
    value: Any = None
    description: Optional[str] = None


class SettingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    key: str
    value: Any = None
    description: Optional[str] = None
    updated_by: Optional[int] = None
    updated_at: Optional[datetime] = None


def get_setting_by_key(db: Session, key: str) -> Optional[Setting]:
    return db.query(Setting).filter(Setting.key == key).first()


@router.get("", response_model=list[SettingResponse])
def list_settings(db: Session = Depends(get_db)):
    """List all settings ordered by key."""
    return [SettingResponse.model_validate(s) for s in db.query(Setting).order_by(Setting.key).all()]


@router.get("/{key}", response_model=SettingResponse)
def get_setting(key: str, db: Session = Depends(get_db)):
    setting = get_setting_by_key(db, key)
    if not setting:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Setting not found",
        )
    return SettingResponse.model_validate(setting)


@router.put("/{key}", response_model=SettingResponse)
def upsert_setting(
    key: str,
    payload: SettingUpsert,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Create the setting if it is new, otherwise overwrite it."""
    setting = get_setting_by_key(db, key)
    created = setting is None
    if created:
        setting = Setting(key=key)
        db.add(setting)

    if "value" in payload.model_fields_set:
        setting.value = payload.value
    elif created:
        setting.value = {}
    if payload.description is not None or created:
        setting.description = payload.description
    setting.updated_by = admin.id
    setting.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(setting)

    logger.info(f"Admin {admin.id} {'created' if created else 'updated'} setting '{key}'")

    return SettingResponse.model_validate(setting)


@router.delete("/{key}")
def delete_setting(
    key: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    setting = get_setting_by_key(db, key)
    if not setting:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Setting not found",
        )

    db.delete(setting)
    db.commit()

    logger.info(f"Admin {admin.id} deleted setting '{key}'")

    return {"message": "Setting deleted", "key": key}
