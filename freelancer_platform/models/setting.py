from datetime import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, JSON, Text, DateTime

from freelancer_platform.db.base import Base


class Setting(Base):
    """Platform-wide key/value setting, upserted by key."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True)
    key = Column(String, unique=True, index=True, nullable=False)
    value = Column(JSON)
    description = Column(Text)
    updated_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow)
