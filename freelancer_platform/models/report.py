from datetime import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, JSON, Text, DateTime
from sqlalchemy.orm import relationship

from freelancer_platform.db.base import Base

REPORT_TYPES = ("freelancers", "earnings", "activity", "performance")


class Report(Base):
    """
    Saved report. Reports are write-once: they can be created and
    deleted but never edited.
    """

    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    type = Column(String, nullable=False, index=True)  # see REPORT_TYPES

    # Opaque payload produced by the frontend (chart series, totals, ...)
    data = Column(JSON, default=dict)

    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    creator = relationship("User", back_populates="reports")
