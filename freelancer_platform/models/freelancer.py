from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, ForeignKey, JSON, Text, DateTime
from sqlalchemy.orm import relationship

from freelancer_platform.db.base import Base

FREELANCER_STATUSES = ("active", "inactive", "pending")


class Freelancer(Base):
    """Freelancer profile listed on the marketplace."""

    __tablename__ = "freelancers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String)

    # Free-form skill tags, e.g. ["Python", "React"]
    skills = Column(JSON, default=list)

    hourly_rate = Column(Float)
    experience_years = Column(Integer)
    bio = Column(Text)
    portfolio_url = Column(String)
    availability = Column(String)
    total_projects = Column(Integer, default=0)

    status = Column(String, default="pending", index=True)  # see FREELANCER_STATUSES

    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    owner = relationship("User", back_populates="freelancers")
