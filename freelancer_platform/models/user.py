from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from freelancer_platform.db.base import Base

ROLES = ("admin", "client", "freelancer", "user")


class User(Base):
    """User model for authentication and authorization."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String)
    role = Column(String, nullable=False, default="client")  # see ROLES
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    freelancers = relationship("Freelancer", back_populates="owner")
    reports = relationship("Report", back_populates="creator")
