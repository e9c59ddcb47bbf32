from collections.abc import Generator
import json

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from freelancer_platform.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL


def json_serializer(value) -> str:
    """Store JSON columns as plain UTF-8 so text search sees non-ASCII skills."""
    return json.dumps(value, ensure_ascii=False)


engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {},
    json_serializer=json_serializer,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
