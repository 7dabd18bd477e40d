from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Double, Integer, String
from sqlalchemy.orm import declarative_base


"""SQLAlchemy table definitions for the record store. - models"""

Base = declarative_base()


def _utcnow() -> datetime:
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SchoolRow(Base):
    """Persisted school record. - school_row"""
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    latitude = Column(Double, nullable=False)
    longitude = Column(Double, nullable=False)
    created_at = Column(DateTime, nullable=False, default=_utcnow)
