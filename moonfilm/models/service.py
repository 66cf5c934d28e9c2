"""
SQLAlchemy model for the service catalog.
"""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Float, String, Text

from moonfilm.database import Base


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ServiceModel(Base):
    __tablename__ = "services"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, default="photography")  # photography | videography | package | addon
    price = Column(Float, nullable=False, default=0.0)
    description = Column(Text, nullable=False, default="")
    is_active = Column("isActive", Boolean, nullable=False, default=True)
    created_at = Column(String, nullable=False, default=_now)
