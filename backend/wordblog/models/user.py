"""SQLAlchemy model for identities mirrored from the identity service."""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from wordblog.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)  # identity service user id (uuid)
    email = Column(String(255))
    created_at = Column(DateTime, server_default=func.now())
