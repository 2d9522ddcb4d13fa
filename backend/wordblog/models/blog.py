"""SQLAlchemy model for the blogs table."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, JSON, ForeignKey, Index
from sqlalchemy.sql import func
from wordblog.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _new_id() -> str:
    return str(uuid.uuid4())


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(Text, nullable=False)
    slug = Column(String(255), unique=True, nullable=False)
    content_md = Column(Text, nullable=False)
    content_html = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False, default=list)  # ordered list of strings
    created_at = Column(DateTime, default=_utcnow, server_default=func.now(), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=True)

    __table_args__ = (
        Index("blogs_created_at_idx", "created_at"),
        Index("blogs_user_id_idx", "user_id"),
    )
