from sqlalchemy import Column, Integer, String

from app.db.base import Base

STATUS_CHECKED = "CHECKED"
STATUS_MODERATION = "MODERATION"
STATUS_REJECTED = "REJECTED"

EVENT_STATUSES = (STATUS_CHECKED, STATUS_MODERATION, STATUS_REJECTED)


class Status(Base):
    """Event status: checked, on moderation, rejected."""
    __tablename__ = "status"

    id = Column(Integer, primary_key=True, autoincrement=True)
    status = Column(String(64), nullable=False, unique=True)
