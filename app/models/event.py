from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.models.reference import EventType, Interest  # noqa: F401
from app.models.status import Status  # noqa: F401
from app.models.user import User  # noqa: F401

event_participants = Table(
    "event_participants",
    Base.metadata,
    Column("event_id", Integer, ForeignKey("event.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("account.id", ondelete="CASCADE"), primary_key=True),
)

interests_event = Table(
    "interests_event",
    Base.metadata,
    Column("event_id", Integer, ForeignKey("event.id", ondelete="CASCADE"), primary_key=True),
    Column("interests_id", Integer, ForeignKey("interests.id", ondelete="CASCADE"), primary_key=True),
)


class Event(Base):
    __tablename__ = "event"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_name = Column(String(255), nullable=False, index=True)
    description_event = Column(Text, nullable=False)
    place_event = Column(String(255), nullable=False)
    time_event = Column(DateTime(timezone=True), nullable=False)
    event_update_date = Column(Date, nullable=True)

    event_type_id = Column(Integer, ForeignKey("event_type.id"), nullable=False)
    author_id = Column(Integer, ForeignKey("account.id"), nullable=False, index=True)
    status_id = Column(Integer, ForeignKey("status.id"), nullable=True)

    event_type = relationship("EventType")
    author = relationship("User")
    status = relationship("Status")
    participants = relationship("User", secondary=event_participants)
    interests = relationship("Interest", secondary=interests_event)
