from sqlalchemy import Column, Integer, String, Text

from app.db.base import Base


class EventType(Base):
    __tablename__ = "event_type"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(255), nullable=False, unique=True)


class Interest(Base):
    __tablename__ = "interests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, unique=True)
    short_description = Column(Text, nullable=True)
