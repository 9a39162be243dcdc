from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from app.db.base import Base

USER_ROLES = ("USER", "ADMIN", "MODERATOR")


class User(Base):
    __tablename__ = "account"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=True)
    login = Column(String(255), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    city = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)
    about_user = Column(Text, nullable=True)
    role = Column(String(32), nullable=False, default="USER")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
