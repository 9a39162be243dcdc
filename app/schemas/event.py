from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.reference import EventTypeRead, InterestRead, StatusRead
from app.schemas.user import UserRead


class EventBase(BaseModel):
    event_name: str = Field(..., min_length=1, max_length=255, examples=["JOKER 2021"])
    description_event: str = Field(..., examples=["Java developers conference"])
    place_event: str = Field(..., max_length=255, examples=["Online"])
    time_event: datetime
    event_type_id: int
    author_id: int
    interest_ids: list[int] = []


class EventCreate(EventBase):
    pass


class EventUpdate(EventBase):
    """PUT replaces the whole event"""
    pass


class EventRead(BaseModel):
    id: int
    event_name: str
    description_event: str
    place_event: str
    time_event: datetime
    event_update_date: Optional[date] = None
    event_type: EventTypeRead
    author: UserRead
    status: Optional[StatusRead] = None
    participants: list[UserRead] = []
    interests: list[InterestRead] = []

    class Config:
        from_attributes = True


class JoinRequest(BaseModel):
    event_id: int
    user_id: int
