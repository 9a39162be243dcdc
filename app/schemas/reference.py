from typing import Optional

from pydantic import BaseModel, Field


class InterestCreate(BaseModel):
    title: str = Field(..., max_length=255)
    short_description: Optional[str] = None


class InterestRead(BaseModel):
    id: int
    title: str
    short_description: Optional[str] = None

    class Config:
        from_attributes = True


class EventTypeCreate(BaseModel):
    type: str = Field(..., max_length=255)


class EventTypeRead(BaseModel):
    id: int
    type: str

    class Config:
        from_attributes = True


class StatusRead(BaseModel):
    id: int
    status: str

    class Config:
        from_attributes = True
