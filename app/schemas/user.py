from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

ROLE_PATTERN = "^(USER|ADMIN|MODERATOR)$"


class UserBase(BaseModel):
    name: str = Field(..., max_length=255)
    last_name: Optional[str] = Field(None, max_length=255)
    login: str = Field(..., max_length=255)
    email: EmailStr
    city: Optional[str] = Field(None, max_length=255)
    age: Optional[int] = Field(None, ge=0, le=150)
    about_user: Optional[str] = None
    role: str = Field(default="USER", pattern=ROLE_PATTERN)


class UserCreate(UserBase):
    pass


class UserUpdate(BaseModel):
    """All fields optional for PATCH"""
    name: Optional[str] = Field(None, max_length=255)
    last_name: Optional[str] = Field(None, max_length=255)
    login: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    city: Optional[str] = Field(None, max_length=255)
    age: Optional[int] = Field(None, ge=0, le=150)
    about_user: Optional[str] = None
    role: Optional[str] = Field(None, pattern=ROLE_PATTERN)

    @field_validator("name", "login", "email", "role")
    @classmethod
    def reject_null(cls, v):
        """Required columns may be omitted but not cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class UserRead(BaseModel):
    id: int
    name: str
    last_name: Optional[str] = None
    login: str
    email: str
    city: Optional[str] = None
    age: Optional[int] = None
    about_user: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
