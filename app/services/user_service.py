import logging

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.event import Event
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.scalars(select(User).order_by(User.id))
    return list(result.all())


async def get_user_or_404(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


async def _ensure_unique(db: AsyncSession, email: str | None, login: str | None, exclude_id: int | None = None) -> None:
    filters = []
    if email:
        filters.append(User.email == email)
    if login:
        filters.append(User.login == login)
    if not filters:
        return
    stmt = select(User).where(or_(*filters))
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    existing = await db.scalar(stmt)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email or login already registered",
        )


async def create_user(db: AsyncSession, data: UserCreate) -> User:
    await _ensure_unique(db, data.email, data.login)
    user = User(**data.model_dump())
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("Created user %s", user.id)
    return user


async def update_user(db: AsyncSession, user_id: int, data: UserUpdate) -> User:
    user = await get_user_or_404(db, user_id)
    payload = data.model_dump(exclude_unset=True)
    await _ensure_unique(db, payload.get("email"), payload.get("login"), exclude_id=user_id)
    for field, value in payload.items():
        setattr(user, field, value)
    await db.commit()
    await db.refresh(user)
    return user


async def delete_user(db: AsyncSession, user_id: int) -> None:
    user = await get_user_or_404(db, user_id)
    authored = await db.scalar(
        select(func.count()).select_from(Event).where(Event.author_id == user_id)
    )
    if authored:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User is the author of existing events",
        )
    await db.delete(user)
    await db.commit()
