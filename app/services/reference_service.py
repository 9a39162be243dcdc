import logging

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.reference import EventType, Interest
from app.models.status import EVENT_STATUSES, Status
from app.schemas.reference import EventTypeCreate, InterestCreate

logger = logging.getLogger(__name__)


# ---------- Statuses ----------

async def list_statuses(db: AsyncSession) -> list[Status]:
    result = await db.scalars(select(Status).order_by(Status.id))
    return list(result.all())


async def get_or_create_status(db: AsyncSession, name: str) -> Status:
    status_row = await db.scalar(select(Status).where(Status.status == name))
    if status_row is None:
        status_row = Status(status=name)
        db.add(status_row)
        await db.flush()
        logger.info("Created event status %s", name)
    return status_row


async def seed_statuses(db: AsyncSession) -> None:
    for name in EVENT_STATUSES:
        await get_or_create_status(db, name)
    await db.commit()


# ---------- Event types ----------

async def list_event_types(db: AsyncSession) -> list[EventType]:
    result = await db.scalars(select(EventType).order_by(EventType.id))
    return list(result.all())


async def create_event_type(db: AsyncSession, data: EventTypeCreate) -> EventType:
    existing = await db.scalar(select(EventType).where(EventType.type == data.type))
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Event type already exists")
    event_type = EventType(type=data.type)
    db.add(event_type)
    await db.commit()
    await db.refresh(event_type)
    return event_type


async def get_event_type_or_404(db: AsyncSession, event_type_id: int) -> EventType:
    event_type = await db.get(EventType, event_type_id)
    if not event_type:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event type not found")
    return event_type


# ---------- Interests ----------

async def list_interests(db: AsyncSession) -> list[Interest]:
    result = await db.scalars(select(Interest).order_by(Interest.id))
    return list(result.all())


async def create_interest(db: AsyncSession, data: InterestCreate) -> Interest:
    existing = await db.scalar(select(Interest).where(Interest.title == data.title))
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Interest already exists")
    interest = Interest(title=data.title, short_description=data.short_description)
    db.add(interest)
    await db.commit()
    await db.refresh(interest)
    return interest


async def get_interests_or_404(db: AsyncSession, interest_ids: list[int]) -> list[Interest]:
    wanted = set(interest_ids)
    if not wanted:
        return []
    result = await db.scalars(select(Interest).where(Interest.id.in_(wanted)))
    interests = list(result.all())
    missing = wanted - {i.id for i in interests}
    if missing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Interests not found: {sorted(missing)}",
        )
    return interests


async def delete_interest(db: AsyncSession, interest_id: int) -> None:
    interest = await db.get(Interest, interest_id)
    if not interest:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interest not found")
    await db.delete(interest)
    await db.commit()
