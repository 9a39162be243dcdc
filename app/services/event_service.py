import logging
from datetime import date, datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.event import Event
from app.models.status import STATUS_CHECKED, STATUS_MODERATION, Status
from app.schemas.event import EventCreate, EventUpdate
from app.services.reference_service import (
    get_event_type_or_404,
    get_interests_or_404,
    get_or_create_status,
)
from app.services.user_service import get_user_or_404
from app.services.word_matcher import Classification, WordMatcher

logger = logging.getLogger(__name__)

FORBIDDEN_WORDS_DETAIL = "Event name or description contains forbidden words"
OUTDATED_EVENT_DETAIL = "Event date is more than {years} year(s) old"


# ---------- Checks ----------

def full_years_between(start: datetime, end: datetime) -> int:
    """Whole calendar years from ``start`` to ``end`` (negative if ``end`` is earlier)."""
    years = end.year - start.year
    if years > 0 and (end.month, end.day, end.time()) < (start.month, start.day, start.time()):
        years -= 1
    elif years < 0 and (end.month, end.day, end.time()) > (start.month, start.day, start.time()):
        years += 1
    return years


def check_event(
    matcher: WordMatcher,
    data: EventCreate,
    now: Optional[datetime] = None,
    max_age_years: int = 1,
) -> Classification:
    """
    Run the pre-save checks for an event.

    Raises 400 when the name or description contains forbidden words or the
    event lies ``max_age_years`` or more in the past. Otherwise returns the
    filter classification, CLEAN or NEEDS_REVIEW.
    """
    classification = matcher.classify(data.event_name, data.description_event)
    if classification is Classification.BLOCKED:
        logger.error("Event contains forbidden words: %s", data.event_name)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=FORBIDDEN_WORDS_DETAIL)

    if now is None:
        now = datetime.now(data.time_event.tzinfo)
    if full_years_between(data.time_event, now) >= max_age_years:
        logger.error("Event date %s is too old: %s", data.time_event, data.event_name)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=OUTDATED_EVENT_DETAIL.format(years=max_age_years),
        )

    if classification is Classification.NEEDS_REVIEW:
        logger.debug("Event sent to moderation: %s", data.event_name)
    return classification


def _status_for(classification: Classification) -> str:
    if classification is Classification.NEEDS_REVIEW:
        return STATUS_MODERATION
    return STATUS_CHECKED


# ---------- Queries ----------

def _event_query():
    return select(Event).options(
        selectinload(Event.event_type),
        selectinload(Event.author),
        selectinload(Event.status),
        selectinload(Event.participants),
        selectinload(Event.interests),
    )


async def list_events(db: AsyncSession) -> list[Event]:
    result = await db.scalars(_event_query().order_by(Event.id))
    return list(result.unique())


async def get_event_or_404(db: AsyncSession, event_id: int) -> Event:
    stmt = _event_query().where(Event.id == event_id).execution_options(populate_existing=True)
    result = await db.scalars(stmt)
    event = result.first()
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


async def find_events_by_name(db: AsyncSession, name: str) -> list[Event]:
    stmt = _event_query().where(Event.event_name.icontains(name, autoescape=True)).order_by(Event.id)
    result = await db.scalars(stmt)
    return list(result.unique())


async def list_events_by_author(db: AsyncSession, author_id: int) -> list[Event]:
    stmt = _event_query().where(Event.author_id == author_id).order_by(Event.id)
    result = await db.scalars(stmt)
    return list(result.unique())


async def list_events_by_type(db: AsyncSession, event_type_id: int) -> list[Event]:
    stmt = _event_query().where(Event.event_type_id == event_type_id).order_by(Event.id)
    result = await db.scalars(stmt)
    return list(result.unique())


async def list_events_by_status(db: AsyncSession, status_name: str) -> list[Event]:
    stmt = (
        _event_query()
        .join(Status, Event.status_id == Status.id)
        .where(Status.status == status_name)
        .order_by(Event.id)
    )
    result = await db.scalars(stmt)
    return list(result.unique())


# ---------- Create / update / delete ----------

async def _apply(db: AsyncSession, event: Event, data: EventCreate, classification: Classification) -> None:
    event.author = await get_user_or_404(db, data.author_id)
    event.event_type = await get_event_type_or_404(db, data.event_type_id)
    event.interests = await get_interests_or_404(db, data.interest_ids)
    event.status = await get_or_create_status(db, _status_for(classification))
    event.event_name = data.event_name
    event.description_event = data.description_event
    event.place_event = data.place_event
    event.time_event = data.time_event


async def create_event(
    db: AsyncSession,
    matcher: WordMatcher,
    data: EventCreate,
    max_age_years: int = 1,
) -> tuple[Event, Classification]:
    classification = check_event(matcher, data, max_age_years=max_age_years)

    event = Event(participants=[], interests=[])
    await _apply(db, event, data, classification)
    db.add(event)
    await db.commit()
    logger.info("Created event %s with status %s", event.id, _status_for(classification))
    return await get_event_or_404(db, event.id), classification


async def update_event(
    db: AsyncSession,
    matcher: WordMatcher,
    event_id: int,
    data: EventUpdate,
    max_age_years: int = 1,
) -> tuple[Event, Classification]:
    classification = check_event(matcher, data, max_age_years=max_age_years)

    event = await get_event_or_404(db, event_id)
    await _apply(db, event, data, classification)
    event.event_update_date = date.today()
    await db.commit()
    logger.info("Updated event %s with status %s", event.id, _status_for(classification))
    return await get_event_or_404(db, event.id), classification


async def delete_event(db: AsyncSession, event_id: int) -> None:
    event = await get_event_or_404(db, event_id)
    await db.delete(event)
    await db.commit()


# ---------- Participants ----------

async def add_participant(db: AsyncSession, event_id: int, user_id: int) -> Event:
    event = await get_event_or_404(db, event_id)
    user = await get_user_or_404(db, user_id)
    if all(p.id != user.id for p in event.participants):
        event.participants.append(user)
        await db.commit()
    return await get_event_or_404(db, event_id)


async def remove_participant(db: AsyncSession, event_id: int, user_id: int) -> Event:
    event = await get_event_or_404(db, event_id)
    user = await get_user_or_404(db, user_id)
    participant = next((p for p in event.participants if p.id == user.id), None)
    if participant is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User is not a participant of the event")
    event.participants.remove(participant)
    await db.commit()
    return await get_event_or_404(db, event_id)
