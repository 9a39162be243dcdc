import logging

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.event import Event
from app.models.status import STATUS_CHECKED, STATUS_MODERATION, STATUS_REJECTED
from app.services.event_service import get_event_or_404, list_events_by_status
from app.services.reference_service import get_or_create_status

logger = logging.getLogger(__name__)


async def list_pending_events(db: AsyncSession) -> list[Event]:
    return await list_events_by_status(db, STATUS_MODERATION)


async def _resolve(db: AsyncSession, event_id: int, new_status: str) -> Event:
    event = await get_event_or_404(db, event_id)
    current = event.status.status if event.status else None
    if current != STATUS_MODERATION:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Event is not on moderation (status: {current})",
        )
    event.status = await get_or_create_status(db, new_status)
    await db.commit()
    logger.info("Event %s moved from %s to %s", event_id, current, new_status)
    return await get_event_or_404(db, event_id)


async def approve_event(db: AsyncSession, event_id: int) -> Event:
    return await _resolve(db, event_id, STATUS_CHECKED)


async def reject_event(db: AsyncSession, event_id: int) -> Event:
    return await _resolve(db, event_id, STATUS_REJECTED)
