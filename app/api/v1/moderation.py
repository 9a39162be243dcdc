import logging

from fastapi import APIRouter

from app.api.deps import DBSessionDep
from app.schemas.event import EventRead
from app.services import moderation_service as svc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/private/moderation/event", tags=["moderation"])


@router.get("/", response_model=list[EventRead])
async def list_events_on_moderation(db: DBSessionDep):
    logger.debug("Requested events on moderation")
    return await svc.list_pending_events(db)


@router.post("/{event_id}/approve", response_model=EventRead)
async def approve_event(event_id: int, db: DBSessionDep):
    return await svc.approve_event(db, event_id)


@router.post("/{event_id}/reject", response_model=EventRead)
async def reject_event(event_id: int, db: DBSessionDep):
    return await svc.reject_event(db, event_id)
