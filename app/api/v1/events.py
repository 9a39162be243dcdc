import logging

from fastapi import APIRouter, HTTPException, Request, Response, status

from app.api.deps import DBSessionDep, SettingsDep, WordMatcherDep
from app.api.limiter import limiter
from app.core.config import get_settings
from app.schemas.event import EventCreate, EventRead, EventUpdate, JoinRequest
from app.services import event_service as svc
from app.services.word_matcher import Classification

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/public/event", tags=["events"])


@router.get("/", response_model=list[EventRead])
async def get_all_events(db: DBSessionDep):
    logger.debug("Requested list of events")
    return await svc.list_events(db)


@router.get("/name/{event_name}", response_model=list[EventRead])
async def find_events_by_name(event_name: str, db: DBSessionDep):
    logger.debug("Searching events by name %s", event_name)
    events = await svc.find_events_by_name(db, event_name)
    if not events:
        logger.error("No events found by name %s", event_name)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Events not found")
    return events


@router.get("/author/{author_id}", response_model=list[EventRead])
async def find_events_by_author(author_id: int, db: DBSessionDep):
    logger.debug("Searching events by author %s", author_id)
    events = await svc.list_events_by_author(db, author_id)
    if not events:
        logger.error("No events found for author %s", author_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Events not found")
    return events


@router.get("/type/{event_type_id}", response_model=list[EventRead])
async def find_events_by_type(event_type_id: int, db: DBSessionDep):
    logger.debug("Searching events by type %s", event_type_id)
    return await svc.list_events_by_type(db, event_type_id)


@router.get("/{event_id}", response_model=EventRead)
async def find_event_by_id(event_id: int, db: DBSessionDep):
    logger.debug("Searching event by id %s", event_id)
    return await svc.get_event_or_404(db, event_id)


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
# Read per request so the limit follows the current settings
@limiter.limit(lambda: get_settings().EVENT_CREATE_RATE_LIMIT)
async def create_event(
    request: Request,
    response: Response,
    data: EventCreate,
    db: DBSessionDep,
    matcher: WordMatcherDep,
    settings: SettingsDep,
):
    """Create an event. Events that need moderation are stored and answered with 202."""
    logger.debug("Received event creation request: %s", data.event_name)
    event, classification = await svc.create_event(
        db, matcher, data, max_age_years=settings.MAX_EVENT_AGE_YEARS
    )
    if classification is Classification.NEEDS_REVIEW:
        response.status_code = status.HTTP_202_ACCEPTED
    return event


@router.put("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: int,
    response: Response,
    data: EventUpdate,
    db: DBSessionDep,
    matcher: WordMatcherDep,
    settings: SettingsDep,
):
    logger.debug("Received update request for event %s", event_id)
    event, classification = await svc.update_event(
        db, matcher, event_id, data, max_age_years=settings.MAX_EVENT_AGE_YEARS
    )
    if classification is Classification.NEEDS_REVIEW:
        response.status_code = status.HTTP_202_ACCEPTED
    return event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: int, db: DBSessionDep):
    logger.debug("Received delete request for event %s", event_id)
    await svc.delete_event(db, event_id)
    logger.debug("Event %s deleted", event_id)
    return None


@router.post("/join", response_model=EventRead)
async def add_event_participant(payload: JoinRequest, db: DBSessionDep):
    logger.debug("Adding user %s to event %s", payload.user_id, payload.event_id)
    return await svc.add_participant(db, payload.event_id, payload.user_id)


@router.patch("/unjoin", response_model=EventRead)
async def delete_event_participant(payload: JoinRequest, db: DBSessionDep):
    logger.debug("Removing user %s from event %s", payload.user_id, payload.event_id)
    return await svc.remove_participant(db, payload.event_id, payload.user_id)
