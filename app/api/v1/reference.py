from fastapi import APIRouter, status

from app.api.deps import DBSessionDep
from app.schemas.reference import EventTypeCreate, EventTypeRead, InterestCreate, InterestRead, StatusRead
from app.services import reference_service as svc

router = APIRouter(prefix="/api/public", tags=["reference"])

# ---------- Interests ----------

@router.get("/interests", response_model=list[InterestRead])
async def list_interests(db: DBSessionDep):
    return await svc.list_interests(db)


@router.post("/interests", response_model=InterestRead, status_code=status.HTTP_201_CREATED)
async def create_interest(data: InterestCreate, db: DBSessionDep):
    return await svc.create_interest(db, data)


@router.delete("/interests/{interest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_interest(interest_id: int, db: DBSessionDep):
    await svc.delete_interest(db, interest_id)
    return None

# ---------- Event types ----------

@router.get("/event-type", response_model=list[EventTypeRead])
async def list_event_types(db: DBSessionDep):
    return await svc.list_event_types(db)


@router.post("/event-type", response_model=EventTypeRead, status_code=status.HTTP_201_CREATED)
async def create_event_type(data: EventTypeCreate, db: DBSessionDep):
    return await svc.create_event_type(db, data)

# ---------- Statuses ----------

@router.get("/status", response_model=list[StatusRead])
async def list_statuses(db: DBSessionDep):
    return await svc.list_statuses(db)
