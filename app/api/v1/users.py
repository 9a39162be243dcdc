import logging

from fastapi import APIRouter, Response, status

from app.api.deps import DBSessionDep
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services import user_service as svc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/private/account/user", tags=["users"])


@router.get("/", response_model=list[UserRead])
async def get_all_users(db: DBSessionDep):
    logger.debug("Requested list of users")
    return await svc.list_users(db)


@router.get("/{user_id}", response_model=UserRead)
async def get_one_user(user_id: int, db: DBSessionDep):
    logger.debug("Requested user %s", user_id)
    return await svc.get_user_or_404(db, user_id)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreate, db: DBSessionDep):
    logger.debug("Creating user with login %s", data.login)
    return await svc.create_user(db, data)


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(user_id: int, data: UserUpdate, db: DBSessionDep):
    logger.debug("Updating user %s", user_id)
    return await svc.update_user(db, user_id, data)


@router.delete("/{user_id}", status_code=status.HTTP_202_ACCEPTED)
async def delete_user(user_id: int, db: DBSessionDep):
    logger.debug("Deleting user %s", user_id)
    await svc.delete_user(db, user_id)
    return Response(status_code=status.HTTP_202_ACCEPTED)
