import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.dependencies import ReadArgs, get_db, get_read_args, parse_bool, parse_id
from goodfriends.api.services import friends_service
from goodfriends.schemas import (
    FriendCreateRequest,
    FriendLocationItem,
    FriendResponse,
    FriendUpdateRequest,
    ResponsePage,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Friends", tags=["friends"])


@router.get("/Read", response_model=ResponsePage[FriendResponse])
async def read(
    args: ReadArgs = Depends(get_read_args),
    db: AsyncSession = Depends(get_db),
):
    logger.info(
        "Read: seeded=%s flat=%s pageNr=%s pageSize=%s",
        args.seeded, args.flat, args.page_nr, args.page_size,
    )
    return await friends_service.read_friends(db, args)


@router.get("/List", response_model=list[FriendLocationItem])
async def list_by_location(
    country: str | None = None,
    city: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await friends_service.list_by_location(db, country, city)


@router.get("/ReadItem", response_model=FriendResponse)
async def read_item(
    id: str | None = Query(None),
    flat: str = Query("false"),
    db: AsyncSession = Depends(get_db),
):
    return await friends_service.read_friend(db, parse_id(id), parse_bool(flat, "flat"))


@router.put("/UpdateItem/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_item(
    id: str,
    body: FriendUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    await friends_service.update_friend(db, parse_id(id), body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/CreateItem", response_model=FriendResponse)
async def create_item(
    body: FriendCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    return await friends_service.create_friend(db, body)


@router.delete("/DeleteItem/{id}", response_model=FriendResponse)
async def delete_item(id: str, db: AsyncSession = Depends(get_db)):
    return await friends_service.delete_friend(db, parse_id(id))
