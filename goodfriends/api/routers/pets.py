from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.dependencies import ReadArgs, get_db, get_read_args, parse_id
from goodfriends.api.services import pets_service
from goodfriends.schemas import PetCreateRequest, PetResponse, ResponsePage

router = APIRouter(prefix="/api/Pets", tags=["pets"])


@router.get("/Read", response_model=ResponsePage[PetResponse])
async def read(
    args: ReadArgs = Depends(get_read_args),
    friend_id: str | None = Query(None, alias="friendId"),
    db: AsyncSession = Depends(get_db),
):
    owner = parse_id(friend_id, "friendId") if friend_id and friend_id.strip() else None
    return await pets_service.read_pets(db, args, owner)


@router.get("/ReadItem", response_model=PetResponse)
async def read_item(id: str | None = Query(None), db: AsyncSession = Depends(get_db)):
    return await pets_service.read_pet(db, parse_id(id))


@router.post("/CreateItem", response_model=PetResponse)
async def create_item(body: PetCreateRequest, db: AsyncSession = Depends(get_db)):
    return await pets_service.create_pet(db, body)


@router.delete("/DeleteItem/{id}", response_model=PetResponse)
async def delete_item(id: str, db: AsyncSession = Depends(get_db)):
    return await pets_service.delete_pet(db, parse_id(id))
