from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.dependencies import ReadArgs, get_db, get_read_args, parse_id
from goodfriends.api.services import quotes_service
from goodfriends.schemas import QuoteCreateRequest, QuoteResponse, ResponsePage

router = APIRouter(prefix="/api/Quotes", tags=["quotes"])


@router.get("/Read", response_model=ResponsePage[QuoteResponse])
async def read(
    args: ReadArgs = Depends(get_read_args),
    friend_id: str | None = Query(None, alias="friendId"),
    db: AsyncSession = Depends(get_db),
):
    owner = parse_id(friend_id, "friendId") if friend_id and friend_id.strip() else None
    return await quotes_service.read_quotes(db, args, owner)


@router.get("/ReadItem", response_model=QuoteResponse)
async def read_item(id: str | None = Query(None), db: AsyncSession = Depends(get_db)):
    return await quotes_service.read_quote(db, parse_id(id))


@router.post("/CreateItem", response_model=QuoteResponse)
async def create_item(body: QuoteCreateRequest, db: AsyncSession = Depends(get_db)):
    """Accepts ``friendIds`` or a single ``friendId``."""
    return await quotes_service.create_quote(db, body)


@router.delete("/DeleteItem/{id}", response_model=QuoteResponse)
async def delete_item(id: str, db: AsyncSession = Depends(get_db)):
    return await quotes_service.delete_quote(db, parse_id(id))
