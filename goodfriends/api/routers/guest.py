from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.dependencies import get_db
from goodfriends.api.services import guest_service
from goodfriends.schemas import GuestInfo

router = APIRouter(prefix="/api/Guest", tags=["guest"])


@router.get("/Info", response_model=GuestInfo)
async def info(db: AsyncSession = Depends(get_db)):
    return await guest_service.guest_info(db)
