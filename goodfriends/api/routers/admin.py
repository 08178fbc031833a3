import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.dependencies import bad_request, get_db, parse_bool, parse_int
from goodfriends.api.services import guest_service, seed_service
from goodfriends.core import get_settings, limiter
from goodfriends.schemas import GuestInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Admin", tags=["admin"])

_RATE = get_settings().admin_rate_limit


@router.get("/Seed", response_model=GuestInfo)
@limiter.limit(_RATE)
async def seed(
    request: Request,
    count: str = Query(str(get_settings().seed_default_count)),
    db: AsyncSession = Depends(get_db),
):
    count_arg = parse_int(count, "count")
    if count_arg < 0:
        raise bad_request("count must not be negative.")
    logger.info("Seed: count=%d", count_arg)
    await seed_service.seed(db, count_arg)
    return await guest_service.guest_info(db)


@router.get("/RemoveSeed", response_model=GuestInfo)
@limiter.limit(_RATE)
async def remove_seed(
    request: Request,
    seeded: str = Query("true"),
    db: AsyncSession = Depends(get_db),
):
    seeded_arg = parse_bool(seeded, "seeded")
    logger.info("RemoveSeed: seeded=%s", seeded_arg)
    await seed_service.remove_seed(db, seeded_arg)
    return await guest_service.guest_info(db)
