from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.db.models import Friend, Pet, Quote
from goodfriends.api.services.overview import group_by_country_city, load_location_rows
from goodfriends.schemas import DbInfo, FriendGroupInfo, GuestInfo


async def _count(db: AsyncSession, column, *where) -> int:
    return await db.scalar(select(func.count(column)).where(*where)) or 0


async def guest_info(db: AsyncSession) -> GuestInfo:
    """Row counts per dataset plus friends grouped by country and city."""
    info = DbInfo(
        nr_seeded_friends=await _count(db, Friend.id, Friend.seeded.is_(True)),
        nr_unseeded_friends=await _count(db, Friend.id, Friend.seeded.is_(False)),
        nr_friends_with_address=await _count(db, Friend.id, Friend.address_id.is_not(None)),
        nr_seeded_pets=await _count(db, Pet.id, Pet.seeded.is_(True)),
        nr_seeded_quotes=await _count(db, Quote.id, Quote.seeded.is_(True)),
    )
    groups = group_by_country_city(await load_location_rows(db))
    return GuestInfo(
        db=info,
        friends=[FriendGroupInfo(country=g.country, city=g.city, nr_friends=g.nr_friends) for g in groups],
    )


class GuestService:
    guest_info = staticmethod(guest_info)


guest_service = GuestService()
