"""Friends business logic: paged reads, location listing, edits."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from goodfriends.api.db.models import Address, Friend, Quote
from goodfriends.api.dependencies import ReadArgs, bad_request, is_safe_location
from goodfriends.api.serializers import friend_to_location_item, friend_to_response
from goodfriends.schemas import (
    AddressUpdateRequest,
    FriendCreateRequest,
    FriendLocationItem,
    FriendResponse,
    FriendUpdateRequest,
    ResponsePage,
)

logger = logging.getLogger(__name__)


class FriendValidationError(Exception):
    """Field-level failure reported in the validation-problem shape (field -> messages)."""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {', '.join(v)}" for k, v in errors.items()))


def _with_relations(stmt, flat: bool):
    stmt = stmt.options(selectinload(Friend.address))
    if not flat:
        stmt = stmt.options(
            selectinload(Friend.pets),
            selectinload(Friend.quotes).selectinload(Quote.friends),
        )
    return stmt


def _filter_clause(text: str):
    pattern = f"%{text}%"
    return or_(
        Friend.first_name.ilike(pattern),
        Friend.last_name.ilike(pattern),
        Friend.email.ilike(pattern),
    )


async def read_friends(db: AsyncSession, args: ReadArgs) -> ResponsePage[FriendResponse]:
    where = [Friend.seeded == args.seeded]
    if args.filter:
        where.append(_filter_clause(args.filter))

    total = await db.scalar(select(func.count(Friend.id)).where(*where))
    stmt = (
        select(Friend)
        .where(*where)
        .order_by(Friend.last_name, Friend.first_name, Friend.id)
        .offset(args.page_nr * args.page_size)
        .limit(args.page_size)
    )
    result = await db.execute(_with_relations(stmt, args.flat))
    friends = result.scalars().all()
    return ResponsePage[FriendResponse](
        page_items=[friend_to_response(f, args.flat) for f in friends],
        page_nr=args.page_nr,
        page_size=args.page_size,
        total_count=total or 0,
    )


async def _get_friend(db: AsyncSession, friend_id: str, flat: bool = True) -> Friend | None:
    result = await db.execute(_with_relations(select(Friend).where(Friend.id == friend_id), flat))
    return result.scalar_one_or_none()


async def read_friend(db: AsyncSession, friend_id: str, flat: bool) -> FriendResponse:
    friend = await _get_friend(db, friend_id, flat)
    if not friend:
        raise bad_request(f"Item with id {friend_id} does not exist")
    return friend_to_response(friend, flat)


async def list_by_location(
    db: AsyncSession,
    country: str | None,
    city: str | None,
) -> list[FriendLocationItem]:
    """Friends with an address, optionally narrowed to a trimmed country and/or city."""
    if country and country.strip() and not is_safe_location(country):
        raise bad_request("Country contains invalid characters.")
    if city and city.strip() and not is_safe_location(city):
        raise bad_request("City contains invalid characters.")

    country_arg = (country or "").strip()
    city_arg = (city or "").strip()
    logger.info("List friends: country=%s, city=%s", country_arg, city_arg)

    stmt = select(Friend).join(Address, Friend.address_id == Address.id).options(selectinload(Friend.address))
    if country_arg:
        stmt = stmt.where(func.trim(Address.country) == country_arg)
    if city_arg:
        stmt = stmt.where(func.trim(Address.city) == city_arg)
    stmt = stmt.order_by(Address.country, Address.city, Friend.first_name, Friend.last_name)

    result = await db.execute(stmt)
    return [friend_to_location_item(f) for f in result.scalars().all()]


async def _ensure_email_free(db: AsyncSession, email: str, friend_id: str | None = None) -> None:
    stmt = select(Friend.id).where(Friend.email == email)
    if friend_id:
        stmt = stmt.where(Friend.id != friend_id)
    taken = (await db.execute(stmt.limit(1))).first()
    if taken:
        raise FriendValidationError({"Email": ["Email is already in use."]})


def _apply_address(friend: Friend, body: AddressUpdateRequest, seeded: bool = False) -> None:
    if friend.address is None:
        friend.address = Address(seeded=seeded)
    friend.address.street_address = body.street_address
    friend.address.zip_code = body.zip_code
    friend.address.city = body.city
    friend.address.country = body.country


async def update_friend(db: AsyncSession, friend_id: str, body: FriendUpdateRequest) -> None:
    """Scalars always replaced; the address only when given (created when missing)."""
    friend = await _get_friend(db, friend_id)
    if not friend:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item with id {friend_id} does not exist",
        )
    await _ensure_email_free(db, body.email, friend_id)

    friend.first_name = body.first_name
    friend.last_name = body.last_name
    friend.email = body.email
    friend.birthday = body.birthday
    if body.address is not None:
        _apply_address(friend, body.address, friend.seeded)
    await db.flush()
    logger.info("Friend %s updated", friend_id)


async def create_friend(db: AsyncSession, body: FriendCreateRequest) -> FriendResponse:
    await _ensure_email_free(db, body.email)
    friend = Friend(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        birthday=body.birthday,
        seeded=body.seeded,
    )
    # Set explicitly so serializing after flush never lazy-loads
    friend.address = None
    if body.address is not None:
        _apply_address(friend, body.address, body.seeded)
    db.add(friend)
    await db.flush()
    logger.info("Friend %s created", friend.id)
    return friend_to_response(friend, flat=True)


async def delete_friend(db: AsyncSession, friend_id: str) -> FriendResponse:
    friend = await _get_friend(db, friend_id)
    if not friend:
        raise bad_request(f"Item with id {friend_id} does not exist")
    response = friend_to_response(friend, flat=True)
    await db.delete(friend)
    await db.flush()
    logger.info("Friend %s deleted", friend_id)
    return response


class FriendsService:
    """Facade for friends operations."""

    read_friends = staticmethod(read_friends)
    read_friend = staticmethod(read_friend)
    list_by_location = staticmethod(list_by_location)
    update_friend = staticmethod(update_friend)
    create_friend = staticmethod(create_friend)
    delete_friend = staticmethod(delete_friend)


friends_service = FriendsService()
