"""Friend counts grouped by country and city.

Rows are loaded once and grouped in Python so the grouping rules (trimmed
names, blank city shown as ``-``) live in one place.
"""

from collections import Counter, defaultdict
from typing import Iterable, NamedTuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.db.models import Address, Friend, Pet
from goodfriends.core import NO_CITY
from goodfriends.schemas import CityFriendsPets, FriendsByCountry, FriendsByCountryCity


class LocationRow(NamedTuple):
    country: str | None
    city: str | None
    pets: int = 0


def _country(row: LocationRow) -> str:
    return (row.country or "").strip()


def _city(row: LocationRow) -> str:
    return (row.city or "").strip() or NO_CITY


def _located(rows: Iterable[LocationRow]) -> list[LocationRow]:
    return [r for r in rows if _country(r)]


def group_by_country(rows: Iterable[LocationRow]) -> list[FriendsByCountry]:
    """Per country: friend count and distinct non-blank cities, most friends first."""
    totals: Counter[str] = Counter()
    cities: dict[str, set[str]] = defaultdict(set)
    for row in _located(rows):
        country = _country(row)
        totals[country] += 1
        if (row.city or "").strip():
            cities[country].add(row.city.strip())
    items = [
        FriendsByCountry(country=c, total_friends=n, cities=len(cities[c]))
        for c, n in totals.items()
    ]
    return sorted(items, key=lambda x: (-x.total_friends, x.country))


def group_by_country_city(rows: Iterable[LocationRow]) -> list[FriendsByCountryCity]:
    counts = Counter((_country(r), _city(r)) for r in _located(rows))
    items = [FriendsByCountryCity(country=k[0], city=k[1], nr_friends=n) for k, n in counts.items()]
    return sorted(items, key=lambda x: (x.country, -x.nr_friends, x.city))


def group_cities(rows: Iterable[LocationRow], country: str) -> list[CityFriendsPets]:
    """Cities of one country with friend and pet counts, by city name."""
    key = country.strip()
    friends: Counter[str] = Counter()
    pets: Counter[str] = Counter()
    for row in _located(rows):
        if _country(row) != key:
            continue
        friends[_city(row)] += 1
        pets[_city(row)] += row.pets
    return [
        CityFriendsPets(country=key, city=city, friends_count=friends[city], pets_count=pets[city])
        for city in sorted(friends)
    ]


async def load_location_rows(db: AsyncSession) -> list[LocationRow]:
    """One row per friend with an address, with that friend's pet count."""
    stmt = (
        select(Address.country, Address.city, func.count(Pet.id))
        .select_from(Friend)
        .join(Address, Friend.address_id == Address.id)
        .outerjoin(Pet, Pet.friend_id == Friend.id)
        .group_by(Friend.id, Address.country, Address.city)
    )
    result = await db.execute(stmt)
    return [LocationRow(country, city, pets) for country, city, pets in result.all()]


class OverviewService:
    @staticmethod
    async def friends_by_country(db: AsyncSession) -> list[FriendsByCountry]:
        return group_by_country(await load_location_rows(db))

    @staticmethod
    async def friends_by_country_city(db: AsyncSession) -> list[FriendsByCountryCity]:
        return group_by_country_city(await load_location_rows(db))

    @staticmethod
    async def cities(db: AsyncSession, country: str) -> list[CityFriendsPets]:
        return group_cities(await load_location_rows(db), country)


overview_service = OverviewService()
