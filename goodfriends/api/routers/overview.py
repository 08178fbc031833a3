from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.dependencies import bad_request, get_db
from goodfriends.api.services import overview_service
from goodfriends.schemas import CityFriendsPets, FriendsByCountry, FriendsByCountryCity

router = APIRouter(prefix="/api/overview", tags=["overview"])


@router.get("/friends-by-country", response_model=list[FriendsByCountry])
async def friends_by_country(db: AsyncSession = Depends(get_db)):
    return await overview_service.friends_by_country(db)


@router.get("/friends-by-country-city", response_model=list[FriendsByCountryCity])
async def friends_by_country_city(db: AsyncSession = Depends(get_db)):
    return await overview_service.friends_by_country_city(db)


@router.get("/cities/{country}", response_model=list[CityFriendsPets])
async def cities(country: str, db: AsyncSession = Depends(get_db)):
    if not country.strip():
        raise bad_request("Country is required.")
    return await overview_service.cities(db, country)
