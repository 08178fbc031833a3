import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from goodfriends.web.dependencies import get_api, templates
from goodfriends.web.providers import ApiError, FriendsApiClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["overview"])


@router.get("/overview", response_class=HTMLResponse, name="overview")
async def overview(
    request: Request,
    country: str | None = None,
    api: FriendsApiClient = Depends(get_api),
):
    """Friends per country, per country and city, and (for a chosen country) friends and pets per city."""
    summary, details, cities = [], [], []
    error = None
    try:
        summary = await api.get_friends_by_country()
        details = await api.get_friends_by_country_city()
        if country and country.strip():
            cities = await api.get_city_overview(country)
    except ApiError as e:
        logger.error("Failed to load overview data: %s", e)
        error = "Could not load Overview data from API."
    return templates.TemplateResponse(
        request,
        "overview.html",
        {
            "country": (country or "").strip(),
            "summary": summary,
            "details": details,
            "cities": cities,
            "error": error,
        },
    )


@router.get("/friends-by-location", response_class=HTMLResponse, name="friends_by_location")
async def friends_by_location(
    request: Request,
    country: str | None = None,
    city: str | None = None,
    api: FriendsApiClient = Depends(get_api),
):
    friends = []
    error = None
    searched = bool((country and country.strip()) or (city and city.strip()))
    if searched:
        try:
            friends = await api.list_friends(country, city)
        except ApiError as e:
            logger.error("Failed to load friends by location: %s", e)
            error = "Could not load friends list from API."
    return templates.TemplateResponse(
        request,
        "friends_by_location.html",
        {
            "country": country or "",
            "city": city or "",
            "friends": friends,
            "searched": searched,
            "error": error,
        },
    )
