import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from goodfriends.web.dependencies import get_api, templates
from goodfriends.web.providers import ApiError, FriendsApiClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["home"])


@router.get("/", response_class=HTMLResponse, name="home")
async def home(request: Request, api: FriendsApiClient = Depends(get_api)):
    info = None
    api_status = None
    try:
        info = await api.get_guest_info()
    except ApiError as e:
        logger.error("Failed to call the GoodFriends API: %s", e)
        api_status = f"API ERROR: {e}"
    return templates.TemplateResponse(
        request,
        "index.html",
        {"info": info, "api_status": api_status},
    )
