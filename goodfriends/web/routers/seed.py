import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from goodfriends.web.dependencies import get_api, templates
from goodfriends.web.providers import ApiError, FriendsApiClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seed", tags=["seed"])


def _render(request: Request, error: str | None = None, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "seed.html",
        {"error": error},
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse, name="seed")
async def seed_page(request: Request):
    return _render(request)


@router.post("", name="seed_create")
async def seed_create(
    request: Request,
    count: int | None = Form(None),
    api: FriendsApiClient = Depends(get_api),
):
    try:
        await api.seed(count)
    except ApiError as e:
        logger.error("Seed failed: %s", e)
        return _render(request, error=str(e), status_code=502)
    return RedirectResponse(request.url_for("home"), status_code=303)


@router.post("/remove", name="seed_remove")
async def seed_remove(request: Request, api: FriendsApiClient = Depends(get_api)):
    try:
        await api.remove_seed(seeded=True)
    except ApiError as e:
        logger.error("Remove seed failed: %s", e)
        return _render(request, error=str(e), status_code=502)
    return RedirectResponse(request.url_for("home"), status_code=303)
