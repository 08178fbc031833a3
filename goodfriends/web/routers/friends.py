import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from goodfriends.core import get_settings
from goodfriends.schemas import PetCreateRequest, PetKind, PetMood, QuoteCreateRequest
from goodfriends.web.dependencies import get_api, get_seeded, templates
from goodfriends.web.forms import field_errors, sanitize_filter, validation_message
from goodfriends.web.providers import ApiError, FriendsApiClient
from goodfriends.web.services import NotFound, load_details

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get("", response_class=HTMLResponse, name="friends")
async def friends_index(
    request: Request,
    q: str | None = None,
    page: int = 0,
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    """Paged friend list with free-text search on name and email."""
    page = max(page, 0)
    result = None
    error = None
    try:
        result = await api.read_friends(
            seeded=seeded,
            flat=True,
            filter=sanitize_filter(q),
            page_nr=page,
            page_size=get_settings().friends_page_size,
        )
    except ApiError as e:
        logger.error("Failed to read friends: %s", e)
        error = str(e)
    return templates.TemplateResponse(
        request,
        "friends/index.html",
        {"q": q or "", "page": page, "result": result, "error": error, "seeded": seeded},
    )


def _redirect_to_details(request: Request, friend_id: str, seeded: bool, flash: str) -> RedirectResponse:
    url = request.url_for("friend_details", friend_id=friend_id).include_query_params(
        seeded=str(seeded).lower(), flash=flash
    )
    return RedirectResponse(url, status_code=303)


async def _render_details(
    request: Request,
    api: FriendsApiClient,
    friend_id: str,
    seeded: bool,
    error: str | None = None,
    flash: str | None = None,
    new_pet: dict | None = None,
    new_quote: dict | None = None,
    status_code: int = 200,
):
    """Load friend + relations and render; used by GET and by failed POSTs."""
    logger.info("Loading friend details for friend_id=%s", friend_id)
    errors = [error] if error else []
    friend = None
    try:
        loaded = await load_details(api, friend_id, seeded)
    except ApiError as e:
        logger.error("Failed to load friend details: %s", e)
        errors.append(str(e))
    else:
        if isinstance(loaded, NotFound):
            errors.append(f"{loaded.message} (seeded={str(seeded).lower()})")
            status_code = 404
        else:
            friend = loaded.friend
            errors.extend(loaded.errors)
    return templates.TemplateResponse(
        request,
        "friends/details.html",
        {
            "friend": friend,
            "friend_id": friend_id,
            "seeded": seeded,
            "error": " | ".join(errors) if errors else None,
            "flash": flash,
            "new_pet": new_pet or {"name": "", "kind": 0, "mood": 0},
            "new_quote": new_quote or {"text": "", "author": ""},
            "kinds": list(PetKind),
            "moods": list(PetMood),
        },
        status_code=status_code,
    )


@router.get("/{friend_id}", response_class=HTMLResponse, name="friend_details")
async def friend_details(
    request: Request,
    friend_id: str,
    flash: str | None = None,
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    return await _render_details(request, api, friend_id, seeded, flash=flash)


@router.post("/{friend_id}/pets", name="add_pet")
async def add_pet(
    request: Request,
    friend_id: str,
    name: str = Form(""),
    kind: str = Form("0"),
    mood: str = Form("0"),
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    logger.info("AddPet friend_id=%s name=%s kind=%s mood=%s", friend_id, name, kind, mood)
    form = {"name": name, "kind": kind, "mood": mood}
    try:
        pet = PetCreateRequest(name=name, kind=kind, mood=mood)
    except ValidationError as e:
        message = validation_message("Pet validation failed", field_errors(e))
        logger.warning("AddPet invalid: %s", message)
        return await _render_details(
            request, api, friend_id, seeded, error=message, new_pet=form, status_code=400
        )
    try:
        await api.add_pet(friend_id, pet)
    except ApiError as e:
        logger.error("AddPet API call failed: %s", e)
        return await _render_details(
            request, api, friend_id, seeded, error=str(e), new_pet=form, status_code=502
        )
    return _redirect_to_details(request, friend_id, seeded, "Pet added.")


@router.post("/{friend_id}/quotes", name="add_quote")
async def add_quote(
    request: Request,
    friend_id: str,
    text: str = Form(""),
    author: str = Form(""),
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    logger.info("AddQuote friend_id=%s author=%s", friend_id, author)
    form = {"text": text, "author": author}
    try:
        quote = QuoteCreateRequest(quote_text=text, author=author)
    except ValidationError as e:
        message = validation_message("Quote validation failed", field_errors(e))
        logger.warning("AddQuote invalid: %s", message)
        return await _render_details(
            request, api, friend_id, seeded, error=message, new_quote=form, status_code=400
        )
    try:
        await api.add_quote(friend_id, quote)
    except ApiError as e:
        logger.error("AddQuote API call failed: %s", e)
        return await _render_details(
            request, api, friend_id, seeded, error=str(e), new_quote=form, status_code=502
        )
    return _redirect_to_details(request, friend_id, seeded, "Quote added.")


@router.post("/{friend_id}/pets/{pet_id}/delete", name="delete_pet")
async def delete_pet(
    request: Request,
    friend_id: str,
    pet_id: str,
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    logger.info("DeletePet friend_id=%s pet_id=%s", friend_id, pet_id)
    if not pet_id.strip():
        return _redirect_to_details(request, friend_id, seeded, "Nothing to delete.")
    try:
        await api.delete_pet(pet_id.strip())
    except ApiError as e:
        logger.error("DeletePet API call failed: %s", e)
        return await _render_details(request, api, friend_id, seeded, error=str(e), status_code=502)
    return _redirect_to_details(request, friend_id, seeded, "Pet deleted.")


@router.post("/{friend_id}/quotes/{quote_id}/delete", name="delete_quote")
async def delete_quote(
    request: Request,
    friend_id: str,
    quote_id: str,
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    logger.info("DeleteQuote friend_id=%s quote_id=%s", friend_id, quote_id)
    if not quote_id.strip():
        return _redirect_to_details(request, friend_id, seeded, "Nothing to delete.")
    try:
        await api.delete_quote(quote_id.strip())
    except ApiError as e:
        logger.error("DeleteQuote API call failed: %s", e)
        return await _render_details(request, api, friend_id, seeded, error=str(e), status_code=502)
    return _redirect_to_details(request, friend_id, seeded, "Quote deleted.")
