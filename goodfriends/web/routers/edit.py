import logging
from datetime import date, datetime, time

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from goodfriends.schemas import AddressUpdateRequest, FriendDetails, FriendUpdateRequest
from goodfriends.web.dependencies import get_api, get_seeded, templates
from goodfriends.web.forms import field_errors, merge_api_errors
from goodfriends.web.providers import ApiError, FriendsApiClient
from goodfriends.web.services import NotFound, find_friend

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/friends", tags=["friends"])


def _form_from_friend(friend: FriendDetails) -> dict:
    address = friend.address
    return {
        "first_name": friend.first_name,
        "last_name": friend.last_name,
        "email": friend.email,
        "birthday": friend.birthday.date().isoformat() if friend.birthday else "",
        "has_address": address is not None,
        "street_address": (address.street_address or "") if address else "",
        "zip_code": str(address.zip_code) if address else "",
        "city": (address.city or "") if address else "",
        "country": (address.country or "") if address else "",
    }


def _render(
    request: Request,
    friend_id: str,
    form: dict,
    seeded: bool,
    errors: dict[str, list[str]] | None = None,
    error: str | None = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "friends/edit.html",
        {
            "friend_id": friend_id,
            "form": form,
            "seeded": seeded,
            "errors": errors or {},
            "error": error,
        },
        status_code=status_code,
    )


def _build_request(form: dict) -> tuple[FriendUpdateRequest | None, dict[str, list[str]]]:
    """Validate the posted form into an update request, or return field errors."""
    errors: dict[str, list[str]] = {}
    birthday = None
    if form["birthday"]:
        try:
            birthday = datetime.combine(date.fromisoformat(form["birthday"]), time())
        except ValueError:
            errors["birthday"] = ["Birthday must be a date (YYYY-MM-DD)."]

    address = None
    if form["has_address"]:
        zip_text = form["zip_code"].strip()
        try:
            zip_code = int(zip_text) if zip_text else 0
        except ValueError:
            errors["address.zip_code"] = ["ZipCode must be a number."]
            zip_code = 0
        try:
            address = AddressUpdateRequest(
                street_address=form["street_address"],
                zip_code=zip_code,
                city=form["city"],
                country=form["country"],
            )
        except ValidationError as e:
            for key, messages in field_errors(e).items():
                errors.setdefault(f"address.{key}", []).extend(messages)

    try:
        body = FriendUpdateRequest(
            first_name=form["first_name"],
            last_name=form["last_name"],
            email=form["email"],
            birthday=birthday,
            address=address,
        )
    except ValidationError as e:
        for key, messages in field_errors(e).items():
            errors.setdefault(key, []).extend(messages)
        return None, errors
    return (None, errors) if errors else (body, errors)


@router.get("/{friend_id}/edit", response_class=HTMLResponse, name="edit_friend")
async def edit_friend(
    request: Request,
    friend_id: str,
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    try:
        found = await find_friend(api, friend_id, seeded)
    except ApiError as e:
        logger.error("Failed to load friend %s for edit: %s", friend_id, e)
        return _render(request, friend_id, {}, seeded, error=str(e), status_code=502)
    if isinstance(found, NotFound):
        return _render(request, friend_id, {}, seeded, error=found.message, status_code=404)
    return _render(request, friend_id, _form_from_friend(found), seeded)


@router.post("/{friend_id}/edit", response_class=HTMLResponse, name="update_friend")
async def update_friend(
    request: Request,
    friend_id: str,
    first_name: str = Form(""),
    last_name: str = Form(""),
    email: str = Form(""),
    birthday: str = Form(""),
    has_address: bool = Form(False),
    street_address: str = Form(""),
    zip_code: str = Form(""),
    city: str = Form(""),
    country: str = Form(""),
    add_address: bool = Form(False),
    api: FriendsApiClient = Depends(get_api),
    seeded: bool = Depends(get_seeded),
):
    form = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "birthday": birthday.strip(),
        "has_address": has_address or add_address,
        "street_address": street_address,
        "zip_code": zip_code,
        "city": city,
        "country": country,
    }
    if add_address:
        # Show the address fields; nothing is saved yet
        return _render(request, friend_id, form, seeded)

    body, errors = _build_request(form)
    if body is None:
        return _render(request, friend_id, form, seeded, errors=errors, status_code=400)

    result = await api.update_friend(friend_id, body)
    if result.ok:
        url = request.url_for("friend_details", friend_id=friend_id).include_query_params(
            seeded=str(seeded).lower(), flash="Friend updated."
        )
        return RedirectResponse(url, status_code=303)

    if result.validation_errors:
        errors = merge_api_errors(result.validation_errors)
        if any(key.startswith("address.") for key in errors):
            form["has_address"] = True
        return _render(request, friend_id, form, seeded, errors=errors, status_code=400)

    logger.error("UpdateFriend failed for %s: %s", friend_id, result.error)
    return _render(request, friend_id, form, seeded, error=result.error or "Unknown error.", status_code=502)
