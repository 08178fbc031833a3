import logging
import urllib.parse
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

from goodfriends.core import get_settings
from goodfriends.schemas import (
    ApiResult,
    CityFriendsPets,
    FriendDetails,
    FriendListItem,
    FriendLocationItem,
    FriendsByCountry,
    FriendsByCountryCity,
    FriendUpdateRequest,
    GuestInfo,
    PetCreateRequest,
    PetRecord,
    QuoteCreateRequest,
    QuoteRecord,
    ResponsePage,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ApiError(Exception):
    """Raised when the GoodFriends API is unreachable or answers with a non-success status."""

    def __init__(self, status_code: int | None, reason: str = "", body: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        if status_code is None:
            message = f"GoodFriends API unavailable: {reason}"
        else:
            message = f"HTTP {status_code} ({reason}). Body: {body}"
        super().__init__(message)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _segment(value: str) -> str:
    """One URL path segment; ``/``, ``?`` and ``#`` are percent-encoded too."""
    return urllib.parse.quote(value.strip(), safe="")


def _ensure_success(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise ApiError(response.status_code, response.reason_phrase, response.text)


class FriendsApiClient:
    """Client for the GoodFriends REST API.

    Wraps an ``httpx.AsyncClient`` whose ``base_url`` points at the API root;
    the caller owns the client's lifetime.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self.http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise ApiError(None, f"{type(e).__name__}: {e}") from e

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        response = await self._send("GET", url, params=params)
        _ensure_success(response)
        return response

    async def _get_model(self, url: str, model: type[M], params: dict[str, Any] | None = None) -> M:
        response = await self._get(url, params)
        data = response.json()
        return model.model_validate(data or {})

    async def _get_list(self, url: str, model: type[M], params: dict[str, Any] | None = None) -> list[M]:
        response = await self._get(url, params)
        return TypeAdapter(list[model]).validate_python(response.json() or [])

    # ---------------------------------------------------------------------
    # Guest / admin
    # ---------------------------------------------------------------------

    async def get_guest_info(self) -> GuestInfo:
        return await self._get_model("api/Guest/Info", GuestInfo)

    async def seed(self, count: int | None = None) -> None:
        count = count if count is not None else get_settings().seed_default_count
        await self._get("api/Admin/Seed", {"count": count})

    async def remove_seed(self, seeded: bool = True) -> None:
        await self._get("api/Admin/RemoveSeed", {"seeded": _flag(seeded)})

    # ---------------------------------------------------------------------
    # Friends
    # ---------------------------------------------------------------------

    async def read_friends(
        self,
        seeded: bool = False,
        flat: bool = True,
        filter: str | None = None,
        page_nr: int = 0,
        page_size: int = 50,
    ) -> ResponsePage[FriendListItem]:
        params: dict[str, Any] = {
            "seeded": _flag(seeded),
            "flat": _flag(flat),
            "pageNr": page_nr,
            "pageSize": page_size,
        }
        if filter and filter.strip():
            params["filter"] = filter
        return await self._get_model("api/Friends/Read", ResponsePage[FriendListItem], params)

    async def read_friend_details_page(
        self,
        seeded: bool,
        page_nr: int,
        page_size: int,
    ) -> ResponsePage[FriendDetails]:
        """Flat friends listing decoded as details (scalars + address, no relations)."""
        params = {
            "seeded": _flag(seeded),
            "flat": "true",
            "pageNr": page_nr,
            "pageSize": page_size,
        }
        return await self._get_model("api/Friends/Read", ResponsePage[FriendDetails], params)

    async def list_friends(
        self,
        country: str | None = None,
        city: str | None = None,
    ) -> list[FriendLocationItem]:
        params = {}
        if country and country.strip():
            params["country"] = country.strip()
        if city and city.strip():
            params["city"] = city.strip()
        return await self._get_list("api/Friends/List", FriendLocationItem, params or None)

    async def update_friend(self, friend_id: str, body: FriendUpdateRequest) -> ApiResult:
        """PUT the edit; validation failures come back as an ApiResult instead of raising."""
        response = await self._send(
            "PUT",
            f"api/Friends/UpdateItem/{_segment(friend_id)}",
            json=body.to_wire(),
        )
        if response.is_success:
            return ApiResult.success()
        if response.status_code == 400:
            return ApiResult.from_bad_request_body(response.text)
        return ApiResult.fail(
            f"HTTP {response.status_code} ({response.reason_phrase}). Body: {response.text}"
        )

    # ---------------------------------------------------------------------
    # Overview
    # ---------------------------------------------------------------------

    async def get_friends_by_country(self) -> list[FriendsByCountry]:
        return await self._get_list("api/overview/friends-by-country", FriendsByCountry)

    async def get_friends_by_country_city(self) -> list[FriendsByCountryCity]:
        return await self._get_list("api/overview/friends-by-country-city", FriendsByCountryCity)

    async def get_city_overview(self, country: str | None) -> list[CityFriendsPets]:
        if not country or not country.strip():
            return []
        return await self._get_list(f"api/overview/cities/{_segment(country)}", CityFriendsPets)

    # ---------------------------------------------------------------------
    # Pets / quotes
    # ---------------------------------------------------------------------

    async def _read_related_page(
        self,
        controller: str,
        model: type[M],
        seeded: bool,
        page_nr: int,
        page_size: int,
        friend_id: Optional[str],
    ) -> ResponsePage[M]:
        params: dict[str, Any] = {
            "seeded": _flag(seeded),
            "flat": "false",
            "pageNr": page_nr,
            "pageSize": page_size,
        }
        if friend_id:
            params["friendId"] = friend_id
        return await self._get_model(f"api/{controller}/Read", ResponsePage[model], params)

    async def read_pets_page(
        self,
        seeded: bool,
        page_nr: int = 0,
        page_size: int = 200,
        friend_id: Optional[str] = None,
    ) -> ResponsePage[PetRecord]:
        return await self._read_related_page("Pets", PetRecord, seeded, page_nr, page_size, friend_id)

    async def read_quotes_page(
        self,
        seeded: bool,
        page_nr: int = 0,
        page_size: int = 200,
        friend_id: Optional[str] = None,
    ) -> ResponsePage[QuoteRecord]:
        return await self._read_related_page("Quotes", QuoteRecord, seeded, page_nr, page_size, friend_id)

    async def add_pet(self, friend_id: str, pet: PetCreateRequest) -> None:
        payload = pet.model_copy(update={"friend_id": friend_id}).to_wire()
        response = await self._send("POST", "api/Pets/CreateItem", json=payload)
        _ensure_success(response)

    async def add_quote(self, friend_id: str, quote: QuoteCreateRequest) -> None:
        """Create a quote owned by friend_id.

        Sends the many-to-many payload (``friendIds``) first; a 400 means the
        API wants the singular ``friendId``, so retry once with that.
        """
        text = quote.quote_text.strip()
        author = quote.author.strip()
        first = {"quoteText": text, "author": author, "friendIds": [friend_id]}
        response = await self._send("POST", "api/Quotes/CreateItem", json=first)
        if response.is_success:
            return
        if response.status_code != 400:
            _ensure_success(response)
        logger.warning("AddQuote with friendIds rejected, retrying with friendId: %s", response.text[:500])

        second = {"quoteText": text, "author": author, "friendId": friend_id}
        response = await self._send("POST", "api/Quotes/CreateItem", json=second)
        _ensure_success(response)

    async def delete_pet(self, pet_id: str) -> None:
        response = await self._send("DELETE", f"api/Pets/DeleteItem/{_segment(pet_id)}")
        _ensure_success(response)

    async def delete_quote(self, quote_id: str) -> None:
        response = await self._send("DELETE", f"api/Quotes/DeleteItem/{_segment(quote_id)}")
        _ensure_success(response)


def create_http_client(base_url: str | None = None, timeout: float | None = None) -> httpx.AsyncClient:
    s = get_settings()
    base = (base_url or s.goodfriends_api_base_url).rstrip("/") + "/"
    return httpx.AsyncClient(
        base_url=base,
        timeout=timeout if timeout is not None else s.api_timeout_seconds,
        headers={"Accept": "application/json"},
    )
