"""Friend details view: the friend plus its pets and quotes, tolerating partial failure."""

import logging
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from goodfriends.core import get_settings
from goodfriends.schemas import FriendDetails, PetItem, QuoteItem
from goodfriends.web.providers import ApiError, FriendsApiClient
from goodfriends.web.services.related import RelatedKind, fetch_related
from goodfriends.web.services.relations import same_id

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of one related-collection fetch: a value or an error message."""

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> "FetchResult[T]":
        return cls(error=message)


@dataclass
class FriendDetailsView:
    friend: FriendDetails
    errors: list[str] = field(default_factory=list)

    @property
    def error_message(self) -> str | None:
        """Non-fatal diagnostics joined for display; None when everything loaded."""
        return " | ".join(self.errors) if self.errors else None


@dataclass(frozen=True)
class NotFound:
    friend_id: str
    pages_scanned: int = 0

    @property
    def message(self) -> str:
        return f"Friend not found for id={self.friend_id}"


async def find_friend(
    api: FriendsApiClient,
    friend_id: str,
    seeded: bool,
    page_size: int | None = None,
    max_pages: int | None = None,
) -> FriendDetails | NotFound:
    """Locate a friend by paging the flat listing; the relation-joining single-item read is too slow."""
    s = get_settings()
    page_size = s.friend_lookup_page_size if page_size is None else page_size
    max_pages = s.friend_lookup_max_pages if max_pages is None else max_pages

    scanned = 0
    for page_nr in range(max_pages):
        page = await api.read_friend_details_page(seeded, page_nr, page_size)
        scanned += 1
        for friend in page.items:
            if same_id(friend.friend_id, friend_id):
                return friend
        if len(page.items) < page_size:
            break
    logger.info("Friend %s not found after %d page(s) (seeded=%s)", friend_id, scanned, seeded)
    return NotFound(friend_id=friend_id, pages_scanned=scanned)


async def _fetch(
    api: FriendsApiClient,
    friend_id: str,
    kind: RelatedKind,
    seeded: bool,
) -> FetchResult[list]:
    try:
        items = await fetch_related(api, friend_id, kind, seeded)
    except (ApiError, ValueError) as e:
        # ValueError covers undecodable or malformed pages
        logger.warning("Failed to load %s for friend %s: %s", kind.value, friend_id, e)
        return FetchResult.failure(str(e))
    logger.info("Loaded %d %s for friend %s", len(items), kind.value, friend_id)
    return FetchResult.success(items)


async def load_details(
    api: FriendsApiClient,
    friend_id: str,
    seeded: bool,
) -> FriendDetailsView | NotFound:
    """Friend + pets + quotes. A failed collection renders empty with a diagnostic.

    Lookup failures (the friend itself) propagate as ApiError.
    """
    found = await find_friend(api, friend_id, seeded)
    if isinstance(found, NotFound):
        return found

    pets: FetchResult[list[PetItem]] = await _fetch(api, found.friend_id, RelatedKind.PETS, seeded)
    quotes: FetchResult[list[QuoteItem]] = await _fetch(api, found.friend_id, RelatedKind.QUOTES, seeded)

    errors = [
        f"Could not load {kind.value}: {result.error}"
        for kind, result in ((RelatedKind.PETS, pets), (RelatedKind.QUOTES, quotes))
        if not result.ok
    ]
    friend = found.model_copy(
        update={
            "pets": pets.value if pets.ok else [],
            "quotes": quotes.value if quotes.ok else [],
        }
    )
    return FriendDetailsView(friend=friend, errors=errors)
