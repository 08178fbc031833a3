"""Web client logic: relation normalization, resilient related fetch, details loading."""

from goodfriends.web.services.relations import belongs_to, same_id, to_pet, to_quote
from goodfriends.web.services.related import RelatedKind, fetch_related
from goodfriends.web.services.details import (
    FetchResult,
    FriendDetailsView,
    NotFound,
    find_friend,
    load_details,
)

__all__ = [
    "belongs_to",
    "same_id",
    "to_pet",
    "to_quote",
    "RelatedKind",
    "fetch_related",
    "FetchResult",
    "FriendDetailsView",
    "NotFound",
    "find_friend",
    "load_details",
]
