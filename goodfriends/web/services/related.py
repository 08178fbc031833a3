"""Fetch a friend's pets or quotes from an API whose relation filter is unreliable.

A non-empty server-filtered page is trusted. An empty one is ambiguous (no
related items, or the filter was ignored), so one broad unfiltered page is
read and filtered client-side with ``belongs_to``. Only "zero results"
triggers the fallback; request failures propagate.
"""

import logging
from enum import Enum

from goodfriends.core import get_settings
from goodfriends.schemas import PetItem, QuoteItem
from goodfriends.web.providers import FriendsApiClient
from goodfriends.web.services.relations import belongs_to, to_pet, to_quote

logger = logging.getLogger(__name__)


class RelatedKind(str, Enum):
    PETS = "pets"
    QUOTES = "quotes"


_NORMALIZERS = {
    RelatedKind.PETS: to_pet,
    RelatedKind.QUOTES: to_quote,
}


async def _read_page(
    api: FriendsApiClient,
    kind: RelatedKind,
    seeded: bool,
    page_size: int,
    friend_id: str | None,
):
    if kind is RelatedKind.PETS:
        return await api.read_pets_page(seeded, page_nr=0, page_size=page_size, friend_id=friend_id)
    return await api.read_quotes_page(seeded, page_nr=0, page_size=page_size, friend_id=friend_id)


async def fetch_related(
    api: FriendsApiClient,
    parent_id: str,
    kind: RelatedKind,
    seeded: bool,
    page_size: int | None = None,
    scan_page_size: int | None = None,
) -> list[PetItem] | list[QuoteItem]:
    """Normalized pets or quotes of parent_id; empty list when none are found."""
    s = get_settings()
    page_size = s.related_page_size if page_size is None else page_size
    scan_page_size = s.related_scan_page_size if scan_page_size is None else scan_page_size
    normalize = _NORMALIZERS[kind]

    page = await _read_page(api, kind, seeded, page_size, parent_id)
    if page.items:
        logger.debug("%s server-filtered count=%d friend=%s", kind.value, len(page.items), parent_id)
        return [normalize(item) for item in page.items]

    scan = await _read_page(api, kind, seeded, scan_page_size, None)
    matched = [normalize(item) for item in scan.items if belongs_to(item, parent_id)]
    logger.info(
        "%s fallback scan count=%d matched=%d friend=%s",
        kind.value,
        len(scan.items),
        len(matched),
        parent_id,
    )
    return matched
