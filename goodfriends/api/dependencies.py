import re
import uuid
from dataclasses import dataclass
from typing import AsyncGenerator

from fastapi import HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.db.session import async_session
from goodfriends.core import FRIEND_FILTER_PATTERN, LOCATION_EXTRA_CHARS

FILTER_MESSAGE = "Filter can only contain letters (a-z), numbers (0-9), and spaces."


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def parse_bool(value: str | None, name: str) -> bool:
    text = (value or "").strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise bad_request(f"{name} must be true or false, got '{value}'.")


def parse_int(value: str | None, name: str) -> int:
    try:
        return int((value or "").strip())
    except ValueError:
        raise bad_request(f"{name} must be an integer, got '{value}'.") from None


def parse_id(value: str | None, name: str = "id") -> str:
    """Canonical lower-case GUID text, or 400."""
    try:
        return str(uuid.UUID((value or "").strip()))
    except ValueError:
        raise bad_request(f"Invalid {name}.") from None


def parse_filter(value: str | None) -> str | None:
    """Validated search filter, trimmed and lower-cased; None when empty."""
    if not value:
        return None
    if not re.fullmatch(FRIEND_FILTER_PATTERN, value):
        raise bad_request(FILTER_MESSAGE)
    return value.strip().lower() or None


def is_safe_location(value: str) -> bool:
    """Letters (any script), digits, whitespace, hyphen and apostrophe."""
    return all(c.isalnum() or c.isspace() or c in LOCATION_EXTRA_CHARS for c in value)


@dataclass(frozen=True)
class ReadArgs:
    seeded: bool
    flat: bool
    filter: str | None
    page_nr: int
    page_size: int


async def get_read_args(
    seeded: str = Query("true"),
    flat: str = Query("true"),
    filter: str | None = Query(None),
    page_nr: str = Query("0", alias="pageNr"),
    page_size: str = Query("10", alias="pageSize"),
) -> ReadArgs:
    """Paged-read query string, parsed the same way by every controller."""
    args = ReadArgs(
        seeded=parse_bool(seeded, "seeded"),
        flat=parse_bool(flat, "flat"),
        filter=parse_filter(filter),
        page_nr=parse_int(page_nr, "pageNr"),
        page_size=parse_int(page_size, "pageSize"),
    )
    if args.page_nr < 0 or args.page_size < 1:
        raise bad_request("pageNr must be >= 0 and pageSize >= 1.")
    return args
