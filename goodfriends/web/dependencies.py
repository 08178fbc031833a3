from pathlib import Path

from fastapi import Query, Request
from fastapi.templating import Jinja2Templates

from goodfriends.core import get_settings
from goodfriends.web.providers import FriendsApiClient

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def get_api(request: Request) -> FriendsApiClient:
    """API client over the app-wide httpx client opened in the lifespan."""
    return FriendsApiClient(request.app.state.http)


def get_seeded(seeded: bool | None = Query(None)) -> bool:
    """Dataset partition for this request: ?seeded=... or the configured default."""
    return get_settings().seeded_mode if seeded is None else seeded
