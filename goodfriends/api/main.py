from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from goodfriends.api.routers import ROUTERS
from goodfriends.api.services.friends import FriendValidationError
from goodfriends.core import get_settings, limiter

VALIDATION_TITLE = "One or more validation errors occurred."
_SECTIONS = {"body", "query", "path", "header", "cookie"}


def error_key(loc) -> str:
    """``("body", "address", "zipCode")`` -> ``Address.ZipCode``; ``$`` for the body itself."""
    parts = [str(p) for p in loc if isinstance(p, str) and p not in _SECTIONS]
    if not parts:
        return "$"
    return ".".join(p[:1].upper() + p[1:] for p in parts)


def validation_problem(errors: dict[str, list[str]]) -> dict:
    return {"title": VALIDATION_TITLE, "status": status.HTTP_400_BAD_REQUEST, "errors": errors}


def request_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        msg = str(err.get("msg", ""))
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        errors.setdefault(error_key(err.get("loc", ())), []).append(msg)
    return errors


async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=validation_problem(request_errors(exc)),
    )


async def friend_validation_handler(_request: Request, exc: FriendValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=validation_problem(exc.errors))


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield


app = FastAPI(
    title="GoodFriends API",
    description="Friends, their addresses, pets and quotes.",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(FriendValidationError, friend_validation_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in ROUTERS:
    app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
