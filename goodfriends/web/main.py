from contextlib import asynccontextmanager

from fastapi import FastAPI

from goodfriends.web.providers import create_http_client
from goodfriends.web.routers import ROUTERS


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http = create_http_client()
    try:
        yield
    finally:
        await app.state.http.aclose()


app = FastAPI(
    title="GoodFriends Web",
    description="Browse and edit friends, their pets and quotes.",
    version="0.1.0",
    lifespan=lifespan,
)

for router in ROUTERS:
    app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
