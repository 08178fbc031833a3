from goodfriends.web.routers.edit import router as edit_router
from goodfriends.web.routers.friends import router as friends_router
from goodfriends.web.routers.home import router as home_router
from goodfriends.web.routers.overview import router as overview_router
from goodfriends.web.routers.seed import router as seed_router

ROUTERS = (home_router, edit_router, friends_router, overview_router, seed_router)

__all__ = ["ROUTERS"]
