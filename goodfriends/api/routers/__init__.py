from .admin import router as admin_router
from .friends import router as friends_router
from .guest import router as guest_router
from .overview import router as overview_router
from .pets import router as pets_router
from .quotes import router as quotes_router

ROUTERS = (friends_router, pets_router, quotes_router, overview_router, admin_router, guest_router)

__all__ = [
    "ROUTERS",
    "admin_router",
    "friends_router",
    "guest_router",
    "overview_router",
    "pets_router",
    "quotes_router",
]
