from .friends import friends_service
from .guest import guest_service
from .overview import overview_service
from .pets import pets_service
from .quotes import quotes_service
from .seed import seed_service

__all__ = [
    "friends_service",
    "guest_service",
    "overview_service",
    "pets_service",
    "quotes_service",
    "seed_service",
]
